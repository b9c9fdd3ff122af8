"""
Careerion
Career-guidance backend: accounts, career profiles, a Gemini-backed career
assistant and an admin panel.

Architecture:
- MongoDB: users, jobs, companies, applications
- Google Gemini: chat answers and career recommendations
- FastAPI: HTTP API under /api
"""

__version__ = "1.0.0"
