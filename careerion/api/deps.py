"""
Route dependencies - build services from the injected database and gateway.
"""

from fastapi import Depends
from pymongo.database import Database

from careerion.db.mongodb import get_database
from careerion.services.chat_service import ChatService
from careerion.services.gemini_client import GeminiClient, get_ai_gateway
from careerion.services.mongo_service import (
    UserService,
    JobService,
    CompanyService,
    ApplicationService,
)


def get_user_service(db: Database = Depends(get_database)) -> UserService:
    return UserService(db)


def get_job_service(db: Database = Depends(get_database)) -> JobService:
    return JobService(db)


def get_company_service(db: Database = Depends(get_database)) -> CompanyService:
    return CompanyService(db)


def get_application_service(db: Database = Depends(get_database)) -> ApplicationService:
    return ApplicationService(db)


def get_chat_service(gateway: GeminiClient = Depends(get_ai_gateway)) -> ChatService:
    return ChatService(gateway)
