"""
Career Relevance Classifier

Decides whether a chat message is something the career assistant should
answer. Three signals, any of which is enough:

1. a career / job-market vocabulary term appears in the message
2. a career-guidance phrase appears in the message
3. the message asks a question (what/how/...) about doing something
   (study/learn/become/...)

Matching is plain lowercase substring search. The classifier is permissive
on purpose: a false negative sends the user a canned redirect instead of an
answer.
"""

from typing import Callable, Iterable, Tuple

# Type of the predicate the chat service accepts
RelevancePredicate = Callable[[object], bool]


CAREER_KEYWORDS: Tuple[str, ...] = (
    # Core career terms
    "career", "job", "work", "profession", "occupation", "employment", "workplace", "vocation",
    "resume", "cv", "interview", "hiring", "recruitment", "application", "portfolio",

    # Skills and development
    "skill", "training", "education", "learning", "course", "certification", "certificate",
    "experience", "qualification", "competency", "expertise", "development", "upskill", "reskill",
    "bootcamp", "workshop", "seminar", "degree", "diploma", "license", "accreditation",

    # Industry and roles
    "industry", "company", "business", "role", "position", "title", "responsibility", "duties",
    "manager", "engineer", "developer", "analyst", "consultant", "specialist", "coordinator",
    "director", "executive", "supervisor", "lead", "senior", "junior", "intern", "apprentice",

    # Guidance
    "advice", "guidance", "recommendation", "suggest", "help", "path", "opportunity", "options",
    "growth", "promotion", "salary", "benefits", "transition", "change", "switch", "pivot",
    "advancement", "progression", "future", "goals", "planning", "strategy",

    # Professional terms
    "professional", "corporate", "freelance", "remote", "office", "team", "project", "client",
    "leadership", "management", "networking", "mentor", "colleague", "coworker", "boss",
    "startup", "enterprise", "nonprofit", "government", "public", "private", "sector",

    # Job search
    "apply", "jobsearch", "linkedin", "indeed", "glassdoor", "headhunter",
    "recruiter", "hr", "human resources", "onboarding", "probation", "contract", "fulltime",
    "parttime", "temporary", "permanent", "seasonal", "gig", "freelancing",

    # Compensation
    "wage", "income", "compensation", "bonus", "commission", "equity", "stock",
    "healthcare", "insurance", "retirement", "401k", "pension", "pto", "vacation", "sick leave",

    # Work environment
    "culture", "environment", "atmosphere", "values", "mission", "vision", "diversity",
    "inclusion", "worklife", "balance", "flexibility", "hybrid", "onsite", "wfh",

    # Performance
    "performance", "review", "evaluation", "feedback", "kpi", "metrics", "achievement",
    "recognition", "award", "accomplishment", "success", "failure", "improvement",

    # Fields
    "technology", "software", "programming", "coding", "data", "analytics", "marketing",
    "sales", "finance", "accounting", "design", "creative",
    "research", "science", "engineering", "manufacturing", "retail", "hospitality",
    "construction", "agriculture", "transportation", "logistics", "legal", "law",
)

CAREER_PHRASES: Tuple[str, ...] = (
    "what should i do", "what can i do", "how do i", "how can i", "where do i start",
    "i want to", "i need to", "help me", "advice on", "guidance on", "tips for",
    "recommend", "suggest", "best way to", "how to become", "how to get into",
    "career path", "job market", "work from home", "find a job", "get a job",
    "change careers", "switch jobs", "new field", "different industry",
    "improve my", "develop my", "learn about", "study for", "prepare for",
    "interview tips", "resume help", "cover letter", "job application",
    "salary negotiation", "pay raise", "promotion", "advancement",
    "work experience", "internship", "entry level", "graduate program",
    "professional development", "skill building", "certification program",
    "industry trends", "job outlook", "employment opportunities",
    "networking tips", "professional network", "career fair", "job fair",
    "work culture", "company culture", "workplace", "office environment",
    "remote work", "freelancing", "consulting", "entrepreneurship",
    "side hustle", "passive income", "career goals", "professional goals",
)

QUESTION_WORDS: Tuple[str, ...] = ("what", "how", "where", "when", "why", "which", "who")

WORK_CONTEXT_WORDS: Tuple[str, ...] = (
    "study", "learn", "become", "get", "find", "choose", "decide", "start",
)


class CareerRelevanceClassifier:
    """
    Callable predicate: classifier(message) -> bool.

    Vocabularies are constructor arguments so tests and deployments can
    widen or narrow the topic domain without touching the chat flow.
    """

    def __init__(
        self,
        keywords: Iterable[str] = CAREER_KEYWORDS,
        phrases: Iterable[str] = CAREER_PHRASES,
        question_words: Iterable[str] = QUESTION_WORDS,
        work_context_words: Iterable[str] = WORK_CONTEXT_WORDS,
    ):
        self.keywords = tuple(k.lower() for k in keywords)
        self.phrases = tuple(p.lower() for p in phrases)
        self.question_words = tuple(w.lower() for w in question_words)
        self.work_context_words = tuple(w.lower() for w in work_context_words)

    @staticmethod
    def _contains_any(text: str, terms: Tuple[str, ...]) -> bool:
        return any(term in text for term in terms)

    def has_keyword(self, text: str) -> bool:
        return self._contains_any(text, self.keywords)

    def has_phrase(self, text: str) -> bool:
        return self._contains_any(text, self.phrases)

    def is_work_question(self, text: str) -> bool:
        return (
            self._contains_any(text, self.question_words)
            and self._contains_any(text, self.work_context_words)
        )

    def __call__(self, message: object) -> bool:
        if not message or not isinstance(message, str):
            return False
        text = message.lower()
        return self.has_keyword(text) or self.has_phrase(text) or self.is_work_question(text)


default_classifier = CareerRelevanceClassifier()


def is_career_related(message: object) -> bool:
    """Classify with the default vocabularies."""
    return default_classifier(message)
