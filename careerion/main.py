"""
Careerion - Main Application

FastAPI backend with:
- MongoDB for users, jobs, companies and applications
- Google Gemini for the career assistant
- JWT authentication (email/password and Google sign-in)
- Admin panel API

Run: uvicorn careerion.main:app --reload
 or: python -m careerion.main
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from careerion.api.routes import api_router
from careerion.core.config import get_settings, mask_key
from careerion.core.errors import CareerionError, ConfigurationError
from careerion.db.mongodb import check_mongo_connection, get_mongo_db, init_mongo_indexes
from careerion.services.seed import create_sample_data
from careerion.utils.logger import setup_logging

settings = get_settings()
setup_logging(settings.debug)

logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title="Careerion",
    description="""
    Career-guidance backend.

    ## Features
    - **Authentication**: signup/login with JWT, Google sign-in
    - **Profiles**: career profile storage used to personalize advice
    - **AI Chat**: career-focused assistant backed by Google Gemini
    - **Admin**: CRUD over users, jobs, companies and applications
    """,
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API routes
app.include_router(api_router, prefix="/api")


# ============================================================
# ERROR HANDLERS: every failure is {"error": "..."}
# ============================================================

@app.exception_handler(CareerionError)
async def careerion_error_handler(request: Request, exc: CareerionError):
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None)
    )


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    details = [
        {"field": ".".join(str(p) for p in err.get("loc", ())[1:]), "message": err.get("msg")}
        for err in exc.errors()
    ]
    return JSONResponse(status_code=400, content={"error": "Invalid request body", "details": details})


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error in %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"error": "Server error"})


# ============================================================
# STARTUP
# ============================================================

def check_configuration() -> None:
    """
    Log the state of every secret. Raises ConfigurationError when production
    would otherwise run on the development JWT secret.
    """
    if not settings.jwt_secret:
        if settings.is_production:
            raise ConfigurationError("JWT_SECRET must be set when ENVIRONMENT=production")
        logger.warning("JWT_SECRET is not set. Falling back to an insecure default. "
                       "Set JWT_SECRET in your .env for production.")

    if not settings.gemini_api_key:
        logger.error("GEMINI_API_KEY is MISSING. /api/chat will fail until it is set.")
    else:
        logger.info("GEMINI_API_KEY detected: %s", mask_key(settings.gemini_api_key))
    logger.info("Using Gemini model: %s", settings.model_name)


@app.on_event("startup")
async def startup_event():
    """Validate config, check MongoDB, create indexes and seed sample data."""
    check_configuration()

    if not check_mongo_connection():
        raise RuntimeError(f"Cannot reach MongoDB at {settings.mongo_uri}")
    logger.info("MongoDB connected successfully.")

    db = get_mongo_db()
    init_mongo_indexes(db)
    if settings.seed_sample_data:
        create_sample_data(db)


def run() -> None:
    import uvicorn

    uvicorn.run("careerion.main:app", host="0.0.0.0", port=settings.port, reload=settings.debug)


if __name__ == "__main__":
    run()
