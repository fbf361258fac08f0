import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from services.assessment_engine.models import (
    AssessmentError,
    InconsistentScaleError,
    InvalidAnswerError,
    SessionCompleteError,
)
from soulsync.core.config import get_settings
from soulsync.core.exceptions import SoulSyncError
from soulsync.core.logging_config import setup_logging
from soulsync.db.session import init_db
from soulsync.routers import assessment as assessment_router
from soulsync.routers import coach as coach_router
from soulsync.routers import journal as journal_router
from soulsync.routers import profile as profile_router
from soulsync.routers import rituals as rituals_router
from soulsync.routers import users as users_router

settings = get_settings()
setup_logging(settings.log_level)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    await init_db()
    logger.info(f"{settings.app_name} started ({settings.environment})")
    yield


app = FastAPI(title=settings.app_name, lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# --- Include Routers ---
app.include_router(assessment_router.router, prefix="/api", tags=["assessment"])
app.include_router(profile_router.router, prefix="/api", tags=["chakra-profile"])
app.include_router(journal_router.router, prefix="/api", tags=["journal"])
app.include_router(coach_router.router, prefix="/api", tags=["coach"])
app.include_router(rituals_router.router, prefix="/api", tags=["healing-rituals"])
app.include_router(users_router.router, prefix="/api", tags=["users"])


# --- Exception Handlers ---
# HTTP status per assessment error; other subclasses are catalogue defects
ASSESSMENT_ERROR_STATUS = {
    InvalidAnswerError: (400, "invalid_answer"),
    SessionCompleteError: (409, "session_complete"),
    InconsistentScaleError: (500, "inconsistent_scale"),
}


@app.exception_handler(SoulSyncError)
async def soulsync_error_handler(request: Request, exc: SoulSyncError):
    if exc.status_code >= 500:
        logger.error(f"{exc.error_code} on {request.url.path}: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.exception_handler(AssessmentError)
async def assessment_error_handler(request: Request, exc: AssessmentError):
    status_code, error_code = ASSESSMENT_ERROR_STATUS.get(type(exc), (500, "assessment_error"))
    if status_code >= 500:
        logger.error(f"Assessment catalogue error on {request.url.path}: {exc}")
        message = "Internal Server Error"
    else:
        message = str(exc)
    return JSONResponse(status_code=status_code, content={"error": error_code, "message": message, "details": None})


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled exception on {request.url.path}: {exc}")
    return JSONResponse(
        status_code=500,
        content={"error": "internal_error", "message": "Internal Server Error", "details": None},
    )


@app.get("/api/health", tags=["Health Check"])
async def health_check():
    return {"status": "ok"}
