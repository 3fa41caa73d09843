import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from app.config import get_settings
from app.errors import AppError
from app.routers import messages

settings = get_settings()
logging.basicConfig(level=settings.log_level.upper())
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    logger.info("Messagely API starting")
    yield
    # Shutdown
    from app.database import engine
    await engine.dispose()


app = FastAPI(
    title="Messagely API",
    description="Messages between users with SMS notifications",
    version="1.0.0",
    lifespan=lifespan
)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    return JSONResponse(exc.to_dict(), status_code=exc.status_code)


app.include_router(messages.router, prefix="/api/v1/messages", tags=["Messages"])


@app.get("/health")
async def health_check():
    return {"status": "healthy"}
