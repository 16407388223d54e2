"""
Main FastAPI application entry point.
Configures the application, middleware, and includes routers.
"""
from dotenv import load_dotenv

# Load environment variables from .env file first
load_dotenv()

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from .config import settings
from .database import run_migrations
from .exceptions import register_exception_handlers
from .core.middleware import setup_middlewares
from .core.static import fallback_response
from .core.uploads import UPLOAD_URL_PREFIX, ensure_upload_dir
from .records.router import router as records_router
from .exams.router import router as exams_router
from .triage.client import InferenceClient, InferenceConfig
from .triage.router import router as triage_router

# Configure logging
logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)

# Uploads are served from this directory, so it must exist before mounting
ensure_upload_dir(settings.upload_dir)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Apply pending migrations and build the inference client once per process."""
    logger.info("🚀 Starting MedVibe API...")
    run_migrations()
    app.state.inference_client = InferenceClient(InferenceConfig.from_settings(settings))
    logger.info(f"🤖 Triage model {settings.ollama_model} at {settings.ollama_host}")
    yield


# Create FastAPI application
app = FastAPI(
    title="MedVibe API",
    description="Prontuários, exames e triagem assistida por IA",
    version="1.0.0",
    lifespan=lifespan
)

# Register exception handlers
register_exception_handlers(app)

# Configure CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Setup custom middleware
setup_middlewares(app)

# Include routers
app.include_router(triage_router)
app.include_router(records_router)
app.include_router(exams_router)

app.mount(f"/{UPLOAD_URL_PREFIX}", StaticFiles(directory=settings.upload_dir), name="uploads")


# Health check endpoint
@app.get("/health")
async def health_check():
    """
    Health check endpoint for monitoring.

    Returns:
        dict: Liveness flag
    """
    return {"ok": True}


@app.api_route(
    "/{full_path:path}",
    methods=["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE"],
    include_in_schema=False,
)
async def fallback(full_path: str, request: Request):
    """Reserved prefixes answer 404 with method and path, the rest is frontend assets."""
    return fallback_response(request, settings.static_dir)
