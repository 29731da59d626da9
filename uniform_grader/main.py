"""
FastAPI Backend for the Uniform Grader
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from fastapi.responses import JSONResponse

from uniform_grader.routes import grading
from uniform_grader.config import settings
from uniform_grader.core import BaseAPIException

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

VERSION = "1.0.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown events"""
    logger.info("Starting Uniform Grader API...")
    logger.info(f"Environment: {'development' if settings.DEBUG else 'production'}")

    for directory in [settings.UPLOADS_DIR, settings.EXPORTS_DIR, settings.DATA_DIR]:
        directory.mkdir(parents=True, exist_ok=True)

    yield

    logger.info("Shutting down Uniform Grader API...")


app = FastAPI(
    title="Uniform Grader API",
    description="Grades school uniform photos from image brightness and color statistics",
    version=VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan
)

# CORS configuration for the web frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Global exception handlers
@app.exception_handler(BaseAPIException)
async def api_exception_handler(request: Request, exc: BaseAPIException):
    """Handle custom API exceptions"""
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "success": False,
            "error": exc.detail,
            "error_code": exc.error_code
        }
    )


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    """Handle unexpected exceptions"""
    logger.error(f"Unexpected error: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={
            "success": False,
            "error": "An unexpected error occurred",
            "error_code": "INTERNAL_ERROR"
        }
    )


app.include_router(grading.router, prefix="/api/grading", tags=["Grading"])

# Serve stored photos and exports
app.mount(settings.PHOTO_URL_PREFIX, StaticFiles(directory=str(settings.UPLOADS_DIR)), name="uploads")
app.mount("/static/exports", StaticFiles(directory=str(settings.EXPORTS_DIR)), name="exports")


@app.get("/")
async def root():
    """API root endpoint"""
    return {
        "name": "Uniform Grader API",
        "version": VERSION,
        "status": "running",
        "docs": "/docs",
        "redoc": "/redoc"
    }


@app.get("/health")
async def health_check():
    """Health check endpoint for monitoring"""
    return {
        "status": "healthy",
        "version": VERSION
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "uniform_grader.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        log_level="info"
    )
