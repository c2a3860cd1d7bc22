from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from colorfit.api.v1 import router as v1_router
from colorfit.config import config
from colorfit.schemas import HealthResponse
from colorfit.utils.logging import get_logger

SERVICE_NAME = "colorfit"
SERVICE_VERSION = "1.0.0"

logger = get_logger()

app = FastAPI(
    title="ColorFit Palette Service",
    description="Perceptual palette generation, cohesion scoring and room/wardrobe color auto-fill",
    version=SERVICE_VERSION
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.allowed_origins(),
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
)

app.include_router(v1_router)


@app.get("/healthz", response_model=HealthResponse)
def health_check():
    """Health check endpoint"""
    return {
        "ok": True,
        "service": SERVICE_NAME,
        "version": SERVICE_VERSION,
    }


@app.get("/")
def root():
    """Root endpoint"""
    return {
        "message": "ColorFit Palette Service",
        "version": SERVICE_VERSION,
        "docs": "/docs"
    }


logger.info("ColorFit service initialized", extra={"version": SERVICE_VERSION, "log_level": config.LOG_LEVEL})
