"""
FastAPI entrypoint for Debter backend application.
"""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from debter.core.config import settings
from debter.core.logging import setup_logging
from debter.api.router import api_router

setup_logging()

app = FastAPI(
    title=f"{settings.APP_NAME} API",
    description="Backend API for sharing expenses within a room",
    version="1.0.0"
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API routes
app.include_router(api_router, prefix="/api")


@app.get("/")
def root():
    """Health check endpoint."""
    return {"message": "Debter API is running"}


@app.get("/health")
def health():
    """Health check endpoint."""
    return {"status": "healthy"}
