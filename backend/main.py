"""FastAPI application entry point."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api import users
from api.error_handlers import register_error_handlers
from config import settings
from logging_config import setup_logging

setup_logging()

app = FastAPI(
    title="User Service",
    description="Per-user preference management",
    version="1.0.0",
)

# CORS configuration for frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

# Include API routers
app.include_router(users.router)


@app.get("/health")
def health_check():
    """Health check endpoint."""
    return {"status": "ok"}
