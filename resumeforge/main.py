"""
Main application entry point - FastAPI app instance and configuration.
Run with: uvicorn resumeforge.main:app --reload
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from resumeforge import __version__
from resumeforge.core.config import settings
from resumeforge.routers import resume

# ---------------------------------------------------------------------------
# CREATE FASTAPI APPLICATION
# ---------------------------------------------------------------------------
app = FastAPI(
    title=settings.APP_NAME,
    version=__version__,
    debug=settings.DEBUG,
    docs_url="/docs",
    redoc_url="/redoc",
)

# ---------------------------------------------------------------------------
# CORS MIDDLEWARE
# ---------------------------------------------------------------------------
# The editor front-end is served from a different origin
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ---------------------------------------------------------------------------
# REGISTER ROUTERS
# ---------------------------------------------------------------------------
app.include_router(resume.router)


@app.get("/health", tags=["health"])
async def health():
    """Liveness probe; does not call the model."""
    return {"status": "ok", "app": settings.APP_NAME, "model": settings.GEMINI_MODEL}


@app.get("/health/ai", tags=["health"])
async def health_ai():
    """Readiness probe: one tiny generation against the configured model."""
    from resumeforge.ai.providers.gemini import gemini_provider

    healthy = await gemini_provider.health_check()
    return {"status": "ok" if healthy else "degraded", "provider": gemini_provider.provider_type.value}
