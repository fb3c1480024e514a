"""FastAPI application entry point. Registers middleware, exception handlers, API routers and upload serving."""

import logging
import os
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from app.config import settings
from app.database import Base, engine
from app.errors import PortfolioError
import app.models  # noqa: F401 - registers model metadata
from app.routers import auth, skills, sosmed, work_experiences, projects, about, uploads

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Portfolio CMS",
    description="Admin dashboard API and public landing data for a personal portfolio",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register all routers
app.include_router(auth.router)
app.include_router(skills.router)
app.include_router(sosmed.router)
app.include_router(work_experiences.router)
app.include_router(projects.router)
app.include_router(about.router)
app.include_router(uploads.router)


@app.exception_handler(PortfolioError)
async def handle_portfolio_error(request: Request, exc: PortfolioError):
    if exc.status_code >= 500:
        logger.error("[api] %s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.message, "error": exc.error_code},
    )


@app.on_event("startup")
def ensure_schema():
    Base.metadata.create_all(bind=engine)


@app.get("/api/health")
def health_check():
    return {"status": "ok", "service": "Portfolio CMS"}


# Static file serving for uploads
os.makedirs(settings.UPLOAD_DIR, exist_ok=True)
app.mount("/uploads", StaticFiles(directory=settings.UPLOAD_DIR), name="uploads")
