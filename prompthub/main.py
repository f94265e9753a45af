# prompthub/main.py
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from prompthub.api import stats, prompts, user, github
from prompthub.exceptions import PromptHubError
from prompthub.models.base import init_db, close_db
from prompthub.services.scheduler_service import scheduler_service
from prompthub.utils.logger import setup_logger
from prompthub.config import settings
from prompthub import __version__
import uvicorn

logger = setup_logger()

app = FastAPI(
    title="PromptHub API",
    description="Prompt sharing community - counters, statistics and user data",
    version=__version__,
    debug=settings.debug
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.exception_handler(PromptHubError)
async def prompthub_error_handler(request: Request, exc: PromptHubError):
    if exc.status_code >= 500:
        logger.error(f" {request.method} {request.url.path} failed: {exc.message} ({exc.__cause__!r})")
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception):
    logger.exception(f" Unhandled error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(status_code=500, content={"error": "Internal server error"})

@app.on_event("startup")
async def startup_event():
    logger.info(" PromptHub API starting")
    logger.info(f" Debug mode: {settings.debug}")
    logger.info(f" GitHub repository: {settings.github_repo or 'not configured'}")

    try:
        await init_db()
    except Exception as e:
        logger.warning(f" Database initialization failed: {e}")

    if settings.scheduler_enabled:
        scheduler_service.start()

@app.on_event("shutdown")
async def shutdown_event():
    logger.info(" PromptHub API shutting down")
    scheduler_service.stop()
    await close_db()

app.include_router(stats.router, prefix="/api")
app.include_router(prompts.router, prefix="/api")
app.include_router(user.router, prefix="/api")
app.include_router(github.router, prefix="/api")

@app.get("/")
async def root():
    return {
        "service": "PromptHub API",
        "version": __version__,
        "status": "running",
        "docs": "/docs",
    }

@app.get("/health")
async def health_check():
    return {
        "status": "healthy",
        "github": {
            "configured": bool(settings.github_repo),
            "authenticated": bool(settings.github_token)
        },
        "scheduler": scheduler_service.scheduler.running
    }

if __name__ == "__main__":
    uvicorn.run(
        "prompthub.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.debug,
        log_level=settings.log_level.lower()
    )
