"""
Wordora HTTP service
Main application entry point

Trains the default Markov chat model from the configured corpus at start-up
and serves training, generation and reply endpoints.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from wordora.api.routers import markov_router
from wordora.config import settings
from wordora.services.chatbot import ChatBot
from wordora.services.corpus import load_corpus
from wordora.utils.logger import ROOT_LOGGER, setup_logger

# Setup logging; services log through the package logger
setup_logger(ROOT_LOGGER)
logger = setup_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifecycle manager for service initialization"""
    logger.info("[BOOT] Starting Wordora service...")

    try:
        if settings.PRELOAD_CORPUS:
            logger.info("[BOOT] Training default model...")
            bot = ChatBot.from_settings(settings).train(load_corpus(settings.CORPUS_PATH))
            markov_router.register_model("default", bot)

        logger.info("[BOOT] Wordora service ready!")
        yield

    except Exception as e:
        logger.error(f"[ERR] Failed to initialize: {e}", exc_info=True)
        raise
    finally:
        markov_router.MODEL_CACHE.clear()
        logger.info("[SHUTDOWN] Wordora service stopped")


# Create FastAPI app
app = FastAPI(
    title="Wordora",
    description="Markov chain chat bot for mixed Japanese/English text",
    version=settings.SERVICE_VERSION,
    lifespan=lifespan,
)

app.include_router(markov_router.router)


# Global exception handler
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"[ERR] Unhandled exception: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={
            "ok": False,
            "error": {
                "code": "WORDORA_ERROR",
                "message": "Internal server error occurred",
                "details": {"type": type(exc).__name__},
            },
        },
    )


# Health check
@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {
        "ok": True,
        "data": {
            "status": "healthy",
            "service": settings.SERVICE_NAME,
            "models": sorted(markov_router.MODEL_CACHE.keys()),
        },
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "wordora.app:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower(),
    )
