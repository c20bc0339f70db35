# app/main.py
from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from pymongo import MongoClient

from app.core.config import get_settings
from app.core.errors import register_exception_handlers
from app.database import create_client, ensure_indexes

# Routers
from app.routers.users import router as users_router
from app.routers.items import router as items_router
from app.routers.cart import router as cart_router

settings = get_settings()

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("uvicorn")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Startup:
      - Build the MongoClient (unless one was injected), select the
        database and verify indexes.

    Shutdown:
      - Close the client if we created it.
    """
    owns_client = app.state.mongo_client is None
    if owns_client:
        app.state.mongo_client = create_client()

    logger.info("🔄 Startup: Connecting to MongoDB (%s)...", settings.MONGO_DB_NAME)
    app.state.db = app.state.mongo_client[settings.MONGO_DB_NAME]
    try:
        ensure_indexes(app.state.db)
        logger.info("✅ Startup: DB connection OK, indexes verified.")
    except Exception as e:
        logger.error(f"❌ Startup: DB connection FAILED: {e}")
        raise
    yield

    if owns_client:
        app.state.mongo_client.close()
        app.state.mongo_client = None


def create_app(mongo_client: MongoClient | None = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        mongo_client: optional pre-built client (tests pass a mongomock
            client). When omitted, one is created from MONGO_URL on startup.
    """
    app = FastAPI(
        title=settings.PROJECT_NAME,
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.mongo_client = mongo_client

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(users_router, prefix=settings.API_PREFIX)
    app.include_router(items_router, prefix=settings.API_PREFIX)
    app.include_router(cart_router, prefix=settings.API_PREFIX)

    @app.get(settings.API_PREFIX, response_class=PlainTextResponse)
    def root():
        """Health check endpoint."""
        return "Hello Ecom API 🚀"

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=settings.PORT)
