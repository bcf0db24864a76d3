"""FastAPI application for the Monoid Docs MCP server."""

import logging
from contextlib import asynccontextmanager
from datetime import datetime

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from monoid_docs import __version__
from monoid_docs.core.database import DatabaseManager, DocumentStore
from monoid_docs.mcp_server.config import Config
from monoid_docs.mcp_server.protocol import INTERNAL_ERROR, error_response
from monoid_docs.models.api.system import HealthResponse
from monoid_docs.models.config import ServerConfig

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info("Starting Monoid Docs MCP server")

    owns_store = getattr(app.state, "store", None) is None
    if owns_store:
        db_manager = DatabaseManager.from_config(app.state.config)
        await db_manager.initialize()
        app.state.store = db_manager

    logger.info("Monoid Docs MCP server started successfully")

    yield

    logger.info("Shutting down Monoid Docs MCP server")
    if owns_store:
        await app.state.store.close()
        app.state.store = None
    logger.info("Monoid Docs MCP server shutdown complete")


def create_app(
    config: ServerConfig | None = None, store: DocumentStore | None = None
) -> FastAPI:
    """Build the application.

    Args:
        config: Server configuration; loaded from file/environment when omitted
        store: Document store to use instead of opening a database pool
    """
    config = config or ServerConfig.load_from_file()

    app = FastAPI(
        title="Monoid Docs MCP Server",
        description="Organization documentation exposed as MCP tools",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.config = config
    app.state.mcp_config = Config.from_server_config(config)
    app.state.store = store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    @app.exception_handler(Exception)
    async def global_exception_handler(request, exc):
        """Global exception handler."""
        logger.error(f"Unhandled exception: {exc}", exc_info=True)
        return JSONResponse(status_code=500, content=error_response(None, INTERNAL_ERROR))

    @app.get("/health", response_model=HealthResponse)
    async def health_check():
        """Health check endpoint."""
        db_connected = False
        if isinstance(app.state.store, DatabaseManager):
            db_connected = await app.state.store.is_healthy()
        elif app.state.store is not None:
            db_connected = True

        return HealthResponse(
            status="ok" if db_connected else "degraded",
            timestamp=datetime.now(),
            version=__version__,
            database_connected=db_connected,
        )

    from monoid_docs.api.mcp import router as mcp_router

    app.include_router(mcp_router, prefix="/api", tags=["mcp"])

    return app


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(create_app(), host="0.0.0.0", port=8000, log_level="info")
