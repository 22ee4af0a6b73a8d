"""
Main FastAPI application for the blogql server
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..config import settings
from ..logging import configure_logging, get_logger
from ..middleware import LoggingContextMiddleware
from ..store import BlogStore, build_store

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    store: BlogStore = app.state.store
    logger.info(
        "Starting blogql API...",
        authors=len(store.authors),
        posts=len(store.posts),
    )

    yield

    logger.info("Shutting down blogql API...")


def create_app(store: BlogStore | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        store: Entity store to serve; built from settings when None
    """
    # Configured here, not at import, so values set by the CLI take effect
    configure_logging(debug=settings.debug, log_level=settings.log_level)

    if store is None:
        store = build_store(
            seed_path=settings.seed_path,
            validate_references=settings.validate_references,
        )

    app = FastAPI(
        title="blogql API",
        description="GraphQL API over in-memory authors and posts",
        version=__version__,
        lifespan=lifespan,
        debug=settings.debug,
    )
    app.state.store = store

    app.add_middleware(LoggingContextMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health")
    async def health_check():  # pyright: ignore [reportUnusedFunction]
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__}

    try:
        from ..graphql.schema import create_graphql_router, validate_schema

        logger.info("Validating GraphQL schema...")
        validate_schema()

        app.include_router(create_graphql_router(graphiql=settings.graphiql), prefix="")
        logger.info("GraphQL endpoint initialized successfully", endpoint="/graphql")
    except Exception as e:  # pragma: no cover
        logger.error("Failed to initialize GraphQL endpoint", error=str(e))
        raise

    return app


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "blogql.api.app:create_app",
        factory=True,
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
        log_level=settings.log_level.lower(),
    )
