"""
Main FastAPI application for the Registrar API
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..config import settings
from ..logging import configure_logging, get_logger
from ..middleware import LoggingContextMiddleware
from ..store import EntityStore, SeedDataError, load_store

# Configure logging before creating logger
configure_logging(debug=settings.debug)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info("Starting Registrar API...")

    if app.state.store is None:
        try:
            app.state.store = load_store()
        except SeedDataError as e:
            logger.error("Failed to load seed data", error=str(e))
            raise

    logger.info("Server running", **app.state.store.counts())

    yield

    logger.info("Shutting down Registrar API...")


def create_app(store: EntityStore | None = None, graphiql: bool | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        store: Entity store to serve; loaded from the seed files at startup
            when not given
        graphiql: Serve the GraphiQL IDE on GET /graphql (defaults to settings)
    """
    app = FastAPI(
        title="Registrar API",
        description="GraphQL API for courses, students and grades",
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
    async def health_check(request: Request):  # pyright: ignore [reportUnusedFunction]
        """Health check endpoint."""
        store = request.app.state.store
        return {
            "status": "healthy",
            "version": __version__,
            "records": store.counts() if store is not None else None,
        }

    from ..graphql.schema import create_graphql_router, validate_schema

    # Raises on an invalid schema so startup fails
    logger.info("Validating GraphQL schema...")
    validate_schema()

    app.include_router(create_graphql_router(graphiql=graphiql), prefix="")
    logger.info("GraphQL endpoint initialized", endpoint="/graphql")

    return app


# Create the main application instance
app = create_app()

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "registrar.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
        log_level=settings.log_level.lower(),
    )
