"""FastAPI server for the Zerops Knowledge Base API."""

import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from . import __version__
from .api.deps import (
    DocumentStoreDep,
    LookupServiceDep,
    SearchCoordinatorDep,
    sanitize_error_message,
)
from .config import settings
from .engine import (
    DirectorySource,
    DocumentStore,
    KnowledgeNotFoundError,
    KnowledgeSource,
    LookupService,
    SearchCoordinator,
    build_store,
)
from .middleware import SecurityHeadersMiddleware
from .models import (
    HealthResponse,
    KnowledgeResponse,
    ReadyResponse,
    SearchRequest,
    SearchResponse,
)
from .pages import render_landing_page

logger = logging.getLogger(__name__)

# ============ SENTRY INITIALIZATION ============


def _filter_sentry_event(event: dict) -> dict:
    """Remove sensitive data from Sentry events."""
    if "request" in event and "headers" in event["request"]:
        headers = event["request"]["headers"]
        for key in ["authorization", "cookie"]:
            if key in headers:
                headers[key] = "[REDACTED]"
    return event


if settings.sentry_dsn:
    try:
        import sentry_sdk
        from sentry_sdk.integrations.fastapi import FastApiIntegration
        from sentry_sdk.integrations.starlette import StarletteIntegration

        sentry_sdk.init(
            dsn=settings.sentry_dsn,
            environment=settings.environment,
            traces_sample_rate=0.1 if settings.environment == "production" else 1.0,
            integrations=[
                FastApiIntegration(),
                StarletteIntegration(),
            ],
            before_send=lambda event, hint: _filter_sentry_event(event),
        )
        logger.info("Sentry error tracking initialized")
    except ImportError:
        logger.warning("Sentry DSN configured but sentry-sdk not installed")
else:
    logger.debug("Sentry DSN not configured - error tracking disabled")


# ============ APPLICATION FACTORY ============


def _default_source() -> KnowledgeSource:
    return DirectorySource(settings.knowledge_root, settings.knowledge_base_path)


def create_app(
    store: DocumentStore | None = None,
    source: KnowledgeSource | None = None,
) -> FastAPI:
    """
    Create the FastAPI application.

    The document store is built once in the lifespan handler, before any
    request is served, unless a prebuilt store is passed in.

    Args:
        store: Prebuilt store to serve (skips the startup build)
        source: Source to build the store from (defaults to settings)
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan handler for startup/shutdown."""
        logger.info(f"Starting Zerops Knowledge Base API v{__version__}")

        if not settings.debug and settings.cors_allowed_origins == "*":
            logger.warning(
                "CORS is configured to allow all origins ('*'). "
                "Set CORS_ALLOWED_ORIGINS to specific domains in production."
            )

        knowledge = store if store is not None else build_store(source or _default_source())
        app.state.store = knowledge
        app.state.search = SearchCoordinator(
            knowledge,
            default_limit=settings.default_search_limit,
            max_limit=settings.max_search_limit,
            summary_max_chars=settings.summary_max_chars,
        )
        app.state.lookup = LookupService(knowledge)
        logger.info(f"Knowledge index ready: {len(knowledge)} items")

        yield

        app.state.store = None
        app.state.search = None
        app.state.lookup = None

    app = FastAPI(
        title="Zerops Knowledge Base API",
        description="Semantic search over the Zerops platform knowledge base",
        version=__version__,
        lifespan=lifespan,
    )

    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=False,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type"],
    )

    _register_exception_handlers(app)
    _register_routes(app)
    return app


# ============ EXCEPTION HANDLERS ============


def _register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        """Handle HTTP exceptions with consistent response format."""
        return JSONResponse(
            status_code=exc.status_code,
            content={"success": False, "error": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        """Malformed request payloads are client errors (400)."""
        messages = []
        for error in exc.errors():
            location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
            messages.append(f"{location}: {error.get('msg')}" if location else str(error.get("msg")))
        return JSONResponse(
            status_code=400,
            content={"success": False, "error": "; ".join(messages) or "Invalid request"},
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        """Handle unexpected exceptions with sanitized error messages."""
        logger.error(f"Unhandled exception: {exc}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content={"success": False, "error": sanitize_error_message(exc)},
        )


# ============ ROUTES ============


def _register_routes(app: FastAPI) -> None:
    @app.get("/", response_class=HTMLResponse, tags=["Info"])
    async def index(store: DocumentStoreDep) -> HTMLResponse:
        """Landing page with endpoint documentation."""
        return HTMLResponse(render_landing_page(len(store), settings.public_base_url))

    @app.get("/health", response_model=HealthResponse, tags=["Health"])
    async def health_check() -> HealthResponse:
        """Health check endpoint (lightweight liveness check)."""
        return HealthResponse(
            status="healthy",
            version=__version__,
            timestamp=datetime.now(timezone.utc),
        )

    @app.get("/ready", tags=["Health"])
    async def readiness_check(request: Request):
        """Readiness check - verifies the knowledge index is loaded."""
        store = getattr(request.app.state, "store", None)
        loaded = store is not None and len(store) > 0
        response = ReadyResponse(
            status="ready" if loaded else "not_ready",
            version=__version__,
            checks={"knowledge_index": loaded},
            knowledge_items=len(store) if store is not None else 0,
        )
        return JSONResponse(
            content=response.model_dump(mode="json"),
            status_code=200 if loaded else 503,
        )

    @app.post("/api/v1/search", response_model=SearchResponse, tags=["Search"])
    async def search(body: SearchRequest, coordinator: SearchCoordinatorDep) -> SearchResponse:
        """
        Search knowledge items by keyword.

        Terms are separated by commas or whitespace. An empty query lists
        every item with the same minimal score.
        """
        results = coordinator.search(body.query, body.limit)
        return SearchResponse(query=body.query, results=results, count=len(results))

    @app.get(
        "/api/v1/knowledge/{knowledge_id:path}",
        response_model=KnowledgeResponse,
        tags=["Knowledge"],
    )
    async def get_knowledge(knowledge_id: str, lookup: LookupServiceDep) -> KnowledgeResponse:
        """Get full knowledge content by semantic ID, e.g. `recipe/laravel-jetstream`."""
        try:
            doc = lookup.get(knowledge_id)
        except KnowledgeNotFoundError:
            raise HTTPException(status_code=404, detail="Knowledge not found") from None
        return KnowledgeResponse(**doc.to_dict())


app = create_app()


# ============ MAIN ============


def main():
    """Run the server with uvicorn."""
    import uvicorn

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(
        "zerops_kb.server:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )


if __name__ == "__main__":
    main()
