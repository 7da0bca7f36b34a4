import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from textfill.config import settings
from textfill.middleware.request_logging import RequestLoggingMiddleware
from textfill.services.autocomplete import build_filler

logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s %(levelname)-8s %(name)s %(message)s",
)

logger = logging.getLogger("textfill.main")


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: one text filler per application instance
    app.state.filler = build_filler(settings.seed_terms_path)
    logger.info("Text filler ready with %d terms", app.state.filler.size())
    yield


app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="TextFill - ternary-search-tree autocompletion with priority ranking.",
    lifespan=lifespan,
)

app.add_middleware(RequestLoggingMiddleware)

# --- Routers ---
from textfill.api.v1 import autocomplete, terms  # noqa: E402

app.include_router(terms.router, prefix="/api/v1", tags=["Terms"])
app.include_router(autocomplete.router, prefix="/api/v1", tags=["Autocomplete"])


@app.get("/api/v1/health", tags=["Health"])
async def health_check():
    return {
        "status": "healthy",
        "version": settings.app_version,
        "terms": app.state.filler.size(),
    }
