"""Go Web Server Tutorial - FastAPI Application."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
from fastapi.staticfiles import StaticFiles

from webtutor.services.catalog import NotFoundError
from webtutor.services.downloads import materialize_examples
from webtutor.services.renderer import TemplateError, check_layout
from webtutor.settings import settings
from webtutor.version import __version__

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: startup and shutdown."""
    # A broken layout template aborts startup
    check_layout()

    if settings.MATERIALIZE_EXAMPLES:
        materialize_examples(settings.EXAMPLES_DIR)

    logger.info("Serving %s v%s", settings.SITE_NAME, __version__)
    yield


app = FastAPI(
    title="Go Web Server Tutorial",
    description="Tutorials and downloadable examples for building web servers in Go",
    version=__version__,
    lifespan=lifespan,
)


@app.exception_handler(TemplateError)
async def template_error_handler(request: Request, exc: TemplateError):
    logger.error("Template error on %s: %s", request.url.path, exc)
    return PlainTextResponse(f"Error rendering template: {exc}", status_code=500)


@app.exception_handler(NotFoundError)
async def not_found_handler(request: Request, exc: NotFoundError):
    if exc.status_code == 400:
        logger.warning("Rejected request for %s: %s", request.url.path, exc)
    return PlainTextResponse(str(exc), status_code=exc.status_code)


# Static files
settings.STATIC_DIR.mkdir(parents=True, exist_ok=True)
app.mount("/static", StaticFiles(directory=str(settings.STATIC_DIR)), name="static")

# Include routers
from webtutor.routes import pages, downloads, diagnostics

app.include_router(pages.router, tags=["pages"])
app.include_router(downloads.router, prefix="/download", tags=["downloads"])
app.include_router(diagnostics.router, tags=["diagnostics"])
