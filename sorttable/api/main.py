"""Sort Table API - sortable HTML table rendering service.

This API renders table markup for consumers that are not written in Python:
- Table rendering (header, rows, widget bootstrap script)
- Table presets (named configurations)
"""

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from sorttable import __version__
from sorttable.api.routes import presets, tables
from sorttable.presets.registry import get_preset_registry

# Configure logging
logging.basicConfig(
    level=os.environ.get("SORTTABLE_LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    logger.info("Loading table presets...")
    preset_registry = get_preset_registry()
    logger.info(f"Loaded {preset_registry.count()} presets")

    logger.info("Sort Table API ready")
    yield
    logger.info("Shutting down Sort Table API")


app = FastAPI(
    title="Sort Table API",
    description="""
## Sortable Table Rendering

Renders `<table>` markup plus the inline script that binds the MooTools
HtmlTable widget to it. Sorting happens in the browser.

### Key Endpoints

- `POST /v1/tables/render` - Render a table from header cells and rows
- `GET /v1/presets` - List table presets
- `GET /v1/presets/{key}` - Get a preset definition
""",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers with /v1 prefix
app.include_router(tables.router, prefix="/v1")
app.include_router(presets.router, prefix="/v1")


@app.get("/")
async def root():
    """Root endpoint with API info."""
    return {
        "service": "Sort Table API",
        "version": __version__,
        "docs": "/docs",
        "endpoints": {
            "render": "/v1/tables/render",
            "presets": "/v1/presets",
        },
    }


@app.get("/health")
async def health():
    """Health check endpoint."""
    preset_registry = get_preset_registry()
    return {
        "status": "healthy",
        "presets_loaded": preset_registry.count(),
    }
