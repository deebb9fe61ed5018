"""
Main entrypoint for the Reading List API.

This module assembles the FastAPI application, sets up logging,
builds the in‑memory book store and includes versioned routers.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``, e.g.::

    uvicorn reading_list_api.app.main:app --reload

Interactive API documentation is served by FastAPI at ``/docs``.
"""

import logging
from typing import Optional

from fastapi import FastAPI

from .api.v1.router import router as v1_router
from .core.config import Settings, settings as default_settings
from .core.logging_config import setup_logging
from .core.store import BookStore

OPENAPI_TAGS = [
    {"name": "Books", "description": "API to manage your books."},
]


def build_store(settings: Settings) -> BookStore:
    """Create the book store, loading the seed file if one is configured."""
    store = BookStore(id_strategy=settings.book_id_strategy)
    if settings.books_seed_file:
        store.load_seed(settings.books_seed_file)
    return store


def create_app(settings: Optional[Settings] = None, store: Optional[BookStore] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use; defaults to the module level settings
        read from the environment.
    store : Optional[BookStore]
        Store the app should own.  When omitted a new one is built from
        ``settings``.  Each app gets its own store, so tests can start
        from an empty collection by creating a fresh app.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    # Initialise logging before anything else so store construction can log.
    setup_logging(settings)

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        debug=settings.debug,
        openapi_tags=OPENAPI_TAGS,
    )
    app.state.settings = settings
    app.state.book_store = store if store is not None else build_store(settings)

    app.include_router(v1_router, prefix=settings.api_prefix)

    logging.getLogger(__name__).info(
        "%s %s ready with %d books (id strategy: %s)",
        settings.project_name,
        settings.api_version,
        len(app.state.book_store),
        app.state.book_store.id_strategy,
    )
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
