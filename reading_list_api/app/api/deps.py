"""
FastAPI dependencies shared by the endpoint modules.
"""

from fastapi import Request

from ..services.book_service import BookService


def get_book_service(request: Request) -> BookService:
    """Return a service bound to the store owned by the running app."""
    return BookService(request.app.state.book_store)
