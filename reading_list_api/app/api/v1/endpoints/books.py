"""
Book endpoints for API v1.

These routes expose a CRUD API over the reading list.  Bodies are not
validated: any JSON object is accepted for create and update, and a
missing body, or one that is not a JSON object, is treated as an
empty object.  Lookups that do not match a stored book answer ``404``
with an empty body, and successful updates and deletions answer
``204`` with an empty body.
"""

from typing import Any, Dict, List, Type

from fastapi import APIRouter, Body, Depends, Response, status
from pydantic import BaseModel

from reading_list_api.app.api.deps import get_book_service
from reading_list_api.app.schemas.book import BOOK_EXAMPLE, BookCreate, BookRead, BookUpdate
from reading_list_api.app.services.book_service import BookNotFoundError, BookService

router = APIRouter()

NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"description": "Book not found."}}


def _empty(status_code: int) -> Response:
    return Response(status_code=status_code)


def _json_body(model: Type[BaseModel]) -> Dict[str, Any]:
    # Bodies are read as raw JSON, so the schema is attached by hand.
    return {"requestBody": {"content": {"application/json": {"schema": model.model_json_schema()}}}}


@router.get("/", response_model=List[BookRead], summary="Lists all the books")
async def list_books(service: BookService = Depends(get_book_service)) -> List[BookRead]:
    """Return every book in the order it was added."""
    return service.list_books()


@router.get("/{book_id}", response_model=BookRead, responses=NOT_FOUND, summary="Gets a book by Id")
async def get_book(book_id: str, service: BookService = Depends(get_book_service)):
    try:
        return service.get_book(book_id)
    except BookNotFoundError:
        return _empty(status.HTTP_404_NOT_FOUND)


@router.post(
    "/",
    response_model=BookRead,
    status_code=status.HTTP_201_CREATED,
    summary="Creates a new book",
    openapi_extra=_json_body(BookCreate),
)
async def create_book(
    payload: Any = Body(None, examples=[BOOK_EXAMPLE]),
    service: BookService = Depends(get_book_service),
) -> BookRead:
    """Create a book from ``title``, ``author`` and optional ``finished``.

    ``finished`` defaults to ``false`` when omitted.  A body that is
    not a JSON object is treated as ``{}``.  The response carries the
    stored record including its id and ``createdAt``.
    """
    return service.create_book(BookCreate.from_body(payload))


@router.put(
    "/{book_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={status.HTTP_204_NO_CONTENT: {"description": "Update was successful."}, **NOT_FOUND},
    summary="Update a book",
    openapi_extra=_json_body(BookUpdate),
)
async def update_book(
    book_id: str,
    payload: Any = Body(None, examples=[{"finished": True}]),
    service: BookService = Depends(get_book_service),
) -> Response:
    """Overwrite the fields present in the body; ``id`` and ``createdAt`` never change."""
    try:
        service.update_book(book_id, BookUpdate.from_body(payload))
    except BookNotFoundError:
        return _empty(status.HTTP_404_NOT_FOUND)
    return _empty(status.HTTP_204_NO_CONTENT)


@router.delete(
    "/{book_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={status.HTTP_204_NO_CONTENT: {"description": "Delete was successful."}, **NOT_FOUND},
    summary="Delete a book",
)
async def delete_book(book_id: str, service: BookService = Depends(get_book_service)) -> Response:
    try:
        service.delete_book(book_id)
    except BookNotFoundError:
        return _empty(status.HTTP_404_NOT_FOUND)
    return _empty(status.HTTP_204_NO_CONTENT)
