"""Todo API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from src.api.dependencies import (
    ResourceId,
    get_page_request,
    get_todo_filters,
    get_todo_service,
)
from src.schemas.common import ERROR_RESPONSES, DataResponse, MessageResponse, PaginatedResponse
from src.schemas.todo import TodoCreate, TodoResponse, TodoUpdate
from src.services.todo_query import PageRequest, TodoFilters
from src.services.todo_service import TodoService

router = APIRouter(prefix="/api/todos", tags=["todos"], responses=ERROR_RESPONSES)


@router.get("", response_model=PaginatedResponse[TodoResponse])
def get_todos(
    filters: Annotated[TodoFilters, Depends(get_todo_filters)],
    page: Annotated[PageRequest, Depends(get_page_request)],
    service: Annotated[TodoService, Depends(get_todo_service)],
):
    """Get a page of todos, newest first, with optional filters."""
    result = service.list(filters, page)
    return {
        "success": True,
        "data": result.rows,
        "pagination": {
            "current_page": page.page,
            "per_page": page.limit,
            "total": result.total,
            "total_pages": result.total_pages,
        },
    }


@router.get("/{todo_id}", response_model=DataResponse[TodoResponse])
def get_todo(
    todo_id: ResourceId,
    service: Annotated[TodoService, Depends(get_todo_service)],
):
    """Get a specific todo."""
    return {"success": True, "data": service.get(todo_id)}


@router.post(
    "", response_model=DataResponse[TodoResponse], status_code=status.HTTP_201_CREATED
)
def create_todo(
    todo_data: TodoCreate,
    service: Annotated[TodoService, Depends(get_todo_service)],
):
    """Create a new todo."""
    return {"success": True, "data": service.create(todo_data)}


@router.put("/{todo_id}", response_model=DataResponse[TodoResponse])
def update_todo(
    todo_id: ResourceId,
    todo_data: TodoUpdate,
    service: Annotated[TodoService, Depends(get_todo_service)],
):
    """Update a todo."""
    return {"success": True, "data": service.update(todo_id, todo_data)}


@router.patch("/{todo_id}/toggle", response_model=DataResponse[TodoResponse])
def toggle_todo(
    todo_id: ResourceId,
    service: Annotated[TodoService, Depends(get_todo_service)],
):
    """Toggle a todo between completed and not completed."""
    return {"success": True, "data": service.toggle(todo_id)}


@router.delete("/{todo_id}", response_model=MessageResponse)
def delete_todo(
    todo_id: ResourceId,
    service: Annotated[TodoService, Depends(get_todo_service)],
):
    """Permanently delete a todo."""
    service.delete(todo_id)
    return {"success": True, "message": "Todo deleted successfully"}
