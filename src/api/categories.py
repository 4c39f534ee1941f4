"""Category API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from src.api.dependencies import ResourceId, get_category_service
from src.schemas.category import CategoryCreate, CategoryResponse, CategoryUpdate
from src.schemas.common import ERROR_RESPONSES, DataResponse, MessageResponse
from src.services.category_service import CategoryService

router = APIRouter(prefix="/api/categories", tags=["categories"], responses=ERROR_RESPONSES)


@router.get("", response_model=DataResponse[list[CategoryResponse]])
def get_categories(service: Annotated[CategoryService, Depends(get_category_service)]):
    """Get all categories."""
    return {"success": True, "data": service.list()}


@router.get("/{category_id}", response_model=DataResponse[CategoryResponse])
def get_category(
    category_id: ResourceId,
    service: Annotated[CategoryService, Depends(get_category_service)],
):
    """Get a specific category."""
    return {"success": True, "data": service.get(category_id)}


@router.post(
    "", response_model=DataResponse[CategoryResponse], status_code=status.HTTP_201_CREATED
)
def create_category(
    category_data: CategoryCreate,
    service: Annotated[CategoryService, Depends(get_category_service)],
):
    """Create a new category."""
    return {"success": True, "data": service.create(category_data)}


@router.put("/{category_id}", response_model=DataResponse[CategoryResponse])
def update_category(
    category_id: ResourceId,
    category_data: CategoryUpdate,
    service: Annotated[CategoryService, Depends(get_category_service)],
):
    """Update a category."""
    return {"success": True, "data": service.update(category_id, category_data)}


@router.delete("/{category_id}", response_model=MessageResponse)
def delete_category(
    category_id: ResourceId,
    service: Annotated[CategoryService, Depends(get_category_service)],
):
    """Delete a category. Refused while any todo still uses it."""
    service.delete(category_id)
    return {"success": True, "message": "Category deleted successfully"}
