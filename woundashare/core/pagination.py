"""
Core pagination utilities for API endpoints.
"""
from typing import TypeVar, Generic, List, Sequence
from pydantic import BaseModel
from fastapi import Query
import math

T = TypeVar("T")

class PageParams:
    """
    Page parameters for pagination.
    
    Attributes:
        page: Page number (1-indexed)
        size: Number of items per page
    """
    def __init__(
        self,
        page: int = Query(1, ge=1, description="Page number"),
        size: int = Query(10, ge=1, le=100, description="Items per page")
    ):
        self.page = page
        self.size = size
        self.offset = (page - 1) * size


class PageResponse(BaseModel, Generic[T]):
    """
    Paginated response model.
    
    Attributes:
        items: List of items for the current page
        total: Total number of items
        page: Current page number
        size: Number of items per page
        pages: Total number of pages
        has_next: Whether there is a next page
        has_prev: Whether there is a previous page
    """
    items: List[T]
    total: int
    page: int
    size: int
    pages: int
    has_next: bool
    has_prev: bool


def paginate(items: Sequence[T], page_params: PageParams) -> PageResponse:
    """
    Slice an in-memory sequence into one page.
    
    Args:
        items: Full, already ordered sequence
        page_params: Pagination parameters
        
    Returns:
        PageResponse: Paginated response
    """
    total = len(items)
    page_items = list(items[page_params.offset:page_params.offset + page_params.size])
    pages = math.ceil(total / page_params.size) if total > 0 else 0
    
    return PageResponse(
        items=page_items,
        total=total,
        page=page_params.page,
        size=page_params.size,
        pages=pages,
        has_next=page_params.page < pages,
        has_prev=page_params.page > 1
    )
