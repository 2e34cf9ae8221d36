"""Pydantic schema for the pager window shown under a listing."""

from typing import List
from pydantic import BaseModel, Field


class PageWindow(BaseModel):
    """
    Page-group window for a 1-based pager.

    Derived purely from (current page, page size, total items); never stored.
    """
    current_page: int = Field(..., ge=1)
    page_size: int = Field(..., gt=0)
    total_items: int = Field(..., ge=0)
    total_pages: int = Field(..., ge=0)
    group_size: int
    current_group: int
    start_page: int
    end_page: int
    has_prev_group: bool
    prev_group_page: int
    has_next_group: bool
    next_group_page: int
    offset: int = Field(..., ge=0, description="0-based index of the first item on the page")
    page_numbers: List[int] = Field(default_factory=list, description="Page numbers of the current group")
