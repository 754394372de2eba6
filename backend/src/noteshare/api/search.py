"""Search API endpoints."""

from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, Query

from ..core.schemas.notes import NoteResponse
from ..core.services import NoteService
from ..middleware.auth import get_current_user_id
from .deps import Pagination, get_note_service, get_pagination

router = APIRouter(prefix="/search", tags=["search"])


@router.get("", response_model=List[NoteResponse])
async def search_notes(
    q: str = Query(..., description="Search query"),
    current_user_id: UUID = Depends(get_current_user_id),
    pagination: Pagination = Depends(get_pagination),
    note_service: NoteService = Depends(get_note_service),
):
    """Search the title and content of notes visible to the user."""
    return await note_service.search_notes(
        current_user_id, q, pagination.page, pagination.page_size
    )
