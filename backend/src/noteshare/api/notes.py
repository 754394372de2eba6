"""Notes API endpoints. All of them need a valid access token."""

from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, status

from ..core.schemas.common import MessageResponse
from ..core.schemas.notes import NoteCreate, NoteResponse, NoteUpdate, ShareRequest, ShareResponse
from ..core.services import NoteService
from ..middleware.auth import get_current_user_id
from .deps import Pagination, get_note_service, get_pagination

router = APIRouter(prefix="/notes", tags=["notes"])


@router.get("", response_model=List[NoteResponse])
async def list_notes(
    current_user_id: UUID = Depends(get_current_user_id),
    pagination: Pagination = Depends(get_pagination),
    note_service: NoteService = Depends(get_note_service),
):
    """Notes the user owns or that were shared with them, paginated."""
    return await note_service.list_notes(current_user_id, pagination.page, pagination.page_size)


@router.get("/{note_id}", response_model=NoteResponse)
async def get_note(
    note_id: UUID,
    current_user_id: UUID = Depends(get_current_user_id),
    note_service: NoteService = Depends(get_note_service),
):
    """Get one of the user's own notes."""
    return await note_service.get_note(current_user_id, note_id)


@router.post("", response_model=NoteResponse, status_code=status.HTTP_201_CREATED)
async def create_note(
    request: NoteCreate,
    current_user_id: UUID = Depends(get_current_user_id),
    note_service: NoteService = Depends(get_note_service),
):
    """Create a new note."""
    return await note_service.create_note(current_user_id, request)


@router.put("/{note_id}", response_model=NoteResponse)
async def update_note(
    note_id: UUID,
    request: NoteUpdate,
    current_user_id: UUID = Depends(get_current_user_id),
    note_service: NoteService = Depends(get_note_service),
):
    """Update title and/or content of an owned note."""
    return await note_service.update_note(current_user_id, note_id, request)


@router.delete("/{note_id}", response_model=MessageResponse)
async def delete_note(
    note_id: UUID,
    current_user_id: UUID = Depends(get_current_user_id),
    note_service: NoteService = Depends(get_note_service),
):
    """Delete an owned note."""
    await note_service.delete_note(current_user_id, note_id)
    return MessageResponse(message="Note deleted successfully.")


@router.post("/{note_id}/share", response_model=ShareResponse)
async def share_note(
    note_id: UUID,
    request: ShareRequest,
    current_user_id: UUID = Depends(get_current_user_id),
    note_service: NoteService = Depends(get_note_service),
):
    """Share an owned note with another user (read access)."""
    return await note_service.share_note(current_user_id, note_id, request.receiver_id)


@router.delete("/{note_id}/share/{receiver_id}", response_model=MessageResponse)
async def unshare_note(
    note_id: UUID,
    receiver_id: UUID,
    current_user_id: UUID = Depends(get_current_user_id),
    note_service: NoteService = Depends(get_note_service),
):
    """Revoke a previous share."""
    await note_service.unshare_note(current_user_id, note_id, receiver_id)
    return MessageResponse(message="Note unshared successfully.")
