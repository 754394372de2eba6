"""
Dependency providers.

Each request gets its own session; repositories, the sharing ledger and
the services are built on top of it here and handed to the routes.
"""

from dataclasses import dataclass
from typing import Optional

from fastapi import Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from ..config import Settings, get_settings
from ..core.repositories import NoteAccessRepository, NoteRepository, UserRepository
from ..core.services import AuthService, HealthService, NoteService, SharingLedger
from ..database import get_db_session
from ..security import TokenService, get_token_service


def get_user_repository(session: AsyncSession = Depends(get_db_session)) -> UserRepository:
    return UserRepository(session)


def get_sharing_ledger(session: AsyncSession = Depends(get_db_session)) -> SharingLedger:
    return SharingLedger(NoteAccessRepository(session))


def get_auth_service(
    session: AsyncSession = Depends(get_db_session),
    user_repo: UserRepository = Depends(get_user_repository),
    tokens: TokenService = Depends(get_token_service),
) -> AuthService:
    return AuthService(session, user_repo, tokens)


def get_note_service(
    session: AsyncSession = Depends(get_db_session),
    ledger: SharingLedger = Depends(get_sharing_ledger),
    user_repo: UserRepository = Depends(get_user_repository),
) -> NoteService:
    return NoteService(session, NoteRepository(session), ledger, user_repo)


def get_health_service(session: AsyncSession = Depends(get_db_session)) -> HealthService:
    return HealthService(session)


@dataclass
class Pagination:
    page: int
    page_size: int


def _parse_positive(raw: Optional[str], default: int) -> int:
    # garbage or non-positive values fall back to the default
    try:
        value = int(raw) if raw is not None else default
    except ValueError:
        return default
    return value if value >= 1 else default


def get_pagination(
    page: Optional[str] = Query(None, description="Page number, 1-indexed (default 1)"),
    page_size: Optional[str] = Query(
        None, alias="pageSize", description="Items per page (default 10)"
    ),
    settings: Settings = Depends(get_settings),
) -> Pagination:
    """Read ``page``/``pageSize``, apply defaults and the page size cap."""
    return Pagination(
        page=_parse_positive(page, 1),
        page_size=min(_parse_positive(page_size, settings.default_page_size), settings.max_page_size),
    )
