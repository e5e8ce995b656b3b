"""Reference data API endpoints.

GET /api/ceremonies - Ceremonies in running order
GET /api/categories - Award categories with display colours
GET /api/participants - Participant directory
GET /api/teams - Team directory
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from awardops.api.app import get_store_session
from awardops.core.labels import color_hex, color_label, format_person_name
from awardops.models.domain import AwardCategoryEntity, ParticipantEntity, PersonRef
from awardops.models.types import (
    CategoryDetail,
    CeremonyDetail,
    ParticipantDetail,
    TeamDetail,
    TeamSummaryRef,
)
from awardops.store import repo
from awardops.store.session import StoreError, StoreSession

logger = logging.getLogger(__name__)

router = APIRouter()


def _category_to_detail(category: AwardCategoryEntity) -> CategoryDetail:
    """Convert AwardCategoryEntity to CategoryDetail."""
    return CategoryDetail(
        id=category.id,
        name=category.name,
        color=category.color,
        color_hex=color_hex(category.color),
        color_label=color_label(category.color),
        type=category.type,
        description=category.description,
    )


def _participant_to_detail(participant: ParticipantEntity) -> ParticipantDetail:
    """Convert ParticipantEntity to ParticipantDetail."""
    team = None
    if participant.team is not None:
        team = TeamSummaryRef(id=participant.team.id, name=participant.team.name)

    return ParticipantDetail(
        id=participant.id,
        name=format_person_name(
            PersonRef(first_name=participant.first_name, last_name=participant.last_name)
        ),
        first_name=participant.first_name,
        last_name=participant.last_name,
        team=team,
        nganh=participant.nganh,
    )


@router.get("/ceremonies", response_model=list[CeremonyDetail])
def get_ceremonies(session: StoreSession = Depends(get_store_session)) -> list[CeremonyDetail]:
    """List ceremonies in running order."""
    try:
        ceremonies = repo.list_ceremonies(session)
    except StoreError as e:
        logger.error(f"[api/ceremonies] Failed to fetch ceremonies: {e}")
        raise HTTPException(status_code=500, detail="Failed to load ceremonies.") from e

    return [
        CeremonyDetail(id=c.id, name=c.name, order=c.order, notes=c.notes) for c in ceremonies
    ]


@router.get("/categories", response_model=list[CategoryDetail])
def get_categories(session: StoreSession = Depends(get_store_session)) -> list[CategoryDetail]:
    """List award categories by name."""
    try:
        categories = repo.list_award_categories(session)
    except StoreError as e:
        logger.error(f"[api/categories] Failed to fetch categories: {e}")
        raise HTTPException(status_code=500, detail="Failed to load award categories.") from e

    return [_category_to_detail(category) for category in categories]


@router.get("/participants", response_model=list[ParticipantDetail])
def get_participants(
    session: StoreSession = Depends(get_store_session),
) -> list[ParticipantDetail]:
    """List participants with their teams."""
    try:
        participants = repo.list_participants(session)
    except StoreError as e:
        logger.error(f"[api/participants] Failed to fetch participants: {e}")
        raise HTTPException(status_code=500, detail="Failed to load participants.") from e

    return [_participant_to_detail(participant) for participant in participants]


@router.get("/teams", response_model=list[TeamDetail])
def get_teams(session: StoreSession = Depends(get_store_session)) -> list[TeamDetail]:
    """List teams."""
    try:
        teams = repo.list_teams(session)
    except StoreError as e:
        logger.error(f"[api/teams] Failed to fetch teams: {e}")
        raise HTTPException(status_code=500, detail="Failed to load teams.") from e

    return [TeamDetail(id=team.id, name=team.name) for team in teams]
