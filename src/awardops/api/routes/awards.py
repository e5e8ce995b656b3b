"""Awards API endpoints.

GET /api/awards/all - Flat award list (one ceremony or the whole event)
GET /api/awards/by-entity - Awards of one participant or team across ceremonies
POST /api/awards - Submit an award nomination
POST /api/awards/{award_id}/status - Set award status
POST /api/awards/{award_id}/confirm - Approve an award
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Query

from awardops.aggregation.listings import collect_entity_awards, list_award_digests
from awardops.api.app import get_store_session
from awardops.models.domain import AwardEntity, PersonRef
from awardops.models.types import (
    AwardDigest,
    AwardRecord,
    AwardSubmission,
    CategoryLabel,
    EntityAwardEntry,
    PersonName,
    StatusUpdate,
    TeamSummaryRef,
)
from awardops.nominations.submit import change_award_status, confirm_award, submit_nomination
from awardops.nominations.validation import NominationError
from awardops.store import repo
from awardops.store.session import StoreError, StoreSession

logger = logging.getLogger(__name__)

router = APIRouter()


def _person_name(person: PersonRef | None) -> PersonName | None:
    if person is None:
        return None
    return PersonName(id=person.id, first_name=person.first_name, last_name=person.last_name)


def _award_to_record(award: AwardEntity) -> AwardRecord:
    """Convert AwardEntity to AwardRecord."""
    category = None
    if award.category is not None:
        category = CategoryLabel(
            id=award.category.id, name=award.category.name, color=award.category.color
        )
    team = None
    if award.team_nominee is not None:
        team = TeamSummaryRef(id=award.team_nominee.id, name=award.team_nominee.name)

    return AwardRecord(
        id=award.id,
        status=award.status,
        type=award.type,
        submitted_at=award.submitted_at,
        approved_at=award.approved_at,
        category=category,
        participant_nominee=_person_name(award.participant_nominee),
        team_nominee=team,
        submitted_by=_person_name(award.submitted_by),
        ceremony=award.ceremony,
    )


@router.get("/awards/all", response_model=list[AwardDigest])
def get_all_awards(
    ceremony_id: int | None = Query(default=None, alias="ceremonyId"),
    session: StoreSession = Depends(get_store_session),
) -> list[AwardDigest]:
    """List awards of every status, newest submission first.

    Raises:
        HTTPException: 500 if the store request fails.
    """
    try:
        awards = repo.list_awards(session, ceremony_id)
    except StoreError as e:
        logger.error(f"[api/awards/all] Failed to fetch awards: {e}")
        raise HTTPException(status_code=500, detail="Failed to load awards.") from e

    return list_award_digests(awards)


@router.get("/awards/by-entity", response_model=list[EntityAwardEntry])
def get_entity_awards(
    participant_id: int | None = Query(default=None, alias="participantId"),
    team_id: int | None = Query(default=None, alias="teamId"),
    session: StoreSession = Depends(get_store_session),
) -> list[EntityAwardEntry]:
    """List every award of one participant or team across all ceremonies.

    Args:
        participant_id: Participant whose individual awards to list.
        team_id: Team whose team/overall awards to list.
        session: Store session (injected).

    Raises:
        HTTPException: 400 if neither id is given, 500 if the store fails.
    """
    if not participant_id and not team_id:
        raise HTTPException(
            status_code=400, detail="Either participantId or teamId must be provided."
        )

    try:
        awards = repo.list_awards(session)
        ceremonies = repo.list_ceremonies(session)
    except StoreError as e:
        logger.error(f"[api/awards/by-entity] Failed to fetch awards: {e}")
        raise HTTPException(status_code=500, detail="Failed to load awards.") from e

    return collect_entity_awards(
        awards, ceremonies, participant_id=participant_id, team_id=team_id
    )


@router.post("/awards", response_model=AwardRecord, status_code=201)
def create_award(
    submission: AwardSubmission,
    session: StoreSession = Depends(get_store_session),
) -> AwardRecord:
    """Submit an award nomination.

    Args:
        submission: Nomination request body.
        session: Store session (injected).

    Returns:
        AwardRecord of the created pending award.

    Raises:
        HTTPException: 400 for incomplete input, 500 if the store fails.
    """
    try:
        award = submit_nomination(session, submission)
    except NominationError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    except StoreError as e:
        logger.error(f"[api/awards] Failed to create award: {e}")
        raise HTTPException(status_code=500, detail="Failed to create award.") from e

    return _award_to_record(award)


@router.post("/awards/{award_id}/status", response_model=AwardRecord)
def set_award_status(
    award_id: int,
    update: StatusUpdate,
    session: StoreSession = Depends(get_store_session),
) -> AwardRecord:
    """Set an award's status (pending, approved or rejected).

    Raises:
        HTTPException: 400 if the status is missing, 500 if the store fails.
    """
    try:
        award = change_award_status(session, award_id, update.status)
    except NominationError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    except StoreError as e:
        logger.error(f"[api/awards/status] Failed to update award {award_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to update award status.") from e

    return _award_to_record(award)


@router.post("/awards/{award_id}/confirm", response_model=AwardRecord)
def approve_award(
    award_id: int,
    session: StoreSession = Depends(get_store_session),
) -> AwardRecord:
    """Approve an award.

    Raises:
        HTTPException: 500 if the store fails.
    """
    try:
        award = confirm_award(session, award_id)
    except StoreError as e:
        logger.error(f"[api/awards/confirm] Failed to approve award {award_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to approve award.") from e

    return _award_to_record(award)
