"""Overview API endpoints.

GET /api/overview - Ceremony summary (one ceremony or the whole event)
GET /api/overview/participants - Participant/team recognition summary
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Query

from awardops.aggregation.ceremony import build_ceremony_summary
from awardops.aggregation.participants import build_participant_team_summary
from awardops.api.app import get_store_session
from awardops.models.types import CeremonySummary, ParticipantTeamSummary
from awardops.store import repo
from awardops.store.session import StoreError, StoreSession

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/overview", response_model=CeremonySummary)
def get_ceremony_overview(
    ceremony_id: int | None = Query(default=None, alias="ceremonyId"),
    session: StoreSession = Depends(get_store_session),
) -> CeremonySummary:
    """Get ceremony summary.

    Args:
        ceremony_id: Ceremony to summarize; omitted for the whole event.
        session: Store session (injected).

    Returns:
        CeremonySummary with metrics, latest awards and colour breakdown.

    Raises:
        HTTPException: 500 if the store request fails.
    """
    try:
        awards = repo.list_awards(session, ceremony_id)
    except StoreError as e:
        logger.error(f"[api/overview] Failed to build summary: {e}")
        raise HTTPException(status_code=500, detail="Failed to load ceremony summary.") from e

    return build_ceremony_summary(awards)


@router.get("/overview/participants", response_model=ParticipantTeamSummary)
def get_participant_overview(
    ceremony_id: int | None = Query(default=None, alias="ceremonyId"),
    session: StoreSession = Depends(get_store_session),
) -> ParticipantTeamSummary:
    """Get participant and team recognition summary.

    All three lists must load before the summary is built; any failure aborts
    the request.

    Args:
        ceremony_id: Ceremony to summarize; omitted for the whole event.
        session: Store session (injected).

    Returns:
        ParticipantTeamSummary with leaderboards and pending queues.

    Raises:
        HTTPException: 500 if any store request fails.
    """
    try:
        awards = repo.list_awards(session, ceremony_id)
        participants = repo.list_participants(session)
        teams = repo.list_teams(session)
    except StoreError as e:
        logger.error(f"[api/overview/participants] Failed to build summary: {e}")
        raise HTTPException(
            status_code=500, detail="Failed to load participant/team summary."
        ) from e

    return build_participant_team_summary(awards, participants, teams)
