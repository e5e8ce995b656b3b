"""Nomination submission and review.

Validates caller input, then writes through the repository.
Domain logic is pure - store operations go through repo.
"""

from __future__ import annotations

import logging

from awardops.models.domain import AwardEntity
from awardops.models.types import AwardSubmission
from awardops.nominations.validation import validate_nomination, validate_status
from awardops.store import repo
from awardops.store.session import StoreSession

logger = logging.getLogger(__name__)


def submit_nomination(session: StoreSession, submission: AwardSubmission) -> AwardEntity:
    """Create a pending award from a nomination request.

    Args:
        session: Store session.
        submission: Nomination request body.

    Returns:
        The created award.

    Raises:
        NominationError: If the request is incomplete; nothing is written.
        StoreError: If the store rejects the write.
    """
    nomination = validate_nomination(
        ceremony_id=submission.ceremony_id,
        category_id=submission.category_id,
        award_type=submission.type,
        participant_id=submission.participant_id,
        team_id=submission.team_id,
        notes=submission.notes,
    )

    award = repo.create_award(session, nomination)
    logger.info(
        f"Nominated {nomination.type} award {award.id} in ceremony {nomination.ceremony_id}"
    )
    return award


def change_award_status(session: StoreSession, award_id: int, status: str | None) -> AwardEntity:
    """Set an award's status after checking the requested value.

    Raises:
        NominationError: If the status is missing or unknown.
        StoreError: If the store rejects the update.
    """
    target = validate_status(status)
    award = repo.set_award_status(session, award_id, target)
    logger.info(f"Award {award_id} set to {target}")
    return award


def confirm_award(session: StoreSession, award_id: int) -> AwardEntity:
    """Approve an award."""
    award = repo.approve_award(session, award_id)
    logger.info(f"Award {award_id} approved")
    return award
