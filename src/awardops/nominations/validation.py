"""Validation of award nomination and status-change input."""

from __future__ import annotations

from dataclasses import dataclass

from awardops.models.domain import AWARD_STATUSES, AWARD_TYPES, AwardStatus, AwardType


class NominationError(ValueError):
    """Raised when caller input for an award is missing or inconsistent."""


@dataclass
class NominationInput:
    """Validated input for creating an award.

    Exactly one of participant_id/team_id is set, matching the award type.
    """

    ceremony_id: int
    category_id: int
    type: AwardType
    participant_id: int | None = None
    team_id: int | None = None
    notes: str | None = None


def validate_nomination(
    ceremony_id: int | None,
    category_id: int | None,
    award_type: str | None,
    participant_id: int | None = None,
    team_id: int | None = None,
    notes: str | int | float | None = None,
) -> NominationInput:
    """Check nomination fields and build a NominationInput.

    Args:
        ceremony_id: Ceremony the award belongs to.
        category_id: Award category.
        award_type: "individual", "team" or "overall".
        participant_id: Nominee for individual awards.
        team_id: Nominee for team and overall awards.
        notes: Optional free-form notes; numbers are kept as text.

    Returns:
        NominationInput with only the nominee relevant to the type.

    Raises:
        NominationError: If required ids are missing or the nominee does not
            match the award type.
    """
    if not ceremony_id or not category_id or not award_type:
        raise NominationError("Missing ceremony, category, or type information.")

    if award_type not in AWARD_TYPES:
        raise NominationError(f"Unknown award type: {award_type}")

    if award_type == "individual" and not participant_id:
        raise NominationError("Participant award requires a participant nominee.")

    if award_type != "individual" and not team_id:
        raise NominationError("Team or overall award requires a team nominee.")

    if isinstance(notes, (int, float)) and not isinstance(notes, bool):
        notes = str(notes)
    elif not isinstance(notes, str):
        notes = None

    return NominationInput(
        ceremony_id=ceremony_id,
        category_id=category_id,
        type=award_type,
        participant_id=participant_id if award_type == "individual" else None,
        team_id=None if award_type == "individual" else team_id,
        notes=notes,
    )


def validate_status(status: str | None) -> AwardStatus:
    """Check a requested award status.

    Raises:
        NominationError: If the status is missing or not a known status.
    """
    if not status:
        raise NominationError("Missing target status.")
    if status not in AWARD_STATUSES:
        raise NominationError(f"Unknown award status: {status}")
    return status
