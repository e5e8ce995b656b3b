"""Repository for content store collections.

Encapsulates collection names, field selections and query parameters, keeping
domain logic pure. Returns domain models (not raw store JSON) to callers.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from awardops.models.domain import (
    AwardCategoryEntity,
    AwardEntity,
    AwardStatus,
    CategoryRef,
    CeremonyEntity,
    ParticipantEntity,
    PersonRef,
    TeamEntity,
    TeamRef,
)
from awardops.nominations.validation import NominationInput
from awardops.store.session import StoreSession

CEREMONIES = "award_ceremonies"
AWARDS = "awards"
CATEGORIES = "award_categories"
PARTICIPANTS = "participants"
TEAMS = "teams"

# "-1" asks the store for every row
NO_LIMIT = "-1"

AWARD_FIELDS = (
    "id",
    "status",
    "type",
    "submitted_at",
    "approved_at",
    "category.name",
    "category.color",
    "participant_nominee.id",
    "participant_nominee.first_name",
    "participant_nominee.last_name",
    "team_nominee.id",
    "team_nominee.name",
    "submitted_by.first_name",
    "submitted_by.last_name",
    "ceremony",
)
CATEGORY_FIELDS = ("id", "name", "color", "type", "description")
PARTICIPANT_FIELDS = ("id", "first_name", "last_name", "team.id", "team.name", "nganh")
TEAM_FIELDS = ("id", "name")


def _utc_now() -> str:
    return datetime.now(timezone.utc).isoformat()


# ============================================================================
# Converters: store JSON -> Domain
# ============================================================================


def _relation_id(value: Any) -> int | None:
    """Return the id of a relation that may be expanded or a bare key."""
    if isinstance(value, dict):
        return value.get("id")
    if isinstance(value, int):
        return value
    return None


def _person_ref(value: Any) -> PersonRef | None:
    if isinstance(value, dict):
        return PersonRef(
            id=value.get("id"),
            first_name=value.get("first_name"),
            last_name=value.get("last_name"),
        )
    if isinstance(value, int):
        return PersonRef(id=value)
    return None


def _team_ref(value: Any) -> TeamRef | None:
    if isinstance(value, dict):
        return TeamRef(id=value.get("id"), name=value.get("name"))
    if isinstance(value, int):
        return TeamRef(id=value)
    return None


def _category_ref(value: Any) -> CategoryRef | None:
    if isinstance(value, dict):
        return CategoryRef(id=value.get("id"), name=value.get("name"), color=value.get("color"))
    if isinstance(value, int):
        return CategoryRef(id=value)
    return None


def _award_to_entity(item: dict) -> AwardEntity:
    """Convert a raw award item to domain entity."""
    return AwardEntity(
        id=item["id"],
        status=item.get("status") or "pending",
        type=item.get("type"),
        submitted_at=item.get("submitted_at"),
        approved_at=item.get("approved_at"),
        category=_category_ref(item.get("category")),
        participant_nominee=_person_ref(item.get("participant_nominee")),
        team_nominee=_team_ref(item.get("team_nominee")),
        submitted_by=_person_ref(item.get("submitted_by")),
        ceremony=_relation_id(item.get("ceremony")),
    )


def _ceremony_to_entity(item: dict) -> CeremonyEntity:
    """Convert a raw ceremony item to domain entity."""
    return CeremonyEntity(
        id=item["id"],
        name=item.get("name") or "",
        order=item.get("order"),
        notes=item.get("notes"),
    )


def _category_to_entity(item: dict) -> AwardCategoryEntity:
    """Convert a raw category item to domain entity."""
    return AwardCategoryEntity(
        id=item["id"],
        name=item.get("name") or "",
        color=item.get("color"),
        type=list(item.get("type") or []),
        description=item.get("description"),
    )


def _participant_to_entity(item: dict) -> ParticipantEntity:
    """Convert a raw participant item to domain entity."""
    return ParticipantEntity(
        id=item["id"],
        first_name=item.get("first_name"),
        last_name=item.get("last_name"),
        team=_team_ref(item.get("team")),
        nganh=item.get("nganh"),
    )


def _team_to_entity(item: dict) -> TeamEntity:
    """Convert a raw team item to domain entity."""
    return TeamEntity(id=item["id"], name=item.get("name"))


# ============================================================================
# Reads
# ============================================================================


def list_ceremonies(session: StoreSession) -> list[CeremonyEntity]:
    """Get all ceremonies ordered by their `order` field."""
    items = session.list_items(CEREMONIES, {"sort": "order"})
    return [_ceremony_to_entity(item) for item in items]


def list_awards(session: StoreSession, ceremony_id: int | None = None) -> list[AwardEntity]:
    """Get awards, newest submission first.

    Args:
        session: Store session.
        ceremony_id: Restrict to one ceremony; None returns the whole event.

    Returns:
        List of AwardEntity with category, nominee and submitter expanded.
    """
    params = {
        "fields": ",".join(AWARD_FIELDS),
        "sort": "-submitted_at",
        "limit": NO_LIMIT,
    }
    if ceremony_id:
        params["filter[ceremony][_eq]"] = str(ceremony_id)

    items = session.list_items(AWARDS, params)
    return [_award_to_entity(item) for item in items]


def list_award_categories(session: StoreSession) -> list[AwardCategoryEntity]:
    """Get all award categories ordered by name."""
    params = {"fields": ",".join(CATEGORY_FIELDS), "sort": "name", "limit": NO_LIMIT}
    items = session.list_items(CATEGORIES, params)
    return [_category_to_entity(item) for item in items]


def list_participants(session: StoreSession) -> list[ParticipantEntity]:
    """Get every participant with their team."""
    params = {"fields": ",".join(PARTICIPANT_FIELDS), "limit": NO_LIMIT}
    items = session.list_items(PARTICIPANTS, params)
    return [_participant_to_entity(item) for item in items]


def list_teams(session: StoreSession) -> list[TeamEntity]:
    """Get every team."""
    params = {"fields": ",".join(TEAM_FIELDS), "limit": NO_LIMIT}
    items = session.list_items(TEAMS, params)
    return [_team_to_entity(item) for item in items]


# ============================================================================
# Writes
# ============================================================================


def create_award(
    session: StoreSession,
    nomination: NominationInput,
    status: AwardStatus = "pending",
    now: str | None = None,
) -> AwardEntity:
    """Create an award nomination.

    `submitted_at` is stamped with the current time; `approved_at` is left
    unset and `notes` is only sent when it has visible content.

    Args:
        session: Store session.
        nomination: Validated nomination input.
        status: Initial status.
        now: Override for the submission timestamp.

    Returns:
        The created award.
    """
    payload: dict[str, Any] = {
        "category": nomination.category_id,
        "ceremony": nomination.ceremony_id,
        "type": nomination.type,
        "participant_nominee": nomination.participant_id,
        "team_nominee": nomination.team_id,
        "status": status,
        "submitted_at": now or _utc_now(),
    }
    if nomination.notes and nomination.notes.strip():
        payload["notes"] = nomination.notes

    item = session.create_item(AWARDS, payload)
    return _award_to_entity(item)


def set_award_status(
    session: StoreSession,
    award_id: int,
    status: AwardStatus,
    now: str | None = None,
) -> AwardEntity:
    """Set an award's status.

    `approved_at` is stamped when the new status is "approved" and cleared
    for any other status. There is no transition check: any status can be set
    from any other.

    Args:
        session: Store session.
        award_id: Award to update.
        status: New status.
        now: Override for the approval timestamp.

    Returns:
        The updated award.
    """
    payload: dict[str, Any] = {
        "status": status,
        "approved_at": (now or _utc_now()) if status == "approved" else None,
    }
    item = session.update_item(AWARDS, award_id, payload)
    return _award_to_entity(item)


def approve_award(session: StoreSession, award_id: int) -> AwardEntity:
    """Approve an award."""
    return set_award_status(session, award_id, "approved")

