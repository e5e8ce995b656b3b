"""Domain models for award operations.

Pure Python dataclasses representing content store records.
These models are independent of the store's JSON shape and used throughout
the application; the repository converts raw store payloads into them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

AwardStatus = Literal["pending", "approved", "rejected"]
AwardType = Literal["individual", "team", "overall"]

AWARD_STATUSES: tuple[str, ...] = ("pending", "approved", "rejected")
AWARD_TYPES: tuple[str, ...] = ("individual", "team", "overall")


# ============================================================================
# Relation references
# ============================================================================


@dataclass
class PersonRef:
    """A participant or store user as embedded in another record."""

    id: int | None = None
    first_name: str | None = None
    last_name: str | None = None


@dataclass
class TeamRef:
    """A team as embedded in another record."""

    id: int | None = None
    name: str | None = None


@dataclass
class CategoryRef:
    """An award category as embedded in an award."""

    id: int | None = None
    name: str | None = None
    color: str | None = None


# ============================================================================
# Ceremony Domain
# ============================================================================


@dataclass
class CeremonyEntity:
    """Domain model for an award ceremony."""

    id: int
    name: str
    order: int | None = None
    notes: str | None = None


@dataclass
class AwardCategoryEntity:
    """Domain model for an award category."""

    id: int
    name: str
    color: str | None = None
    type: list[str] = field(default_factory=list)
    description: str | None = None


# ============================================================================
# People Domain
# ============================================================================


@dataclass
class ParticipantEntity:
    """Domain model for an event participant.

    `nganh` is the participant's department/track label.
    """

    id: int
    first_name: str | None = None
    last_name: str | None = None
    team: TeamRef | None = None
    nganh: str | None = None


@dataclass
class TeamEntity:
    """Domain model for a team."""

    id: int
    name: str | None = None


# ============================================================================
# Award Domain
# ============================================================================


@dataclass
class AwardEntity:
    """Domain model for an award nomination.

    Timestamps are kept as the ISO-8601 strings the store returns.
    """

    id: int
    status: AwardStatus
    type: AwardType | None = None
    submitted_at: str | None = None
    approved_at: str | None = None
    category: CategoryRef | None = None
    participant_nominee: PersonRef | None = None
    team_nominee: TeamRef | None = None
    submitted_by: PersonRef | None = None
    ceremony: int | None = None
