"""Pydantic models for the award operations API.

Payload keys are serialized in camelCase for the dashboard UI; Python code
constructs the models with snake_case field names.
"""

from typing import Literal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

AwardStatus = Literal["pending", "approved", "rejected"]
AwardType = Literal["individual", "team", "overall"]


class ApiModel(BaseModel):
    """Base for API payloads: camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ColorCount(ApiModel):
    """Number of approved awards carrying one category colour."""

    color: str
    count: int


# ============================================================================
# Ceremony summary
# ============================================================================


class CeremonyMetrics(ApiModel):
    """Headline counts for a ceremony (or the whole event)."""

    pending: int
    approved: int
    individuals_awarded: int
    teams_awarded: int


class PendingAwardDigest(ApiModel):
    """Recent pending award as shown on the ceremony overview."""

    id: int
    category_name: str
    category_color: str
    type: AwardType | None
    nominee: str
    submitted_at: str | None
    submitted_by: str
    ceremony_id: int | None


class ApprovedAwardDigest(PendingAwardDigest):
    """Recent approved award; `submitted_at` holds the approval time when known."""

    status: AwardStatus


class CeremonySummary(ApiModel):
    """Ceremony overview payload."""

    metrics: CeremonyMetrics
    latest_approved: list[ApprovedAwardDigest]
    latest_pending: list[PendingAwardDigest]
    color_breakdown: list[ColorCount]


# ============================================================================
# Participant / team summary
# ============================================================================


class ParticipantStat(ApiModel):
    """Leaderboard row for a participant."""

    id: int
    name: str
    team_name: str
    nganh: str | None
    award_count: int
    color_breakdown: list[ColorCount]


class TeamAwardDetail(ApiModel):
    """Approved award credited to a team, either directly or via a member."""

    id: int
    kind: Literal["team", "participant"]
    category_name: str
    category_color: str
    type: AwardType | None
    nominee: str
    submitted_at: str | None


class TeamStat(ApiModel):
    """Leaderboard row for a team."""

    id: int
    name: str
    award_count: int
    participants_recognized: int
    color_breakdown: list[ColorCount]
    team_awards: list[TeamAwardDetail]
    individual_awards: list[TeamAwardDetail]


class PendingAwardEntry(ApiModel):
    """Pending award in the review queue."""

    id: int
    category_name: str
    category_color: str
    type: AwardType | None
    nominee: str
    submitted_at: str | None
    ceremony_id: int | None


class ParticipantTeamMetrics(ApiModel):
    """Headline counts for the participant/team overview."""

    total_approved_awards: int
    participants_awarded: int
    participants_awaiting_recognition: int
    teams_awarded: int
    teams_awaiting_recognition: int


class ParticipantTeamSummary(ApiModel):
    """Participant/team overview payload."""

    metrics: ParticipantTeamMetrics
    participant_leaderboard: list[ParticipantStat]
    participants_pending_recognition: list[ParticipantStat]
    team_leaderboard: list[TeamStat]
    teams: list[TeamStat]
    teams_pending_recognition: list[TeamStat]
    pending_awards: list[PendingAwardEntry]


# ============================================================================
# Award listings
# ============================================================================


class AwardDigest(ApiModel):
    """Flat award row for the awards page."""

    id: int
    category_name: str
    category_color: str
    status: AwardStatus
    type: AwardType | None
    nominee: str
    submitted_at: str | None


class EntityAwardEntry(ApiModel):
    """Award received by one participant or team, with its ceremony."""

    id: int
    category_name: str
    category_color: str
    status: AwardStatus
    type: AwardType | None
    submitted_at: str | None
    ceremony_id: int | None
    ceremony_name: str | None
    ceremony_order: int


# ============================================================================
# Reference data
# ============================================================================


class CeremonyDetail(ApiModel):
    """Ceremony for selectors and headings."""

    id: int
    name: str
    order: int | None
    notes: str | None


class CategoryDetail(ApiModel):
    """Award category with its resolved display colour."""

    id: int
    name: str
    color: str | None
    color_hex: str
    color_label: str
    type: list[str]
    description: str | None


class TeamSummaryRef(ApiModel):
    """Team embedded in a participant row."""

    id: int | None
    name: str | None


class ParticipantDetail(ApiModel):
    """Participant directory row."""

    id: int
    name: str
    first_name: str | None
    last_name: str | None
    team: TeamSummaryRef | None
    nganh: str | None


class TeamDetail(ApiModel):
    """Team directory row."""

    id: int
    name: str | None


# ============================================================================
# Writes
# ============================================================================


class AwardSubmission(ApiModel):
    """Award nomination request.

    Presence and nominee/type consistency are checked by the nominations
    layer so that those failures are reported as validation errors.
    """

    ceremony_id: int | None = Field(
        default=None, validation_alias=AliasChoices("ceremonyId", "ceremony", "ceremony_id")
    )
    category_id: int | None = Field(
        default=None, validation_alias=AliasChoices("categoryId", "category", "category_id")
    )
    type: str | None = None
    participant_id: int | None = Field(
        default=None,
        validation_alias=AliasChoices("participantId", "participant_nominee", "participant_id"),
    )
    team_id: int | None = Field(
        default=None, validation_alias=AliasChoices("teamId", "team_nominee", "team_id")
    )
    notes: str | int | float | None = None

    @field_validator("ceremony_id", "category_id", "participant_id", "team_id", mode="before")
    @classmethod
    def json_number_ids(cls, value: object) -> object:
        """Ids must be JSON integers; anything else counts as missing."""
        if isinstance(value, bool) or not isinstance(value, int):
            return None
        return value

    @field_validator("notes", mode="before")
    @classmethod
    def text_or_number_notes(cls, value: object) -> object:
        if isinstance(value, bool) or not isinstance(value, (str, int, float)):
            return None
        return value


class StatusUpdate(ApiModel):
    """Award status change request."""

    status: AwardStatus | None = None


class PersonName(ApiModel):
    """Name fields of an embedded person."""

    id: int | None
    first_name: str | None
    last_name: str | None


class CategoryLabel(ApiModel):
    """Embedded category reference."""

    id: int | None
    name: str | None
    color: str | None


class AwardRecord(ApiModel):
    """Award as stored, returned from create and status operations."""

    id: int
    status: AwardStatus
    type: AwardType | None
    submitted_at: str | None
    approved_at: str | None
    category: CategoryLabel | None
    participant_nominee: PersonName | None
    team_nominee: TeamSummaryRef | None
    submitted_by: PersonName | None
    ceremony: int | None
