"""Display labels derived from raw records.

All helpers are pure and total: missing relations, blank names and unknown
colour tokens produce fallback labels rather than errors.
"""

from __future__ import annotations

from awardops.models.domain import AwardEntity, PersonRef

UNKNOWN_CATEGORY = "Unknown category"
UNKNOWN_REFEREE = "Unknown referee"
UNKNOWN_PARTICIPANT = "Unknown participant"
UNKNOWN_TEAM = "Unknown team"
UNASSIGNED_TEAM = "Unassigned"
INDIVIDUAL_NOMINEE = "Individual nominee"
TEAM_NOMINEE = "Team nominee"
NOMINEE_TBD = "Nominee TBD"

DEFAULT_COLOR = "gray"

# Category colour tokens -> UI palette
COLOR_PALETTE: dict[str, str] = {
    "green": "#22c55e",
    "blue": "#3b82f6",
    "yellow": "#facc15",
    "red": "#ef4444",
    "brown": "#92400e",
    "gold": "#f59e0b",
    "co_danh_du": "#f97316",
    "gray": "#94a3b8",
}


def format_person_name(person: PersonRef | None) -> str:
    """Join a person's non-blank first and last names with a single space.

    Returns an empty string when the person is missing or has no name.
    """
    if person is None:
        return ""

    parts = [part for part in (person.first_name, person.last_name) if part and part.strip()]
    return " ".join(parts)


def nominee_label(award: AwardEntity) -> str:
    """Return the display label for whoever an award is for."""
    if award.type == "individual" and award.participant_nominee is not None:
        return format_person_name(award.participant_nominee) or INDIVIDUAL_NOMINEE

    if award.team_nominee is not None and award.team_nominee.name:
        return award.team_nominee.name

    return NOMINEE_TBD


def category_name(award: AwardEntity) -> str:
    """Category name of an award, or the unknown-category label."""
    if award.category is None or award.category.name is None:
        return UNKNOWN_CATEGORY
    return award.category.name


def category_color(award: AwardEntity) -> str:
    """Category colour token of an award, defaulting to gray."""
    if award.category is None or award.category.color is None:
        return DEFAULT_COLOR
    return award.category.color


def submitter_label(award: AwardEntity) -> str:
    """Name of the referee who submitted an award."""
    return format_person_name(award.submitted_by) or UNKNOWN_REFEREE


def resolve_color(token: str | None) -> str:
    """Map a colour token to a palette key, falling back to gray."""
    if token in COLOR_PALETTE:
        return token
    return DEFAULT_COLOR


def color_hex(token: str | None) -> str:
    """Hex value for a colour token."""
    return COLOR_PALETTE[resolve_color(token)]


def color_label(token: str | None) -> str:
    """Human-readable colour name, e.g. "co_danh_du" -> "Co Danh Du"."""
    if not token:
        return "Unknown color"
    return " ".join(word[:1].upper() + word[1:] for word in token.replace("_", " ").split())
