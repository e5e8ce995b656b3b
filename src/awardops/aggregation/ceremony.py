"""Ceremony summary aggregation.

Computes pending/approved counts, recent approvals and nominations, and the
colour histogram of approved awards for one ceremony or the whole event.
"""

from __future__ import annotations

from collections import Counter

from awardops.core.labels import (
    category_color,
    category_name,
    format_person_name,
    nominee_label,
    submitter_label,
)
from awardops.core.timestamps import timestamp_key
from awardops.models.domain import AwardEntity
from awardops.models.types import (
    ApprovedAwardDigest,
    CeremonyMetrics,
    CeremonySummary,
    ColorCount,
    PendingAwardDigest,
)

LATEST_LIMIT = 5


def build_ceremony_summary(awards: list[AwardEntity]) -> CeremonySummary:
    """Build the ceremony overview from a list of awards.

    Args:
        awards: Awards already scoped to a ceremony (or the whole event).

    Returns:
        CeremonySummary with metrics, the five latest approved and pending
        awards, and the colour breakdown of approved awards.
    """
    approved = [award for award in awards if award.status == "approved"]
    pending = [award for award in awards if award.status == "pending"]

    individuals = {
        format_person_name(award.participant_nominee)
        for award in approved
        if award.type == "individual"
    }
    individuals.discard("")

    teams = {
        award.team_nominee.name
        for award in approved
        if award.team_nominee is not None and award.team_nominee.name
    }

    metrics = CeremonyMetrics(
        pending=len(pending),
        approved=len(approved),
        individuals_awarded=len(individuals),
        teams_awarded=len(teams),
    )

    latest_approved = sorted(
        approved,
        key=lambda award: (-timestamp_key(_approval_time(award)), award.id),
    )[:LATEST_LIMIT]
    latest_pending = sorted(
        pending,
        key=lambda award: (-timestamp_key(award.submitted_at), award.id),
    )[:LATEST_LIMIT]

    return CeremonySummary(
        metrics=metrics,
        latest_approved=[_approved_digest(award) for award in latest_approved],
        latest_pending=[_pending_digest(award) for award in latest_pending],
        color_breakdown=color_breakdown(Counter(category_color(award) for award in approved)),
    )


def color_breakdown(counts: Counter) -> list[ColorCount]:
    """Convert colour counters to payload rows, most frequent first."""
    ordered = sorted(counts.items(), key=lambda item: (-item[1], item[0]))
    return [ColorCount(color=color, count=count) for color, count in ordered]


def _approval_time(award: AwardEntity) -> str | None:
    if award.approved_at is not None:
        return award.approved_at
    return award.submitted_at


def _approved_digest(award: AwardEntity) -> ApprovedAwardDigest:
    return ApprovedAwardDigest(
        id=award.id,
        category_name=category_name(award),
        category_color=category_color(award),
        status=award.status,
        type=award.type,
        nominee=nominee_label(award),
        submitted_at=_approval_time(award),
        submitted_by=submitter_label(award),
        ceremony_id=award.ceremony,
    )


def _pending_digest(award: AwardEntity) -> PendingAwardDigest:
    return PendingAwardDigest(
        id=award.id,
        category_name=category_name(award),
        category_color=category_color(award),
        type=award.type,
        nominee=nominee_label(award),
        submitted_at=award.submitted_at,
        submitted_by=submitter_label(award),
        ceremony_id=award.ceremony,
    )
