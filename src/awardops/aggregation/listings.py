"""Flat award listings for the awards page and entity history.

Pure functions over already-fetched awards and ceremonies.
"""

from __future__ import annotations

from awardops.core.labels import category_color, category_name, nominee_label
from awardops.models.domain import AwardEntity, CeremonyEntity
from awardops.models.types import AwardDigest, EntityAwardEntry

# Ceremonies without an order sort after every ordered one
UNORDERED_CEREMONY = 999

TEAM_AWARD_TYPES = ("team", "overall")


def _display_time(award: AwardEntity) -> str | None:
    if award.submitted_at is not None:
        return award.submitted_at
    return award.approved_at


def list_award_digests(awards: list[AwardEntity]) -> list[AwardDigest]:
    """Format awards as flat rows, keeping the input order."""
    return [
        AwardDigest(
            id=award.id,
            category_name=category_name(award),
            category_color=category_color(award),
            status=award.status,
            type=award.type,
            nominee=nominee_label(award),
            submitted_at=_display_time(award),
        )
        for award in awards
    ]


def collect_entity_awards(
    awards: list[AwardEntity],
    ceremonies: list[CeremonyEntity],
    participant_id: int | None = None,
    team_id: int | None = None,
) -> list[EntityAwardEntry]:
    """Collect every award received by one participant or one team.

    A participant receives individual awards; a team receives team and
    overall awards. When both ids are given the participant wins.

    Args:
        awards: Awards across all ceremonies.
        ceremonies: Ceremonies used to label each award.
        participant_id: Participant to collect awards for.
        team_id: Team to collect awards for.

    Returns:
        List of EntityAwardEntry in input order.

    Raises:
        ValueError: If neither participant_id nor team_id is given.
    """
    if not participant_id and not team_id:
        raise ValueError("Either participantId or teamId must be provided.")

    ceremonies_by_id = {ceremony.id: ceremony for ceremony in ceremonies}

    if participant_id:
        selected = [
            award
            for award in awards
            if award.type == "individual"
            and award.participant_nominee is not None
            and award.participant_nominee.id == participant_id
        ]
    else:
        selected = [
            award
            for award in awards
            if award.type in TEAM_AWARD_TYPES
            and award.team_nominee is not None
            and award.team_nominee.id == team_id
        ]

    entries = []
    for award in selected:
        ceremony = ceremonies_by_id.get(award.ceremony) if award.ceremony else None
        order = ceremony.order if ceremony is not None else None
        entries.append(
            EntityAwardEntry(
                id=award.id,
                category_name=category_name(award),
                category_color=category_color(award),
                status=award.status,
                type=award.type,
                submitted_at=_display_time(award),
                ceremony_id=award.ceremony,
                ceremony_name=ceremony.name if ceremony is not None else None,
                ceremony_order=order if order is not None else UNORDERED_CEREMONY,
            )
        )
    return entries
