"""Participant and team recognition aggregation.

Builds participant/team leaderboards, the lists of those still awaiting
recognition, and the queue of pending nominations.
Domain logic is pure - store access happens in the caller.
"""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass, field

from awardops.aggregation.ceremony import color_breakdown
from awardops.core.labels import (
    INDIVIDUAL_NOMINEE,
    TEAM_NOMINEE,
    UNASSIGNED_TEAM,
    UNKNOWN_PARTICIPANT,
    UNKNOWN_TEAM,
    category_color,
    category_name,
    format_person_name,
)
from awardops.core.timestamps import timestamp_key
from awardops.models.domain import AwardEntity, ParticipantEntity, PersonRef, TeamEntity
from awardops.models.types import (
    ParticipantStat,
    ParticipantTeamMetrics,
    ParticipantTeamSummary,
    PendingAwardEntry,
    TeamAwardDetail,
    TeamStat,
)

logger = logging.getLogger(__name__)

LEADERBOARD_LIMIT = 10


@dataclass
class ParticipantTally:
    """Running totals for one participant."""

    record: ParticipantEntity | None
    total: int = 0
    colors: Counter = field(default_factory=Counter)


@dataclass
class TeamTally:
    """Running totals for one team."""

    record: TeamEntity | None
    team_award_count: int = 0
    colors: Counter = field(default_factory=Counter)
    participants_recognized: set[int] = field(default_factory=set)
    team_awards: list[TeamAwardDetail] = field(default_factory=list)
    individual_awards: list[TeamAwardDetail] = field(default_factory=list)


def build_participant_team_summary(
    awards: list[AwardEntity],
    participants: list[ParticipantEntity],
    teams: list[TeamEntity],
) -> ParticipantTeamSummary:
    """Compute participant and team recognition from approved awards.

    Every supplied participant and team starts with zero awards so that those
    never recognized still show up as pending recognition. Approved individual
    awards credit the participant (and mark them recognized under their team);
    other approved awards with a team nominee credit the team. Awards matching
    neither rule are ignored.

    Args:
        awards: Awards scoped to a ceremony or the whole event.
        participants: Every known participant.
        teams: Every known team.

    Returns:
        ParticipantTeamSummary with leaderboards (top 10), pending
        recognition lists (top 10), all awarded teams and the pending queue.
    """
    participant_tallies: dict[int, ParticipantTally] = {
        participant.id: ParticipantTally(record=participant) for participant in participants
    }
    team_tallies: dict[int, TeamTally] = {team.id: TeamTally(record=team) for team in teams}
    teams_by_id = {team.id: team for team in teams}

    approved = [award for award in awards if award.status == "approved"]

    for award in approved:
        participant_id = _nominee_id(award.participant_nominee)
        team_id = award.team_nominee.id if award.team_nominee is not None else None

        if award.type == "individual" and participant_id is not None:
            _credit_participant(
                award, participant_id, participant_tallies, team_tallies, teams_by_id
            )
        elif team_id is not None:
            tally = team_tallies.get(team_id)
            if tally is None:
                logger.debug(f"Award {award.id} names unknown team {team_id}")
                tally = team_tallies[team_id] = TeamTally(record=teams_by_id.get(team_id))
            tally.team_award_count += 1
            tally.colors[category_color(award)] += 1
            tally.team_awards.append(_team_detail(award))

    participant_stats = [_participant_stat(pid, tally) for pid, tally in participant_tallies.items()]
    team_stats = [_team_stat(tid, tally) for tid, tally in team_tallies.items()]

    participants_awarded = sorted(
        (stat for stat in participant_stats if stat.award_count > 0),
        key=lambda stat: (-stat.award_count, stat.id),
    )
    participants_waiting = sorted(
        (stat for stat in participant_stats if stat.award_count == 0),
        key=lambda stat: (stat.team_name, stat.id),
    )
    teams_awarded = sorted(
        (stat for stat in team_stats if stat.award_count > 0),
        key=lambda stat: (-stat.award_count, stat.id),
    )
    teams_waiting = sorted(
        (stat for stat in team_stats if stat.award_count == 0),
        key=lambda stat: (stat.name, stat.id),
    )

    for stat in teams_awarded:
        stat.team_awards.sort(key=lambda detail: (-timestamp_key(detail.submitted_at), detail.id))

    return ParticipantTeamSummary(
        metrics=ParticipantTeamMetrics(
            total_approved_awards=len(approved),
            participants_awarded=len(participants_awarded),
            participants_awaiting_recognition=len(participants_waiting),
            teams_awarded=len(teams_awarded),
            teams_awaiting_recognition=len(teams_waiting),
        ),
        participant_leaderboard=participants_awarded[:LEADERBOARD_LIMIT],
        participants_pending_recognition=participants_waiting[:LEADERBOARD_LIMIT],
        team_leaderboard=teams_awarded[:LEADERBOARD_LIMIT],
        teams=teams_awarded,
        teams_pending_recognition=teams_waiting[:LEADERBOARD_LIMIT],
        pending_awards=pending_queue(awards),
    )


def pending_queue(awards: list[AwardEntity]) -> list[PendingAwardEntry]:
    """Project pending awards into the review queue, newest first."""
    pending = sorted(
        (award for award in awards if award.status == "pending"),
        key=lambda award: (-timestamp_key(award.submitted_at), award.id),
    )
    return [
        PendingAwardEntry(
            id=award.id,
            category_name=category_name(award),
            category_color=category_color(award),
            type=award.type,
            nominee=_pending_nominee(award),
            submitted_at=award.submitted_at,
            ceremony_id=award.ceremony,
        )
        for award in pending
    ]


def _credit_participant(
    award: AwardEntity,
    participant_id: int,
    participant_tallies: dict[int, ParticipantTally],
    team_tallies: dict[int, TeamTally],
    teams_by_id: dict[int, TeamEntity],
) -> None:
    """Count an approved individual award for a participant and their team."""
    tally = participant_tallies.get(participant_id)
    if tally is None:
        # Nominee missing from the participant list: counted without metadata
        logger.debug(f"Award {award.id} names unknown participant {participant_id}")
        tally = participant_tallies[participant_id] = ParticipantTally(record=None)

    tally.total += 1
    tally.colors[category_color(award)] += 1

    record = tally.record
    team_id = record.team.id if record is not None and record.team is not None else None
    if team_id is None:
        return

    team_tally = team_tallies.get(team_id)
    if team_tally is None:
        team_tally = team_tallies[team_id] = TeamTally(record=teams_by_id.get(team_id))
    team_tally.participants_recognized.add(participant_id)
    team_tally.individual_awards.append(_individual_detail(award))


def _nominee_id(person: PersonRef | None) -> int | None:
    return person.id if person is not None else None


def _detail_time(award: AwardEntity) -> str | None:
    if award.submitted_at is not None:
        return award.submitted_at
    return award.approved_at


def _individual_detail(award: AwardEntity) -> TeamAwardDetail:
    return TeamAwardDetail(
        id=award.id,
        kind="participant",
        category_name=category_name(award),
        category_color=category_color(award),
        type=award.type,
        nominee=format_person_name(award.participant_nominee) or INDIVIDUAL_NOMINEE,
        submitted_at=_detail_time(award),
    )


def _team_detail(award: AwardEntity) -> TeamAwardDetail:
    name = award.team_nominee.name if award.team_nominee is not None else None
    return TeamAwardDetail(
        id=award.id,
        kind="team",
        category_name=category_name(award),
        category_color=category_color(award),
        type=award.type,
        nominee=name if name is not None else TEAM_NOMINEE,
        submitted_at=_detail_time(award),
    )


def _pending_nominee(award: AwardEntity) -> str:
    if award.type == "individual":
        return format_person_name(award.participant_nominee) or INDIVIDUAL_NOMINEE
    if award.team_nominee is not None and award.team_nominee.name is not None:
        return award.team_nominee.name
    return TEAM_NOMINEE


def _participant_stat(participant_id: int, tally: ParticipantTally) -> ParticipantStat:
    record = tally.record
    name = ""
    team_name = None
    nganh = None
    if record is not None:
        person = PersonRef(first_name=record.first_name, last_name=record.last_name)
        name = format_person_name(person)
        team_name = record.team.name if record.team is not None else None
        nganh = record.nganh

    return ParticipantStat(
        id=participant_id,
        name=name or UNKNOWN_PARTICIPANT,
        team_name=team_name if team_name is not None else UNASSIGNED_TEAM,
        nganh=nganh,
        award_count=tally.total,
        color_breakdown=color_breakdown(tally.colors),
    )


def _team_stat(team_id: int, tally: TeamTally) -> TeamStat:
    name = tally.record.name if tally.record is not None else None
    return TeamStat(
        id=team_id,
        name=name if name is not None else UNKNOWN_TEAM,
        award_count=tally.team_award_count,
        participants_recognized=len(tally.participants_recognized),
        color_breakdown=color_breakdown(tally.colors),
        team_awards=list(tally.team_awards),
        individual_awards=list(tally.individual_awards),
    )
