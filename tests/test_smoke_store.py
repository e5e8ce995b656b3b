"""Tests for the live store smoke script checks."""

import runpy
from pathlib import Path

import pytest

from awardops.models.domain import AwardEntity, ParticipantEntity, PersonRef, TeamEntity, TeamRef

SCRIPT = Path(__file__).parent.parent / "scripts" / "smoke_store.py"


@pytest.fixture
def smoke():
    """Module globals of the smoke script, without running main()."""
    return runpy.run_path(str(SCRIPT))


def loaded_data(awards):
    return {
        "awards": awards,
        "participants": [ParticipantEntity(id=5, first_name="Ann", last_name="Le")],
        "teams": [TeamEntity(id=9, name="Owls")],
    }


class TestCheckSummaries:
    """Test check_summaries."""

    def test_consistent_data_passes(self, smoke):
        """Summaries built from well-formed awards pass."""
        awards = [
            AwardEntity(id=1, status="approved", type="individual",
                        participant_nominee=PersonRef(id=5, first_name="Ann", last_name="Le")),
            AwardEntity(id=2, status="pending", type="team", team_nominee=TeamRef(9, "Owls")),
        ]
        assert smoke["check_summaries"](loaded_data(awards)) is True

    def test_unbuildable_data_fails(self, smoke, capsys):
        """Store records the summaries cannot represent fail the check."""
        awards = [AwardEntity(id=1, status="approved", type="special")]

        assert smoke["check_summaries"](loaded_data(awards)) is False
        assert "FAIL: Summaries rejected store data" in capsys.readouterr().out
