"""Tests for nomination validation and submission."""

import pytest

from awardops.models.types import AwardSubmission
from awardops.nominations.submit import change_award_status, submit_nomination
from awardops.nominations.validation import (
    NominationError,
    validate_nomination,
    validate_status,
)
from awardops.store.session import StoreError


class TestValidateNomination:
    """Test validate_nomination."""

    def test_valid_individual(self):
        """Individual awards keep only the participant nominee."""
        result = validate_nomination(1, 2, "individual", participant_id=5, team_id=9)
        assert result.participant_id == 5
        assert result.team_id is None

    def test_valid_team(self):
        """Team awards keep only the team nominee."""
        result = validate_nomination(1, 2, "team", participant_id=5, team_id=9)
        assert result.participant_id is None
        assert result.team_id == 9

    @pytest.mark.parametrize(
        "ceremony_id,category_id,award_type",
        [(None, 2, "team"), (1, None, "team"), (1, 2, None), (0, 2, "team")],
    )
    def test_missing_required_fields(self, ceremony_id, category_id, award_type):
        """Ceremony, category and type are all required."""
        with pytest.raises(NominationError, match="Missing ceremony"):
            validate_nomination(ceremony_id, category_id, award_type, team_id=9)

    def test_unknown_type(self):
        """Unknown award types are rejected."""
        with pytest.raises(NominationError, match="Unknown award type"):
            validate_nomination(1, 2, "mascot", team_id=9)

    def test_individual_requires_participant(self):
        """Individual awards need a participant nominee."""
        with pytest.raises(NominationError, match="participant nominee"):
            validate_nomination(1, 2, "individual", team_id=9)

    @pytest.mark.parametrize("award_type", ["team", "overall"])
    def test_team_requires_team(self, award_type):
        """Team and overall awards need a team nominee."""
        with pytest.raises(NominationError, match="team nominee"):
            validate_nomination(1, 2, award_type, participant_id=5)

    def test_numeric_notes_become_text(self):
        """Numeric notes are kept as text."""
        assert validate_nomination(1, 2, "team", team_id=9, notes=42).notes == "42"

    def test_nomination_error_is_value_error(self):
        """NominationError is a ValueError."""
        assert issubclass(NominationError, ValueError)


class TestValidateStatus:
    """Test validate_status."""

    def test_known_status(self):
        """Known statuses pass through."""
        assert validate_status("rejected") == "rejected"

    def test_missing_status(self):
        """A missing status is a validation error."""
        with pytest.raises(NominationError, match="Missing target status"):
            validate_status(None)

    def test_unknown_status(self):
        """Unknown statuses are validation errors."""
        with pytest.raises(NominationError):
            validate_status("archived")


class TestSubmitNomination:
    """Test submit_nomination against the in-memory store."""

    def test_creates_pending_award(self, store):
        """A valid nomination is stored as pending."""
        submission = AwardSubmission(ceremonyId=1, categoryId=2, type="team", teamId=9)
        award = submit_nomination(store, submission)

        stored = store.collections["awards"][0]
        assert award.status == "pending"
        assert stored["team_nominee"] == 9
        assert stored["participant_nominee"] is None

    def test_invalid_nomination_makes_no_store_call(self, store):
        """Validation failures happen before any store call."""
        submission = AwardSubmission(ceremonyId=1, categoryId=2, type="individual")
        with pytest.raises(NominationError):
            submit_nomination(store, submission)
        assert store.calls == []

    def test_store_failure_propagates(self, store):
        """Store errors reach the caller."""
        store.fail_with = StoreError(503, "Service Unavailable")
        submission = AwardSubmission(ceremonyId=1, categoryId=2, type="team", teamId=9)
        with pytest.raises(StoreError):
            submit_nomination(store, submission)

    def test_change_status_validates_first(self, store):
        """A missing status never reaches the store."""
        with pytest.raises(NominationError):
            change_award_status(store, 1, None)
        assert store.calls == []
