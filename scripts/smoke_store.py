#!/usr/bin/env python3
"""Smoke test against a live content store.

Validates that the configured store answers every collection read used by the
dashboard and that the summaries build from the returned data. Read-only.

Usage:
    DIRECTUS_URL=... DIRECTUS_STATIC_TOKEN=... python scripts/smoke_store.py

Exit codes:
    0: All checks passed
    1: Some checks failed
"""

from __future__ import annotations

import sys
from pathlib import Path

# Add src to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from pydantic import ValidationError  # noqa: E402

from awardops.aggregation.ceremony import build_ceremony_summary  # noqa: E402
from awardops.aggregation.participants import build_participant_team_summary  # noqa: E402
from awardops.config import StoreConfig, StoreConfigError  # noqa: E402
from awardops.store import repo  # noqa: E402
from awardops.store.session import StoreError, StoreSession, open_session  # noqa: E402


def check_collections(session: StoreSession) -> dict | None:
    """Check that every collection can be read."""
    loaded = {}
    readers = {
        "ceremonies": repo.list_ceremonies,
        "categories": repo.list_award_categories,
        "awards": repo.list_awards,
        "participants": repo.list_participants,
        "teams": repo.list_teams,
    }

    for name, reader in readers.items():
        try:
            loaded[name] = reader(session)
        except StoreError as e:
            print(f"FAIL: {name}: {e}")
            return None
        print(f"OK: {name}: {len(loaded[name])} records")

    return loaded


def check_summaries(loaded: dict) -> bool:
    """Check that both summaries build from live data and agree on counts."""
    awards = loaded["awards"]
    try:
        summary = build_ceremony_summary(awards)
        recognition = build_participant_team_summary(
            awards, loaded["participants"], loaded["teams"]
        )
    except ValidationError as e:
        print(f"FAIL: Summaries rejected store data: {e}")
        return False

    metrics = summary.metrics
    print(f"OK: Ceremony summary: {metrics.pending} pending, {metrics.approved} approved")
    print(
        f"OK: Recognition summary: {recognition.metrics.participants_awarded} participants, "
        f"{recognition.metrics.teams_awarded} teams awarded"
    )

    approved = sum(1 for award in awards if award.status == "approved")
    pending = sum(1 for award in awards if award.status == "pending")
    if (metrics.approved, metrics.pending) != (approved, pending):
        print(
            f"FAIL: Summary counts {metrics.approved}/{metrics.pending}, "
            f"store {approved}/{pending}"
        )
        return False
    if recognition.metrics.total_approved_awards != approved:
        print(
            f"FAIL: Recognition counts {recognition.metrics.total_approved_awards} approved, "
            f"store {approved}"
        )
        return False
    return True


def check_ceremony_scoping(session: StoreSession, loaded: dict) -> bool:
    """Check that per-ceremony award reads stay inside their ceremony."""
    ok = True
    for ceremony in loaded["ceremonies"]:
        awards = repo.list_awards(session, ceremony.id)
        stray = [award.id for award in awards if award.ceremony != ceremony.id]
        if stray:
            print(f"FAIL: {ceremony.name}: awards from other ceremonies {stray}")
            ok = False
        else:
            print(f"    OK: {ceremony.name} - {len(awards)} awards")
    return ok


def main() -> int:
    """Run all smoke checks."""
    print("=" * 60)
    print("Award store smoke test")
    print("=" * 60)

    try:
        config = StoreConfig.from_env()
    except StoreConfigError as e:
        print(f"FAIL: {e}")
        return 1

    print(f"Store: {config.endpoint}")

    with open_session(config) as session:
        print("\n[1/3] Reading collections...")
        loaded = check_collections(session)
        if loaded is None:
            print("\n" + "=" * 60)
            print("RESULT: store unreachable or misconfigured")
            print("=" * 60)
            return 1

        print("\n[2/3] Building summaries...")
        summaries_ok = check_summaries(loaded)

        print("\n[3/3] Checking ceremony filters...")
        try:
            scoping_ok = check_ceremony_scoping(session, loaded)
        except StoreError as e:
            print(f"FAIL: {e}")
            scoping_ok = False

    print("\n" + "=" * 60)
    if summaries_ok and scoping_ok:
        print("RESULT: ALL PASSED")
        print("=" * 60)
        return 0
    print("RESULT: FAILED")
    print("=" * 60)
    return 1


if __name__ == "__main__":
    sys.exit(main())
