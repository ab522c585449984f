"""Unit tests for ExportDataUseCase."""

from datetime import date
from uuid import uuid4

import pytest

from life.application.usecase.export import ExportDataRequest, ExportDataUseCase
from life.domain.service import (
    DecisionService,
    JournalService,
    LifePhaseService,
    PrivateProfileService,
)
from life.domain.value import IdentityId
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestExportData:
    """Tests for ExportDataUseCase."""

    @pytest.mark.asyncio
    async def test_export_contains_only_callers_records(self, unit_env):
        """Everything the caller owns, nothing anyone else owns."""
        decisions = await unit_env.get(DecisionService)
        journal = await unit_env.get(JournalService)
        phases = await unit_env.get(LifePhaseService)
        private_profiles = await unit_env.get(PrivateProfileService)
        use_case = await unit_env.get(ExportDataUseCase)
        me = IdentityId(uuid4())
        other = IdentityId(uuid4())

        decision = await decisions.create(me, "Mine", 3)
        await decisions.add_reflection(me, decision.id, "Looking back")
        await decisions.create(other, "Theirs", 3)
        await journal.create(me, "Dear diary")
        await journal.create(other, "Not yours")
        phase = await phases.create(me, "Now", date(2024, 1, 1), is_active=True)
        await phases.add_goal(me, phase.id, "Rest")
        await private_profiles.create_or_update(
            me, values=["care"], joys=["tea"], remembered_as="Present"
        )

        result = await use_case.execute(ExportDataRequest(identity_id=me))
        snapshot = result.snapshot

        assert [d.title for d in snapshot.decisions] == ["Mine"]
        assert [r.content for r in snapshot.decisions[0].reflections] == ["Looking back"]
        assert [e.content for e in snapshot.journal_entries] == ["Dear diary"]
        assert [p.name for p in snapshot.life_phases] == ["Now"]
        assert [g.title for g in snapshot.life_phases[0].goals] == ["Rest"]
        assert snapshot.private_profile.joys == ["tea"]
        assert snapshot.exported_at is not None
        assert result.filename == (
            f"life-export-{snapshot.exported_at.date().isoformat()}.json"
        )

    @pytest.mark.asyncio
    async def test_export_for_new_identity_is_empty(self, unit_env):
        """An identity with no records exports empty collections."""
        use_case = await unit_env.get(ExportDataUseCase)

        result = await use_case.execute(ExportDataRequest(identity_id=IdentityId(uuid4())))

        assert result.snapshot.decisions == []
        assert result.snapshot.journal_entries == []
        assert result.snapshot.life_phases == []
        assert result.snapshot.private_profile is None
