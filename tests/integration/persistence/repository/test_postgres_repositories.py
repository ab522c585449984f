"""Integration tests for the Postgres repositories.

Need Postgres at DATABASE__URL with migrations applied.
"""

import asyncio
import os
from datetime import date
from uuid import uuid4

import pytest

from life.domain.model import (
    Decision,
    Goal,
    LifePhase,
    PrivateProfile,
    Profile,
    Reflection,
)
from life.domain.repository import (
    DecisionRepository,
    InviteCodeRepository,
    LifePhaseRepository,
    PrivateProfileRepository,
    ProfileRepository,
)
from life.domain.value import (
    DecisionId,
    GoalId,
    IdentityId,
    InviteCodeValue,
    LifePhaseId,
    PrivateProfileId,
    ReflectionId,
    Username,
)
from tests.conftest import make_invite_code
from tests.di import build_test_container
from tests.harness import create_env_fixture

pytestmark = pytest.mark.skipif(
    "DATABASE__URL" not in os.environ, reason="Postgres not configured"
)

integration_env = create_env_fixture(unmock={"persistence"})


async def _new_profile(env) -> Profile:
    repo = await env.get(ProfileRepository)
    return await repo.save(Profile(id=IdentityId(uuid4()), email="it@example.com"))


def _phase(owner: Profile, name: str, start_date: date) -> LifePhase:
    return LifePhase(
        id=LifePhaseId(uuid4()), user_id=owner.id, name=name, start_date=start_date
    )


@pytest.mark.asyncio
async def test_invite_redeem_respects_capacity(integration_env):
    """The conditional UPDATE stops at max_uses."""
    repo = await integration_env.get(InviteCodeRepository)
    code = f"IT{uuid4().hex[:8].upper()}"
    await repo.save(make_invite_code(code, max_uses=1))

    first = await repo.redeem(InviteCodeValue(code))
    second = await repo.redeem(InviteCodeValue(code))
    stored = await repo.find_active_by_code(InviteCodeValue(code))

    assert first is True
    assert second is False
    assert stored.current_uses == 1


@pytest.mark.asyncio
async def test_concurrent_redeems_stop_at_capacity():
    """Parallel redemptions on separate connections never overshoot max_uses."""
    max_uses, extra = 3, 5
    code = InviteCodeValue(f"IT{uuid4().hex[:8].upper()}")
    container = build_test_container(unmock={"persistence"})

    async def redeem_in_own_unit_of_work() -> bool:
        async with container() as request_container:
            repo = await request_container.get(InviteCodeRepository)
            return await repo.redeem(code)

    try:
        async with container() as request_container:
            repo = await request_container.get(InviteCodeRepository)
            await repo.save(make_invite_code(code.root, max_uses=max_uses))

        results = await asyncio.gather(
            *(redeem_in_own_unit_of_work() for _ in range(max_uses + extra))
        )

        async with container() as request_container:
            repo = await request_container.get(InviteCodeRepository)
            stored = await repo.find_active_by_code(code)
    finally:
        await container.close()

    assert results.count(True) == max_uses
    assert stored.current_uses == max_uses


@pytest.mark.asyncio
async def test_username_lookup_ignores_case(integration_env):
    """Usernames are found regardless of case."""
    repo = await integration_env.get(ProfileRepository)
    profile = await _new_profile(integration_env)
    name = f"it_{uuid4().hex[:10]}"

    await repo.update_username(profile.id, Username(name.upper()))

    assert await repo.username_exists(name) is True


@pytest.mark.asyncio
async def test_decisions_are_scoped_to_owner(integration_env):
    """Another identity cannot read or delete a decision."""
    repo = await integration_env.get(DecisionRepository)
    owner = await _new_profile(integration_env)
    stranger = await _new_profile(integration_env)
    decision = await repo.save(
        Decision(
            id=DecisionId(uuid4()),
            user_id=owner.id,
            title="Change teams",
            confidence_level=3,
        )
    )
    await repo.add_reflection(
        Reflection(
            id=ReflectionId(uuid4()),
            decision_id=decision.id,
            user_id=owner.id,
            content="Good call",
        )
    )

    found = await repo.find_by_id(owner.id, decision.id)

    assert [r.content for r in found.reflections] == ["Good call"]
    assert await repo.find_by_id(stranger.id, decision.id) is None
    assert await repo.delete(stranger.id, decision.id) is False
    assert await repo.find_all(stranger.id) == []


@pytest.mark.asyncio
async def test_set_active_leaves_one_active_phase(integration_env):
    """Switching the active phase clears the previous one."""
    repo = await integration_env.get(LifePhaseRepository)
    owner = await _new_profile(integration_env)
    first = await repo.save(_phase(owner, "Berlin", date(2020, 1, 1)))
    second = await repo.save(_phase(owner, "Lisbon", date(2023, 1, 1)))
    await repo.save_goal(
        Goal(id=GoalId(uuid4()), phase_id=second.id, user_id=owner.id, title="Surf")
    )

    await repo.set_active(owner.id, first.id)
    await repo.set_active(owner.id, second.id)
    active = await repo.find_active(owner.id)
    phases = await repo.find_all(owner.id)

    assert active.id == second.id
    assert [g.title for g in active.goals] == ["Surf"]
    assert [p.id for p in phases if p.is_active] == [second.id]


@pytest.mark.asyncio
async def test_private_profile_upsert_and_cascade(integration_env):
    """The private profile is replaced in place and removed with its owner."""
    profiles = await integration_env.get(ProfileRepository)
    repo = await integration_env.get(PrivateProfileRepository)
    owner = await _new_profile(integration_env)

    await repo.upsert(
        PrivateProfile(id=PrivateProfileId(uuid4()), user_id=owner.id, joys=["tea"])
    )
    await repo.upsert(
        PrivateProfile(id=PrivateProfileId(uuid4()), user_id=owner.id, joys=["coffee"])
    )
    stored = await repo.find_by_user(owner.id)
    await profiles.delete(owner.id)

    assert stored.joys == ["coffee"]
    assert await repo.find_by_user(owner.id) is None
