"""Mappers for converting between database rows and domain models.

Since the domain models are immutable Pydantic models, rows are mapped by
hand instead of through SQLAlchemy's ORM mapping.
"""

from typing import Any, Dict
from uuid import UUID

from life.domain.model import (
    Decision,
    Goal,
    InviteCode,
    JournalEntry,
    LifePhase,
    Preferences,
    PrivateProfile,
    Profile,
    Reflection,
)
from life.domain.value import (
    DecisionId,
    GoalId,
    GoalStatus,
    IdentityId,
    InviteCodeId,
    InviteCodeValue,
    JournalEntryId,
    LifePhaseId,
    Mood,
    PrivateProfileId,
    ReflectionId,
    Username,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def _optional_uuid(value: Any) -> UUID | None:
    return _uuid(value) if value is not None else None


def row_to_invite_code(row: Dict[str, Any]) -> InviteCode:
    """Convert database row to InviteCode domain model.

    Args:
        row: Database row as dict

    Returns:
        InviteCode domain model
    """
    return InviteCode(
        id=InviteCodeId(_uuid(row["id"])),
        code=InviteCodeValue(row["code"]),
        is_active=row["is_active"],
        expires_at=row.get("expires_at"),
        max_uses=row.get("max_uses"),
        current_uses=row["current_uses"],
        created_at=row["created_at"],
    )


def invite_code_to_dict(invite_code: InviteCode) -> Dict[str, Any]:
    """Convert InviteCode domain model to database dict."""
    return {
        "id": invite_code.id,
        "code": invite_code.code.root,
        "is_active": invite_code.is_active,
        "expires_at": invite_code.expires_at,
        "max_uses": invite_code.max_uses,
        "current_uses": invite_code.current_uses,
        "created_at": invite_code.created_at,
    }


def row_to_profile(row: Dict[str, Any]) -> Profile:
    """Convert database row to Profile domain model.

    Args:
        row: Database row as dict

    Returns:
        Profile domain model
    """
    return Profile(
        id=IdentityId(_uuid(row["id"])),
        email=row.get("email"),
        username=Username(row["username"]) if row.get("username") else None,
        is_anonymous=row["is_anonymous"],
        preferences=Preferences.model_validate(row.get("preferences") or {}),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def profile_to_dict(profile: Profile) -> Dict[str, Any]:
    """Convert Profile domain model to database dict."""
    return {
        "id": profile.id,
        "email": profile.email,
        "username": profile.username.root if profile.username else None,
        "is_anonymous": profile.is_anonymous,
        "preferences": profile.preferences.model_dump(mode="json"),
        "created_at": profile.created_at,
        "updated_at": profile.updated_at,
    }


def row_to_reflection(row: Dict[str, Any]) -> Reflection:
    """Convert database row to Reflection domain model."""
    return Reflection(
        id=ReflectionId(_uuid(row["id"])),
        decision_id=DecisionId(_uuid(row["decision_id"])),
        user_id=IdentityId(_uuid(row["user_id"])),
        content=row["content"],
        created_at=row["created_at"],
    )


def reflection_to_dict(reflection: Reflection) -> Dict[str, Any]:
    """Convert Reflection domain model to database dict."""
    return reflection.model_dump()


def row_to_decision(row: Dict[str, Any]) -> Decision:
    """Convert database row to Decision domain model.

    Reflections live in their own table and are attached by the repository.

    Args:
        row: Database row as dict

    Returns:
        Decision domain model
    """
    return Decision(
        id=DecisionId(_uuid(row["id"])),
        user_id=IdentityId(_uuid(row["user_id"])),
        title=row["title"],
        description=row.get("description") or "",
        confidence_level=row["confidence_level"],
        category=row.get("category"),
        tags=list(row.get("tags") or []),
        life_phase_id=_optional_uuid(row.get("life_phase_id")),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def decision_to_dict(decision: Decision) -> Dict[str, Any]:
    """Convert Decision domain model to database dict (reflections excluded)."""
    return decision.model_dump(exclude={"reflections"})


def row_to_journal_entry(row: Dict[str, Any]) -> JournalEntry:
    """Convert database row to JournalEntry domain model."""
    return JournalEntry(
        id=JournalEntryId(_uuid(row["id"])),
        user_id=IdentityId(_uuid(row["user_id"])),
        title=row.get("title"),
        content=row["content"],
        mood=Mood(row["mood"]) if row.get("mood") else None,
        life_phase_id=_optional_uuid(row.get("life_phase_id")),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def journal_entry_to_dict(entry: JournalEntry) -> Dict[str, Any]:
    """Convert JournalEntry domain model to database dict."""
    data = entry.model_dump()
    data["mood"] = entry.mood.value if entry.mood else None
    return data


def row_to_goal(row: Dict[str, Any]) -> Goal:
    """Convert database row to Goal domain model."""
    return Goal(
        id=GoalId(_uuid(row["id"])),
        phase_id=LifePhaseId(_uuid(row["phase_id"])),
        user_id=IdentityId(_uuid(row["user_id"])),
        title=row["title"],
        description=row.get("description"),
        status=GoalStatus(row["status"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def goal_to_dict(goal: Goal) -> Dict[str, Any]:
    """Convert Goal domain model to database dict."""
    data = goal.model_dump()
    data["status"] = goal.status.value
    return data


def row_to_life_phase(row: Dict[str, Any]) -> LifePhase:
    """Convert database row to LifePhase domain model.

    Goals are attached by the repository.

    Args:
        row: Database row as dict

    Returns:
        LifePhase domain model
    """
    return LifePhase(
        id=LifePhaseId(_uuid(row["id"])),
        user_id=IdentityId(_uuid(row["user_id"])),
        name=row["name"],
        description=row.get("description"),
        start_date=row["start_date"],
        end_date=row.get("end_date"),
        is_active=row["is_active"],
        values=list(row.get("values") or []),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def life_phase_to_dict(phase: LifePhase) -> Dict[str, Any]:
    """Convert LifePhase domain model to database dict.

    Goals and the active flag are written by dedicated repository methods.
    """
    return phase.model_dump(exclude={"goals", "is_active"})


def row_to_private_profile(row: Dict[str, Any]) -> PrivateProfile:
    """Convert database row to PrivateProfile domain model."""
    return PrivateProfile(
        id=PrivateProfileId(_uuid(row["id"])),
        user_id=IdentityId(_uuid(row["user_id"])),
        values=list(row.get("values") or []),
        joys=list(row.get("joys") or []),
        remembered_as=row.get("remembered_as") or "",
        share_code=row.get("share_code"),
        share_expiry=row.get("share_expiry"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def private_profile_to_dict(private_profile: PrivateProfile) -> Dict[str, Any]:
    """Convert PrivateProfile domain model to database dict."""
    return private_profile.model_dump()
