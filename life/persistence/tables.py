"""SQLAlchemy table definitions.

These table definitions are used with SQLAlchemy Core.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    Date,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    func,
)
from sqlalchemy.dialects.postgresql import ARRAY, JSONB, TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# PROFILES TABLE (one per credential store identity)
# ============================================================================
profiles_table = Table(
    "profiles",
    metadata,
    Column("id", UUID, primary_key=True),  # Equals the identity id
    Column("email", String(255), nullable=True),
    Column("username", String(30), nullable=True),
    Column("is_anonymous", Boolean, nullable=False, server_default="false"),
    Column("preferences", JSONB, nullable=False, server_default="{}"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# Usernames are unique ignoring case
Index(
    "uq_profiles_username_lower",
    func.lower(profiles_table.c.username),
    unique=True,
)

# ============================================================================
# INVITE CODES TABLE
# ============================================================================
invite_codes_table = Table(
    "invite_codes",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("code", String(255), nullable=False, unique=True),  # Canonical upper-case
    Column("is_active", Boolean, nullable=False, server_default="true"),
    Column("expires_at", TIMESTAMP(timezone=True), nullable=True),
    Column("max_uses", Integer, nullable=True),  # NULL = unlimited
    Column("current_uses", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("current_uses >= 0", name="ck_invite_codes_uses_non_negative"),
    CheckConstraint(
        "max_uses IS NULL OR current_uses <= max_uses",
        name="ck_invite_codes_within_capacity",
    ),
)

# ============================================================================
# LIFE PHASES TABLE
# ============================================================================
life_phases_table = Table(
    "life_phases",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "user_id", UUID, ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False
    ),
    Column("name", String(200), nullable=False),
    Column("description", Text, nullable=True),
    Column("start_date", Date, nullable=False),
    Column("end_date", Date, nullable=True),
    Column("is_active", Boolean, nullable=False, server_default="false"),
    Column("values", ARRAY(Text), nullable=False, server_default="{}"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_life_phases_user_start", life_phases_table.c.user_id, life_phases_table.c.start_date)
# At most one active phase per identity
Index(
    "uq_life_phases_one_active",
    life_phases_table.c.user_id,
    unique=True,
    postgresql_where=life_phases_table.c.is_active,
)

# ============================================================================
# GOALS TABLE
# ============================================================================
goals_table = Table(
    "goals",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "phase_id",
        UUID,
        ForeignKey("life_phases.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "user_id", UUID, ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False
    ),
    Column("title", String(300), nullable=False),
    Column("description", Text, nullable=True),
    Column("status", String(20), nullable=False, server_default="active"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint(
        "status IN ('active', 'completed', 'paused', 'abandoned')",
        name="ck_goals_status",
    ),
)

Index("idx_goals_phase_id", goals_table.c.phase_id)

# ============================================================================
# DECISIONS TABLE
# ============================================================================
decisions_table = Table(
    "decisions",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "user_id", UUID, ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False
    ),
    Column("title", String(300), nullable=False),
    Column("description", Text, nullable=False, server_default=""),
    Column("confidence_level", Integer, nullable=False),
    Column("category", String(100), nullable=True),
    Column("tags", ARRAY(Text), nullable=False, server_default="{}"),
    Column(
        "life_phase_id",
        UUID,
        ForeignKey("life_phases.id", ondelete="SET NULL"),
        nullable=True,
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint(
        "confidence_level BETWEEN 1 AND 5", name="ck_decisions_confidence_level"
    ),
)

Index("idx_decisions_user_created", decisions_table.c.user_id, decisions_table.c.created_at)

# ============================================================================
# REFLECTIONS TABLE
# ============================================================================
reflections_table = Table(
    "reflections",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "decision_id",
        UUID,
        ForeignKey("decisions.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "user_id", UUID, ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False
    ),
    Column("content", Text, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_reflections_decision_id", reflections_table.c.decision_id)

# ============================================================================
# JOURNAL ENTRIES TABLE
# ============================================================================
journal_entries_table = Table(
    "journal_entries",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "user_id", UUID, ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False
    ),
    Column("title", String(300), nullable=True),
    Column("content", Text, nullable=False),
    Column("mood", String(20), nullable=True),
    Column(
        "life_phase_id",
        UUID,
        ForeignKey("life_phases.id", ondelete="SET NULL"),
        nullable=True,
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint(
        "mood IS NULL OR mood IN "
        "('calm', 'content', 'uncertain', 'anxious', 'hopeful', 'grateful')",
        name="ck_journal_entries_mood",
    ),
)

Index(
    "idx_journal_entries_user_created",
    journal_entries_table.c.user_id,
    journal_entries_table.c.created_at,
)

# ============================================================================
# PRIVATE PROFILES TABLE
# ============================================================================
private_profiles_table = Table(
    "private_profiles",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "user_id",
        UUID,
        ForeignKey("profiles.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
    ),
    Column("values", ARRAY(Text), nullable=False, server_default="{}"),
    Column("joys", ARRAY(Text), nullable=False, server_default="{}"),
    Column("remembered_as", Text, nullable=False, server_default=""),
    Column("share_code", String(64), nullable=True, unique=True),
    Column("share_expiry", TIMESTAMP(timezone=True), nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)
