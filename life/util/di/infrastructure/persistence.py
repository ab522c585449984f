"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from life.config import DatabaseSettings, Settings
from life.domain.repository import (
    DecisionRepository,
    InviteCodeRepository,
    JournalEntryRepository,
    LifePhaseRepository,
    PrivateProfileRepository,
    ProfileRepository,
)
from life.persistence.database import (
    create_engine,
    create_session_factory,
    unit_of_work,
)
from life.persistence.repository import (
    PostgresDecisionRepository,
    PostgresInviteCodeRepository,
    PostgresJournalEntryRepository,
    PostgresLifePhaseRepository,
    PostgresPrivateProfileRepository,
    PostgresProfileRepository,
)
from life.util.di.base import ProviderBase
from life.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    async def get_engine(
        self, database: DatabaseSettings, settings: Settings
    ) -> AsyncIterator[AsyncEngine]:
        """Provide the process-wide engine, disposed when the container closes."""
        engine = create_engine(database, echo=settings.debug)
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Provide the request's session inside its unit of work."""
        async with unit_of_work(session_factory) as session:
            yield session

    @provide(scope=Scope.REQUEST)
    def get_profile_repository(self, session: AsyncSession) -> ProfileRepository:
        """Provide Profile repository."""
        return PostgresProfileRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_invite_code_repository(
        self, session: AsyncSession
    ) -> InviteCodeRepository:
        """Provide InviteCode repository."""
        return PostgresInviteCodeRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_decision_repository(self, session: AsyncSession) -> DecisionRepository:
        """Provide Decision repository."""
        return PostgresDecisionRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_journal_entry_repository(
        self, session: AsyncSession
    ) -> JournalEntryRepository:
        """Provide JournalEntry repository."""
        return PostgresJournalEntryRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_life_phase_repository(self, session: AsyncSession) -> LifePhaseRepository:
        """Provide LifePhase repository."""
        return PostgresLifePhaseRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_private_profile_repository(
        self, session: AsyncSession
    ) -> PrivateProfileRepository:
        """Provide PrivateProfile repository."""
        return PostgresPrivateProfileRepository(session)
