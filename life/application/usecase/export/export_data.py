"""Export data use case."""

import logfire
from pydantic import BaseModel

from life.domain.model import ExportSnapshot
from life.domain.service import (
    DecisionService,
    JournalService,
    LifePhaseService,
    PrivateProfileService,
)
from life.domain.value import IdentityId


class ExportDataRequest(BaseModel):
    """Export data request."""

    identity_id: IdentityId  # From authenticated user


class ExportDataResponse(BaseModel):
    """Export data response."""

    snapshot: ExportSnapshot
    filename: str


class ExportDataUseCase:
    """Use case for downloading everything the caller owns."""

    def __init__(
        self,
        decision_service: DecisionService,
        journal_service: JournalService,
        life_phase_service: LifePhaseService,
        private_profile_service: PrivateProfileService,
    ) -> None:
        """Initialize export data use case.

        Args:
            decision_service: Decision domain service
            journal_service: Journal domain service
            life_phase_service: Life phase domain service
            private_profile_service: Private profile domain service
        """
        self.decision_service = decision_service
        self.journal_service = journal_service
        self.life_phase_service = life_phase_service
        self.private_profile_service = private_profile_service

    async def execute(self, request: ExportDataRequest) -> ExportDataResponse:
        """Collect the caller's records into one snapshot.

        Args:
            request: Export request

        Returns:
            Snapshot and the download filename
        """
        user_id = request.identity_id
        with logfire.span("export_data.execute", user_id=str(user_id)):
            snapshot = ExportSnapshot(
                decisions=await self.decision_service.get_all(user_id),
                journal_entries=await self.journal_service.get_all(user_id),
                life_phases=await self.life_phase_service.get_all(user_id),
                private_profile=await self.private_profile_service.get(user_id),
            )
            logfire.info(
                "Data exported",
                user_id=str(user_id),
                decisions=len(snapshot.decisions),
                journal_entries=len(snapshot.journal_entries),
                life_phases=len(snapshot.life_phases),
            )
            return ExportDataResponse(
                snapshot=snapshot,
                filename=f"life-export-{snapshot.exported_at.date().isoformat()}.json",
            )
