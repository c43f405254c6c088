from __future__ import annotations

from typing import Protocol

from src.application.interfaces.repositories.animals import AnimalRepository
from src.application.interfaces.repositories.compliance_alerts import ComplianceAlertRepository
from src.application.interfaces.repositories.compliance_read_model import ComplianceReadModel
from src.application.interfaces.repositories.consultation_requests import (
    ConsultationRequestRepository,
)
from src.application.interfaces.repositories.farms import FarmRepository
from src.application.interfaces.repositories.medications import MedicationRepository
from src.application.interfaces.repositories.problem_reports import ProblemReportRepository
from src.application.interfaces.repositories.tasks import TaskRepository
from src.application.interfaces.repositories.testing_reports import TestingReportRepository
from src.application.interfaces.repositories.treatments import TreatmentRepository
from src.application.interfaces.repositories.users import UserRepository


class UnitOfWork(Protocol):
    users: UserRepository
    farms: FarmRepository
    animals: AnimalRepository
    medications: MedicationRepository
    treatments: TreatmentRepository
    tasks: TaskRepository
    compliance_alerts: ComplianceAlertRepository
    compliance: ComplianceReadModel
    consultations: ConsultationRequestRepository
    problem_reports: ProblemReportRepository
    testing_reports: TestingReportRepository

    async def __aenter__(self) -> UnitOfWork: ...

    async def __aexit__(self, exc_type, exc, tb) -> None: ...

    async def commit(self) -> None: ...

    async def rollback(self) -> None: ...
