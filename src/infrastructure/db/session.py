from __future__ import annotations

from collections.abc import Callable

from sqlalchemy.exc import IntegrityError, OperationalError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from src.application.errors import ConflictError, DependencyError
from src.application.interfaces.unit_of_work import UnitOfWork

_REPOSITORY_ATTRS = (
    "users",
    "farms",
    "animals",
    "medications",
    "treatments",
    "tasks",
    "compliance_alerts",
    "compliance",
    "consultations",
    "problem_reports",
    "testing_reports",
)


def create_engine(database_url: str) -> AsyncEngine:
    return create_async_engine(database_url, echo=False, future=True)


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, expire_on_commit=False)


class SQLAlchemyUnitOfWork(UnitOfWork):
    def __init__(self, session_factory: Callable[[], AsyncSession]) -> None:
        self._session_factory = session_factory
        self.session: AsyncSession | None = None
        self._reset_repositories()

    def _reset_repositories(self) -> None:
        for attr in _REPOSITORY_ATTRS:
            setattr(self, attr, None)

    async def __aenter__(self) -> UnitOfWork:
        self.session = self._session_factory()
        from src.infrastructure.repos.animals_sqlalchemy import AnimalsSQLAlchemyRepository
        from src.infrastructure.repos.compliance_alerts_sqlalchemy import (
            ComplianceAlertsSQLAlchemyRepository,
        )
        from src.infrastructure.repos.compliance_read_model_sqlalchemy import (
            ComplianceReadModelSQLAlchemy,
        )
        from src.infrastructure.repos.consultation_requests_sqlalchemy import (
            ConsultationRequestsSQLAlchemyRepository,
        )
        from src.infrastructure.repos.farms_sqlalchemy import FarmsSQLAlchemyRepository
        from src.infrastructure.repos.medications_sqlalchemy import (
            MedicationsSQLAlchemyRepository,
        )
        from src.infrastructure.repos.problem_reports_sqlalchemy import (
            ProblemReportsSQLAlchemyRepository,
        )
        from src.infrastructure.repos.tasks_sqlalchemy import TasksSQLAlchemyRepository
        from src.infrastructure.repos.testing_reports_sqlalchemy import (
            TestingReportsSQLAlchemyRepository,
        )
        from src.infrastructure.repos.treatments_sqlalchemy import TreatmentsSQLAlchemyRepository
        from src.infrastructure.repos.users_sqlalchemy import UsersSQLAlchemyRepository

        self.users = UsersSQLAlchemyRepository(self.session)
        self.farms = FarmsSQLAlchemyRepository(self.session)
        self.animals = AnimalsSQLAlchemyRepository(self.session)
        self.medications = MedicationsSQLAlchemyRepository(self.session)
        self.treatments = TreatmentsSQLAlchemyRepository(self.session)
        self.tasks = TasksSQLAlchemyRepository(self.session)
        self.compliance_alerts = ComplianceAlertsSQLAlchemyRepository(self.session)
        self.compliance = ComplianceReadModelSQLAlchemy(self.session)
        self.consultations = ConsultationRequestsSQLAlchemyRepository(self.session)
        self.problem_reports = ProblemReportsSQLAlchemyRepository(self.session)
        self.testing_reports = TestingReportsSQLAlchemyRepository(self.session)
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if not self.session:
            return
        try:
            if exc:
                await self.session.rollback()
        finally:
            await self.session.close()
            self.session = None
            self._reset_repositories()

    async def commit(self) -> None:
        if not self.session:
            return
        try:
            await self.session.commit()
        except IntegrityError as exc:
            raise ConflictError("Commit rejected by a database constraint") from exc
        except OperationalError as exc:
            raise DependencyError("Database unavailable") from exc

    async def rollback(self) -> None:
        if not self.session:
            return
        await self.session.rollback()
