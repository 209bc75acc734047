from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Optional

from .attendance.kv_attendance_repository import KVAttendanceRepository
from .attendance.service import AttendanceService
from .common.datetime_utils import now_local
from .departments.kv_department_repository import KVDepartmentRepository
from .departments.service import DepartmentService
from .personnel.kv_personnel_repository import KVPersonnelRepository
from .personnel.service import PersonnelService
from .reports.service import ReportService
from .storage.bootstrap import apply_schema
from .storage.connection import DatabaseConnection, DBConfig
from .storage.kv_store import InMemoryKeyValueStore, KeyValueStore
from .storage.mysql_kv_store import MySQLKeyValueStore


@dataclass(frozen=True)
class Container:
    store: KeyValueStore

    personnel_repo: KVPersonnelRepository
    departments_repo: KVDepartmentRepository
    attendance_repo: KVAttendanceRepository

    personnel_service: PersonnelService
    department_service: DepartmentService
    attendance_service: AttendanceService
    report_service: ReportService


def build_store(*, backend: str, db_config: Optional[dict] = None, auto_init_db: bool = False) -> KeyValueStore:
    backend = (backend or "memory").lower()
    if backend == "memory":
        return InMemoryKeyValueStore()
    if backend == "mysql":
        conn = DatabaseConnection(DBConfig.from_dict(db_config or {}))
        if auto_init_db:
            apply_schema(conn)
        return MySQLKeyValueStore(conn)
    raise ValueError(f"Unknown STORE_BACKEND: {backend!r}")


def build_container(*, store: KeyValueStore, clock: Callable[[], datetime] = now_local) -> Container:
    personnel_repo = KVPersonnelRepository(store)
    departments_repo = KVDepartmentRepository(store)
    attendance_repo = KVAttendanceRepository(store)

    return Container(
        store=store,
        personnel_repo=personnel_repo,
        departments_repo=departments_repo,
        attendance_repo=attendance_repo,
        personnel_service=PersonnelService(personnel_repo, clock=clock),
        department_service=DepartmentService(departments_repo),
        attendance_service=AttendanceService(attendance_repo, clock=clock),
        report_service=ReportService(attendance_repo, personnel_repo, clock=clock),
    )
