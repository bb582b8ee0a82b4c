"""
Creation and verification of the per-admin table set.

Provisioning may run at registration, at every login that finds missing
tables and on explicit repair, so every statement here is idempotent.
"""
import time
from contextlib import contextmanager
from typing import Dict, Iterable, Optional, Set

from sqlalchemy import inspect, text
from sqlalchemy.engine import Connection, Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.schema import CreateTable, DropTable

from config import PROVISION_LOCK_TIMEOUT, TENANT_TABLE_RETENTION
from database.tenant_tables import build_table, table_name, validate_tenant_id
from enums.entity_kind import EntityKind
from enums.retention_policy import RetentionPolicy
from utils.exceptions import ProvisioningError, SchemaMissingError
from utils.logger import get_logger

logger = get_logger("provisioner")

MYSQL_DIALECTS = ("mysql", "mariadb")
POSTGRES_POLL_INTERVAL = 0.1


class SchemaProvisioner:
    def __init__(
        self,
        engine: Engine,
        lock_timeout: int = PROVISION_LOCK_TIMEOUT,
        retention: str = TENANT_TABLE_RETENTION,
    ):
        self.engine = engine
        self.lock_timeout = lock_timeout
        self.retention = RetentionPolicy(retention)

    def provision_tenant(self, tenant_id: int, kinds: Optional[Iterable[EntityKind]] = None) -> None:
        """
        Create every table the admin needs, then verify the whole set.

        Args:
            tenant_id: The admin id
            kinds: Restrict the CREATE pass to these kinds. Verification
                always covers every kind.

        Raises:
            ProvisioningError: If any table is still missing afterwards
        """
        tenant_id = validate_tenant_id(tenant_id)
        targets = self._targets(kinds)
        failures: Dict[EntityKind, SQLAlchemyError] = {}

        with self.engine.connect() as conn:
            with self._tenant_lock(conn, tenant_id):
                for kind in targets:
                    logger.debug(
                        f"Creating table {table_name(tenant_id, kind)}",
                        extra={"tenant_id": tenant_id},
                    )
                    try:
                        conn.execute(CreateTable(build_table(tenant_id, kind), if_not_exists=True))
                        conn.commit()
                    except SQLAlchemyError as exc:
                        conn.rollback()
                        logger.error(
                            f"Failed to create {kind.value} table for admin {tenant_id}",
                            exc_info=True,
                            extra={"tenant_id": tenant_id},
                        )
                        failures[kind] = exc

        missing = self.missing_tables(tenant_id)
        if missing:
            cause = next((failures[kind] for kind in targets if kind in failures), None)
            raise ProvisioningError(tenant_id, missing) from cause

        logger.info(f"Tables created/verified for admin {tenant_id}", extra={"tenant_id": tenant_id})

    def table_exists(self, tenant_id: int, kind: EntityKind) -> bool:
        name = table_name(tenant_id, kind)
        with self.engine.connect() as conn:
            return inspect(conn).has_table(name)

    def table_status(self, tenant_id: int) -> Dict[EntityKind, bool]:
        """Existence of every table of the admin, read from the live catalog"""
        tenant_id = validate_tenant_id(tenant_id)
        with self.engine.connect() as conn:
            inspector = inspect(conn)
            return {
                kind: inspector.has_table(table_name(tenant_id, kind))
                for kind in EntityKind.ordered()
            }

    def missing_tables(self, tenant_id: int) -> Set[EntityKind]:
        return {kind for kind, exists in self.table_status(tenant_id).items() if not exists}

    def all_tables_present(self, tenant_id: int) -> bool:
        return not self.missing_tables(tenant_id)

    def require_tables(self, tenant_id: int) -> None:
        missing = self.missing_tables(tenant_id)
        if missing:
            raise SchemaMissingError(tenant_id, missing)

    def drop_tenant_tables(self, tenant_id: int) -> None:
        tenant_id = validate_tenant_id(tenant_id)
        with self.engine.begin() as conn:
            for kind in reversed(EntityKind.ordered()):
                conn.execute(DropTable(build_table(tenant_id, kind), if_exists=True))
        logger.info(f"Dropped tables for admin {tenant_id}", extra={"tenant_id": tenant_id})

    def release_tenant(self, tenant_id: int) -> bool:
        """Apply the retention policy to a deleted admin. Returns True if tables were dropped."""
        if self.retention == RetentionPolicy.DROP:
            self.drop_tenant_tables(tenant_id)
            return True
        logger.info(f"Retaining tables for deleted admin {tenant_id}", extra={"tenant_id": tenant_id})
        return False

    @staticmethod
    def _targets(kinds: Optional[Iterable[EntityKind]]) -> tuple:
        if kinds is None:
            return EntityKind.ordered()
        wanted = {EntityKind(kind) for kind in kinds}
        return tuple(kind for kind in EntityKind.ordered() if kind in wanted)

    @contextmanager
    def _tenant_lock(self, conn: Connection, tenant_id: int):
        """Session-level advisory lock serializing provisioning of one admin"""
        dialect = conn.dialect.name
        if self.lock_timeout <= 0 or dialect not in MYSQL_DIALECTS + ("postgresql",):
            yield
            return

        if dialect in MYSQL_DIALECTS:
            name = f"provision_{table_name(tenant_id, EntityKind.OCCUPANTS)}"
            acquired = conn.execute(
                text("SELECT GET_LOCK(:name, :timeout)"),
                {"name": name, "timeout": self.lock_timeout},
            ).scalar()
            release = text("SELECT RELEASE_LOCK(:name)")
            params = {"name": name}
        else:
            acquired = self._try_pg_lock(conn, tenant_id)
            release = text("SELECT pg_advisory_unlock(:key)")
            params = {"key": tenant_id}
        conn.commit()

        if acquired != 1 and acquired is not True:
            raise ProvisioningError(
                tenant_id, message=f"Timed out waiting for provisioning lock of admin {tenant_id}"
            )
        try:
            yield
        finally:
            conn.execute(release, params)
            conn.commit()

    def _try_pg_lock(self, conn: Connection, tenant_id: int) -> bool:
        deadline = time.monotonic() + self.lock_timeout
        while True:
            acquired = conn.execute(
                text("SELECT pg_try_advisory_lock(:key)"), {"key": tenant_id}
            ).scalar()
            if acquired or time.monotonic() >= deadline:
                return bool(acquired)
            time.sleep(POSTGRES_POLL_INTERVAL)
