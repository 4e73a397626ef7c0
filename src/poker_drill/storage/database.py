"""SQLite file holding drill attempts, stamped with a schema version."""

import logging
import sqlite3
from pathlib import Path
from contextlib import contextmanager
from typing import Generator

from poker_drill.config import DB_PATH
from poker_drill.exceptions import SchemaVersionError

logger = logging.getLogger(__name__)

# Stored in PRAGMA user_version; bump with every change to schema.sql.
SCHEMA_VERSION = 1


class Database:
    """Drill attempt store.

    Opening a new file creates the attempts table. Opening a file written by
    a newer release raises SchemaVersionError instead of touching it.
    """

    def __init__(self, db_path: Path | str | None = None):
        self.db_path = str(db_path or DB_PATH)
        Path(self.db_path).parent.mkdir(parents=True, exist_ok=True)
        self._migrate()

    @property
    def schema_version(self) -> int:
        with self.connect() as conn:
            return conn.execute("PRAGMA user_version").fetchone()[0]

    def _migrate(self):
        with self.connect() as conn:
            version = conn.execute("PRAGMA user_version").fetchone()[0]
            if version > SCHEMA_VERSION:
                raise SchemaVersionError(
                    f"{self.db_path} uses schema v{version}; this release reads up to v{SCHEMA_VERSION}"
                )
            if version == SCHEMA_VERSION:
                return
            schema_path = Path(__file__).parent / "schema.sql"
            conn.executescript(schema_path.read_text())
            conn.execute(f"PRAGMA user_version = {SCHEMA_VERSION}")
            logger.info("Initialised %s at schema v%d", self.db_path, SCHEMA_VERSION)

    @contextmanager
    def connect(self) -> Generator[sqlite3.Connection, None, None]:
        """Open a connection that commits on success and rolls back on error."""
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = sqlite3.Row
        try:
            yield conn
            conn.commit()
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()
