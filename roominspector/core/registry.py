"""
Registry of inspected databases.

``explore()`` registers the host application's database under a display name;
routes resolve that name back to an Engine. Thread-safe, with a module-level
singleton like the rest of the shared state.
"""

import logging
import threading
from dataclasses import dataclass
from os import PathLike

from sqlalchemy.engine import Engine

from roominspector.core.connect import create_database_engine

_log = logging.getLogger(__name__)


class DatabaseNotRegisteredError(KeyError):
    """Raised when a database name has not been registered."""


@dataclass(frozen=True)
class InspectedDatabase:
    name: str
    engine: Engine
    # True when the engine was created here (and so is ours to dispose)
    owned: bool = False

    @property
    def url(self) -> str:
        return self.engine.url.render_as_string(hide_password=True)

    @property
    def dialect(self) -> str:
        return self.engine.dialect.name


class DatabaseRegistry:
    """Name -> InspectedDatabase mapping."""

    def __init__(self) -> None:
        self._databases: dict[str, InspectedDatabase] = {}
        self._lock = threading.Lock()

    def register(
        self, name: str, database: Engine | str | PathLike[str]
    ) -> InspectedDatabase:
        """Register ``database`` under ``name``, replacing any previous entry."""
        if not name:
            raise ValueError("database name must not be empty")
        engine = create_database_engine(database)
        entry = InspectedDatabase(
            name=name, engine=engine, owned=not isinstance(database, Engine)
        )
        if entry.dialect != "sqlite":
            _log.warning(
                "Database %r uses dialect %s; generated statements target SQLite",
                name,
                entry.dialect,
            )
        with self._lock:
            previous = self._databases.get(name)
            self._databases[name] = entry
        if previous is not None and previous.engine is not engine:
            self._dispose_entry(previous)
        _log.info("Registered database %r (%s)", name, entry.url)
        return entry

    def get(self, name: str) -> InspectedDatabase:
        with self._lock:
            entry = self._databases.get(name)
        if entry is None:
            raise DatabaseNotRegisteredError(name)
        return entry

    def names(self) -> list[str]:
        with self._lock:
            return sorted(self._databases)

    def all(self) -> list[InspectedDatabase]:
        with self._lock:
            return [self._databases[n] for n in sorted(self._databases)]

    def unregister(self, name: str) -> None:
        with self._lock:
            entry = self._databases.pop(name, None)
        if entry is None:
            raise DatabaseNotRegisteredError(name)
        self._dispose_entry(entry)

    def dispose(self) -> None:
        """Forget all databases, disposing the engines created by the registry."""
        with self._lock:
            entries = list(self._databases.values())
            self._databases.clear()
        for e in entries:
            self._dispose_entry(e)

    @staticmethod
    def _dispose_entry(entry: InspectedDatabase) -> None:
        # Engines handed over by the host app stay open; they are not ours.
        if entry.owned:
            entry.engine.dispose()


_registry: DatabaseRegistry | None = None
_registry_lock = threading.Lock()


def get_registry() -> DatabaseRegistry:
    """Return the singleton DatabaseRegistry (thread-safe double-checked locking)."""
    global _registry
    if _registry is None:
        with _registry_lock:
            if _registry is None:
                _registry = DatabaseRegistry()
    return _registry
