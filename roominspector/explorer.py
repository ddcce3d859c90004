"""
Entry point for host applications.

    from roominspector import explore

    explore(app, engine, "notes")

registers the app's database under a display name and mounts the inspector
routes under ``settings.API_PREFIX``.
"""

import logging
from os import PathLike

from fastapi import FastAPI
from sqlalchemy.engine import Engine

from roominspector.api.main import api_router
from roominspector.core.config import settings
from roominspector.core.registry import InspectedDatabase, get_registry

_log = logging.getLogger(__name__)

_MOUNTED_FLAG = "room_inspector_mounted"


def mount(app: FastAPI, *, prefix: str | None = None) -> None:
    """Include the inspector router in ``app`` (no-op if already included)."""
    if getattr(app.state, _MOUNTED_FLAG, False):
        return
    app.include_router(api_router, prefix=prefix or settings.API_PREFIX)
    setattr(app.state, _MOUNTED_FLAG, True)
    _log.info("Inspector mounted at %s", prefix or settings.API_PREFIX)


def explore(
    app: FastAPI,
    database: Engine | str | PathLike[str],
    name: str,
    *,
    prefix: str | None = None,
) -> InspectedDatabase:
    """
    Register ``database`` as ``name`` and make it browsable from ``app``.

    - database: the app's SQLAlchemy Engine, a ``sqlite:`` URL or a SQLite file path.
    - name: display name; also the ``{db}`` segment of the inspector URLs.
    """
    entry = get_registry().register(name, database)
    mount(app, prefix=prefix)
    return entry
