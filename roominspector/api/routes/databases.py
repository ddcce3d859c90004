"""
Launch screen: databases registered through ``explore()``.
"""

from typing import Any

from fastapi import APIRouter

from roominspector.core.registry import get_registry
from roominspector.schemas import InspectedDatabasePublic

router = APIRouter(prefix="/databases", tags=["databases"])


@router.get("", response_model=list[InspectedDatabasePublic])
def list_databases() -> Any:
    return [
        InspectedDatabasePublic(name=d.name, url=d.url, dialect=d.dialect)
        for d in get_registry().all()
    ]
