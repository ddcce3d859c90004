from collections.abc import Generator
from pathlib import Path

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy.engine import Engine
from sqlmodel import Field, Session, SQLModel, create_engine

from roominspector.core.registry import get_registry
from roominspector.main import create_app


class Note(SQLModel, table=True):
    __tablename__ = "notes"  # type: ignore[assignment]

    id: int | None = Field(default=None, primary_key=True)
    title: str
    body: str | None = None


class Tag(SQLModel, table=True):
    __tablename__ = "tags"  # type: ignore[assignment]

    name: str = Field(primary_key=True)


def seed_notes(engine: Engine) -> None:
    with Session(engine) as session:
        session.add(Note(id=1, title="first", body="hello"))
        session.add(Note(id=2, title="second", body=None))
        session.add(Note(id=3, title="third", body="bye"))
        session.add(Tag(name="work"))
        session.commit()


@pytest.fixture()
def engine(tmp_path: Path) -> Generator[Engine, None, None]:
    eng = create_engine(
        f"sqlite:///{tmp_path / 'app.db'}",
        connect_args={"check_same_thread": False},
    )
    SQLModel.metadata.create_all(eng)
    seed_notes(eng)
    yield eng
    eng.dispose()


@pytest.fixture(autouse=True)
def clean_registry() -> Generator[None, None, None]:
    yield
    get_registry().dispose()


@pytest.fixture()
def app(engine: Engine) -> FastAPI:
    return create_app({"notes": engine})


@pytest.fixture()
def client(app: FastAPI) -> Generator[TestClient, None, None]:
    with TestClient(app) as c:
        yield c
