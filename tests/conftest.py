from __future__ import annotations

import os
from pathlib import Path

import pytest
from PySide6.QtWidgets import QApplication
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from goalx.infra import models  # noqa: F401
from goalx.infra.db import Base
from goalx.infra.preferences import SqlPreferences
from goalx.services.task_store import TaskStore

from fakes import FakePreferences


@pytest.fixture(scope="session")
def qapp() -> QApplication:
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
    return QApplication.instance() or QApplication([])


@pytest.fixture()
def sql_prefs(tmp_path: Path) -> SqlPreferences:
    engine = create_engine(f"sqlite:///{(tmp_path / 'prefs.sqlite3').as_posix()}")
    Base.metadata.create_all(engine)
    return SqlPreferences(sessionmaker(bind=engine, autoflush=False, autocommit=False))


@pytest.fixture(params=["memory", "sqlite"])
def prefs(request: pytest.FixtureRequest):
    if request.param == "memory":
        return FakePreferences()
    return request.getfixturevalue("sql_prefs")


@pytest.fixture()
def store(prefs) -> TaskStore:
    return TaskStore(prefs)
