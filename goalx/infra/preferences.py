from __future__ import annotations

from typing import Protocol

from sqlalchemy.orm import Session, sessionmaker

from .db import SessionLocal
from .models import PreferenceModel

_TRUE = "true"
_FALSE = "false"


class Preferences(Protocol):
    """Flat string key-value storage, the desktop counterpart of user defaults."""

    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...


def get_bool(prefs: Preferences, key: str, default: bool = False) -> bool:
    raw = prefs.get(key)
    if raw is None:
        return default
    return raw == _TRUE


def set_bool(prefs: Preferences, key: str, value: bool) -> None:
    prefs.set(key, _TRUE if value else _FALSE)


class SqlPreferences:
    def __init__(self, session_factory: sessionmaker[Session] = SessionLocal) -> None:
        self._session_factory = session_factory

    def get(self, key: str) -> str | None:
        with self._session_factory() as session:
            row = session.get(PreferenceModel, key)
            return row.value if row else None

    def set(self, key: str, value: str) -> None:
        with self._session_factory() as session:
            row = session.get(PreferenceModel, key)
            if row is None:
                session.add(PreferenceModel(key=key, value=value))
            else:
                row.value = value
            session.commit()

