from __future__ import annotations

from datetime import datetime

from sqlalchemy import Column, DateTime, String, Text

from .db import Base


def utcnow() -> datetime:
    return datetime.utcnow()


class PreferenceModel(Base):
    __tablename__ = "preferences"

    key = Column(String(200), primary_key=True)
    value = Column(Text, nullable=False, default="")
    updated_at = Column(DateTime, nullable=False, default=utcnow, onupdate=utcnow)
