"""SQLAlchemy models mirroring the JSON task records."""
from __future__ import annotations

from sqlalchemy import BigInteger, Boolean, Column, Integer, String, Text

from .session import Base

# BIGINT covers every id the router accepts; SQLite only autoincrements INTEGER.
TaskId = BigInteger().with_variant(Integer(), "sqlite")


class TaskRecord(Base):
    __tablename__ = "tasks"
    # AUTOINCREMENT on SQLite so deleted ids are never handed out again
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(TaskId, primary_key=True, autoincrement=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    completed = Column(Boolean, default=False, nullable=False)
