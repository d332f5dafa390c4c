"""
Base Model Classes

Declarative base plus the two mixins every docshelf table uses:

    class Page(Base, UUIDPrimaryKeyMixin, TimestampMixin):
        __tablename__ = "pages"
        ...

Ids are generated in Python (uuid4) so a new row's id is known before the
INSERT is flushed; timestamps come from the database clock.
"""

import uuid
from datetime import datetime

from sqlalchemy import DateTime, Uuid
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from sqlalchemy.sql.functions import now


class Base(DeclarativeBase):
    pass


class UUIDPrimaryKeyMixin:
    id: Mapped[uuid.UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)


class TimestampMixin:
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=now(), nullable=False
    )
    # onupdate fires on ORM UPDATEs only; bulk SQL leaves it unchanged
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=now(), onupdate=now(), nullable=False
    )
