from datetime import datetime, timezone
from uuid import uuid4

from sqlalchemy import Column, DateTime, String, TypeDecorator
from sqlalchemy.orm import declarative_base

Base = declarative_base()


def generate_id() -> str:
    return uuid4().hex


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class UTCDateTime(TypeDecorator):
    """
    Timezone aware datetime that always comes back in UTC. SQLite drops the
    offset on storage, so naive values read from it are taken to be UTC.
    """

    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)


class IDPrimaryKey:
    # String ids so the stored value is already the canonical key form used
    # by the dataloaders.
    id = Column(String(32), primary_key=True, default=generate_id)


class Timestamps:
    created_at = Column(UTCDateTime, nullable=False, default=utcnow, index=True)
    updated_at = Column(UTCDateTime, nullable=False, default=utcnow, onupdate=utcnow)
