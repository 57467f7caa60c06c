from datetime import datetime, timezone
from uuid import uuid4

from sqlalchemy import DateTime
from sqlalchemy.dialects.mysql import DATETIME as MySQLDateTime
from sqlmodel import Field, SQLModel


def _utc_now():
    return datetime.now(timezone.utc)


_TIMESTAMP = DateTime(timezone=True).with_variant(MySQLDateTime(fsp=6), "mysql")


class IDModel(SQLModel):
    id: str = Field(default_factory=lambda: str(uuid4()), primary_key=True, index=True)


class TimestampModel(SQLModel):
    created_at: datetime = Field(
        default_factory=_utc_now,
        sa_type=_TIMESTAMP,
        sa_column_kwargs={"nullable": False},
    )
    updated_at: datetime = Field(
        default_factory=_utc_now,
        sa_type=_TIMESTAMP,
        sa_column_kwargs={"nullable": False, "onupdate": _utc_now},
    )


class ProfileRecordModel(IDModel, TimestampModel):
    """A row belonging to one section of a user's profile.

    ``position`` grows monotonically per user and section, so listing by it
    reproduces insertion order.
    """

    user_id: str = Field(index=True)
    position: int = Field(default=0, index=True)
