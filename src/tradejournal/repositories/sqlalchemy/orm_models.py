"""SQLAlchemy ORM model definitions."""

from sqlalchemy import BigInteger, Column, Integer, String, Text

from tradejournal.domain.models.enums import SyncState
from tradejournal.repositories.sqlalchemy.database import Base


class TradeDayORM(Base):
    """
    SQLAlchemy model for a locally stored trade day.

    Timestamps are int64 epoch milliseconds. The date index is not unique:
    tombstones keep their date, so uniqueness among active days is
    enforced by the validator instead.
    """

    __tablename__ = "trade_days_local"

    id = Column(String(36), primary_key=True)
    date = Column(String(10), nullable=False, index=True)
    payload = Column(Text, nullable=False)  # JSON {"trades": [...]}
    updated_at = Column(BigInteger, nullable=False)
    deleted_at = Column(BigInteger, nullable=True)
    sync_state = Column(Integer, nullable=False, default=int(SyncState.DIRTY), index=True)
    last_synced_at = Column(BigInteger, nullable=True)


class KeyValueORM(Base):
    """SQLAlchemy model for durable scalar state."""

    __tablename__ = "kv_store"

    key = Column(String(64), primary_key=True)
    value = Column(Text, nullable=False)
