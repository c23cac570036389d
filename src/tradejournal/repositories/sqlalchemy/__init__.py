"""SQLAlchemy repository implementations."""

from tradejournal.repositories.sqlalchemy.database import Database, Base
from tradejournal.repositories.sqlalchemy.trade_day_repo import SqlAlchemyTradeDayRepository
from tradejournal.repositories.sqlalchemy.key_value_repo import SqlAlchemyKeyValueRepository

__all__ = [
    "Database",
    "Base",
    "SqlAlchemyTradeDayRepository",
    "SqlAlchemyKeyValueRepository",
]
