"""SQLAlchemy models for walletwise database."""

from datetime import datetime
from sqlalchemy import (
    Column,
    Integer,
    String,
    DateTime,
    Numeric,
    Boolean,
    UniqueConstraint,
    create_engine,
)
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker, Session

Base = declarative_base()


class Wallet(Base):
    """Wallet model.

    Only the initial balance is stored; the current balance is derived.
    """

    __tablename__ = "wallets"

    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False)
    currency = Column(String(3), nullable=False, default="EUR")
    initial_balance = Column(Numeric(14, 2), nullable=False)
    created_at = Column(DateTime, default=datetime.now, nullable=False)


class Transaction(Base):
    """Transaction model."""

    __tablename__ = "transactions"

    id = Column(Integer, primary_key=True)
    amount = Column(Numeric(14, 2), nullable=False)
    category = Column(String, nullable=False)
    type = Column(String(7), nullable=False)
    description = Column(String, nullable=True)
    # NULL when the date supplied could not be parsed
    date = Column(DateTime, nullable=True)
    created_at = Column(DateTime, default=datetime.now, nullable=False)


class CustomCategory(Base):
    """User-defined category model."""

    __tablename__ = "categories"

    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False)
    type = Column(String(7), nullable=False)
    created_at = Column(DateTime, default=datetime.now, nullable=False)

    __table_args__ = (UniqueConstraint("type", "name", name="uq_category_type_name"),)


class SpendingLimit(Base):
    """Active spending limit with the threshold flags of its lifetime."""

    __tablename__ = "spending_limits"

    id = Column(Integer, primary_key=True)
    amount = Column(Numeric(14, 2), nullable=False)
    category_id = Column(String, nullable=False)
    category_name = Column(String, nullable=False)
    period = Column(String(7), nullable=False)
    start_date = Column(DateTime, nullable=False)
    set_at = Column(DateTime, nullable=False)
    notified_half = Column(Boolean, default=False, nullable=False)
    notified_80 = Column(Boolean, default=False, nullable=False)
    notified_exceeded = Column(Boolean, default=False, nullable=False)


def create_session_factory(database_url: str) -> tuple[Engine, sessionmaker[Session]]:
    """Create a SQLAlchemy engine and session factory."""
    engine = create_engine(database_url, echo=False)
    return engine, sessionmaker(bind=engine)
