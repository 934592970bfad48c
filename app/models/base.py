"""SQLAlchemy declarative Base shared by the users and products tables."""

from sqlalchemy.orm import DeclarativeBase

# Largest value an Integer column holds on PostgreSQL (INTEGER is 32-bit).
MAX_INTEGER_VALUE = 2**31 - 1


class Base(DeclarativeBase):
    """Declarative base for all ORM models."""

    pass
