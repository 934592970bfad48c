"""Persistence access for users and products."""

from app.repositories.products import ProductRepository
from app.repositories.users import UserRepository

__all__ = ["ProductRepository", "UserRepository"]
