"""
Repository Layer

The only place that talks to the database. Reads are always filtered to
live rows; writes are always audit-stamped.
"""

from .audit import AuditStamper
from .base import IRepository
from .query import QuerySpec
from .sqlalchemy_repository import SQLAlchemyRepository

__all__ = ["AuditStamper", "IRepository", "QuerySpec", "SQLAlchemyRepository"]
