"""SQLAlchemy Declarative Base — shared base class for the claim table mappings.

Invariants:
    - All models inherit from Base
    - Metadata is used for test fixtures only; the engine never creates tables in production
"""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for the read-only claim source mappings."""
    pass
