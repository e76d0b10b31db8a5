"""ORM models package for database tables.

This package provides the SQLAlchemy ORM model backing the document store:
- DocumentRecord: one JSON document of a named collection

All models inherit from the shared Base declarative class defined in data.db.
"""

from portfolio_cms.data.db import Base
from portfolio_cms.data.models.document import DocumentRecord

__all__ = ["Base", "DocumentRecord"]
