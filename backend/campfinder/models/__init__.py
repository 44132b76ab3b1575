"""ORM Models: SQLAlchemy declarative models for all domain entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Importing this package registers every table on Base.metadata
"""

from campfinder.models.campsite import Campsite  # noqa: F401
from campfinder.models.user import User  # noqa: F401
