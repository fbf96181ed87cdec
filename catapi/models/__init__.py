"""ORM Models — SQLAlchemy declarative models for the record store.

Invariants:
    - All models inherit from Base (db/base.py)
    - Models are imported here so Base.metadata is complete before create_all
"""

from catapi.models.cat import Cat  # noqa: F401
