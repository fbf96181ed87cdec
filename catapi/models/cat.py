"""Cat ORM — maps the read-only `cats` table.

Invariants:
    - id is an integer primary key (at most one row per id)
    - name and image_path are non-nullable text
    - This service never writes to the table
"""

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from catapi.db.base import Base


class Cat(Base):
    """One row of the cats table."""
    __tablename__ = "cats"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    image_path: Mapped[str] = mapped_column(Text, nullable=False)
