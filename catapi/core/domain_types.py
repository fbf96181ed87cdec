"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - CatId is only ever constructed by validate_cat_id (range 1..150)
    - CatRecord is immutable; the service never mutates a record
    - Failure reasons are Enums, no raw string matching

Design Decisions:
    - NewType over a wrapper class: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from dataclasses import dataclass
from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

CatId = NewType("CatId", int)

MIN_CAT_ID: int = 1
MAX_CAT_ID: int = 150

# Store column is a 32-bit signed integer
INT32_MIN: int = -(2 ** 31)
INT32_MAX: int = 2 ** 31 - 1

LIST_LIMIT: int = 100


# ─── Records ─────────────────────────────────────────────────────

@dataclass(frozen=True)
class CatRecord:
    """One row of the store, as exposed over the API."""
    id: int
    name: str
    image_path: str


# ─── Failure Reasons ─────────────────────────────────────────────

class ValidationFailure(str, Enum):
    """Why a raw path segment was rejected."""
    NOT_INTEGER = "NOT_INTEGER"
    OUT_OF_RANGE = "OUT_OF_RANGE"


class PoolFailure(str, Enum):
    """Why a connection could not be leased."""
    EXHAUSTED = "EXHAUSTED"
    UNAVAILABLE = "UNAVAILABLE"
