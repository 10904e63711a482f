"""Value objects for parsed constraint annotations."""

from fieldcheck.models.constraint import ConstraintSpec
from fieldcheck.models.enums import ConstraintKind

__all__ = [
    "ConstraintKind",
    "ConstraintSpec",
]
