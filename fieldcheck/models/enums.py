"""Enums for constraint annotations."""

from enum import Enum


class ConstraintKind(Enum):
    """Kind tag selected by the first token of an annotation.

    ANY is the Always-Valid kind that unrecognized kind tokens map to.
    """

    STRING = "string"
    NUMBER = "number"
    REGEX = "regex"
    EMAIL = "email"
    ANY = "any"

    @classmethod
    def from_token(cls, token: str) -> "ConstraintKind":
        """Map an annotation kind token to a kind, falling back to ANY."""
        try:
            return cls(token.strip())
        except ValueError:
            return cls.ANY
