"""Parsed constraint annotations.

A ConstraintSpec is the structured form of an annotation string such as
"string,min=1,max=64". It is an immutable value object produced by the
annotation parser and consumed by the checker factory.
"""

from pydantic import BaseModel, ConfigDict, Field

from fieldcheck.models.enums import ConstraintKind


class ConstraintSpec(BaseModel):
    """Kind tag plus kind-specific parameters of one field annotation.

    Attributes:
        kind: Which checker to build
        minimum: Lower bound (characters for STRING, value for NUMBER)
        maximum: Upper bound, only enforced when set and >= minimum.
            None when the annotation supplied no bounds at all.
        pattern: Regular expression for REGEX, verbatim from the annotation
    """

    model_config = ConfigDict(frozen=True)

    kind: ConstraintKind = Field(default=ConstraintKind.ANY, description="Constraint kind")
    minimum: int | float = Field(default=0, description="Lower bound")
    maximum: int | float | None = Field(
        default=None, description="Upper bound (ignored when None or < minimum)"
    )
    pattern: str | None = Field(default=None, description="Pattern for regex constraints")

    @classmethod
    def always_valid(cls) -> "ConstraintSpec":
        """Spec that accepts every value."""
        return cls(kind=ConstraintKind.ANY)

    @property
    def has_upper_bound(self) -> bool:
        return self.maximum is not None and self.maximum >= self.minimum
