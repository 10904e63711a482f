"""Configuration for the fieldcheck validation engine.

Configuration can be overridden via:
1. Environment variables (e.g., FIELDCHECK_STRICT=true, FIELDCHECK_LABEL_SEPARATOR="")
2. .env file in the current directory
3. Default values in code
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class FieldCheckConfig(BaseSettings):
    """Settings that control how record annotations are read and enforced.

    Can be overridden via environment variables with FIELDCHECK_ prefix:
    - FIELDCHECK_TAG_NAME
    - FIELDCHECK_LABEL_TAG
    - FIELDCHECK_SERIALIZED_TAG
    - FIELDCHECK_SKIP_SENTINEL
    - FIELDCHECK_STRICT
    - FIELDCHECK_LABEL_SEPARATOR

    Attributes:
        tag_name: Metadata key holding the constraint annotation
        label_tag: Metadata key holding the display label
        serialized_tag: Metadata key holding the serialized (wire) name
        skip_sentinel: Annotation value that disables validation for a field
        strict: Raise AnnotationError for malformed annotations instead of
            logging and treating the field as always valid
        label_separator: Text placed between the label and the failure message
    """

    model_config = SettingsConfigDict(
        env_prefix="FIELDCHECK_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    tag_name: str = Field(default="validate", description="Annotation metadata key")
    label_tag: str = Field(default="msg", description="Display label metadata key")
    serialized_tag: str = Field(default="json", description="Serialized name metadata key")
    skip_sentinel: str = Field(default="-", description="Annotation that disables a field")
    strict: bool = Field(
        default=False,
        description="Fail when building a schema with malformed annotations",
    )
    label_separator: str = Field(
        default="", description="Separator between field label and failure message"
    )

    @field_validator("tag_name", "label_tag", "serialized_tag", "skip_sentinel")
    @classmethod
    def must_not_be_empty(cls, v: str) -> str:
        if not v or not v.strip():
            msg = "Annotation keys and the skip sentinel cannot be empty"
            raise ValueError(msg)
        return v


DEFAULT_CONFIG = FieldCheckConfig()
