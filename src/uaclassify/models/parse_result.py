"""Pydantic v2 model for a single User-Agent classification."""

from pydantic import BaseModel, ConfigDict, model_validator
from typing_extensions import Self

# Device value when no device pattern matched
DEFAULT_DEVICE = "Other"

RESULT_KEYS = (
    "browser_name",
    "browser_version",
    "browser_engine",
    "operating_system",
    "device",
)


class ParseResult(BaseModel):
    """Immutable classification record for one User-Agent string."""

    model_config = ConfigDict(frozen=True)

    raw_string: str = ""
    browser_name: str | None = None
    browser_version: str | None = None  # major.minor only, e.g. "41.0"
    browser_engine: str | None = None
    operating_system: str | None = None
    device: str = DEFAULT_DEVICE

    @model_validator(mode="after")
    def check_version_has_name(self) -> Self:
        """A version without a browser name is meaningless."""
        if self.browser_version is not None and self.browser_name is None:
            raise ValueError(
                f"browser_version '{self.browser_version}' set without "
                f"browser_name"
            )
        return self

    def to_dict(self) -> dict[str, str | None]:
        """Classification fields only (no raw string)."""
        return {key: getattr(self, key) for key in RESULT_KEYS}
