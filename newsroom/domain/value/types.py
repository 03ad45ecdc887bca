"""Domain value objects for Newsroom."""

from pydantic import field_validator

from newsroom.domain.value.common import RootValueObject


class DisplayName(RootValueObject[str]):
    """Human-readable name shown next to a user's comments."""

    @field_validator("root")
    @classmethod
    def validate_display_name(cls, v: str) -> str:
        """Validate name is not blank and within length limits."""
        v = v.strip()
        if len(v) < 1 or len(v) > 255:
            raise ValueError("Display name must be 1-255 characters")
        return v
