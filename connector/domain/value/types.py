"""Domain value types."""

import hashlib
import re

from pydantic import field_validator

from .common import RootValueObject

_EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


class Email(RootValueObject[str]):
    """Email address, normalized to lowercase.

    Emails identify accounts at login, so two spellings differing only by
    case or surrounding whitespace are the same address.
    """

    @field_validator("root")
    @classmethod
    def validate_email(cls, v: str) -> str:
        normalized = v.strip().lower()
        if len(normalized) > 255:
            raise ValueError("Email must be at most 255 characters")
        if not _EMAIL_PATTERN.match(normalized):
            raise ValueError("Please include a valid email")
        return normalized

    def gravatar_url(self, size: int = 200) -> str:
        """Gravatar image URL for this address (PG rated, mystery-man fallback)."""
        digest = hashlib.md5(self.root.encode("utf-8")).hexdigest()
        return f"https://www.gravatar.com/avatar/{digest}?s={size}&r=pg&d=mm"


def split_skills(raw: str | list[str]) -> list[str]:
    """Split a comma separated skills string into trimmed, non-empty entries."""
    items = raw.split(",") if isinstance(raw, str) else raw
    return [skill.strip() for skill in items if skill.strip()]
