"""Email value object."""

import re
from dataclasses import dataclass

from warden.domain.auth.exceptions import InvalidEmailError

_EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


@dataclass(frozen=True)
class Email:
    """A normalized email address of the shape ``local@domain.tld``."""

    value: str

    def __post_init__(self) -> None:
        normalized = self.value.strip().lower()
        if not _EMAIL_PATTERN.match(normalized):
            raise InvalidEmailError(self.value)
        object.__setattr__(self, "value", normalized)

    @staticmethod
    def is_valid(value: str) -> bool:
        return bool(_EMAIL_PATTERN.match(value.strip()))

    def __str__(self) -> str:
        return self.value
