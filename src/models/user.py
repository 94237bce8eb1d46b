"""User data model."""
from dataclasses import dataclass
from typing import Optional


@dataclass
class User:
    """Person viewing the schedule page; anonymous when ``name`` is None."""

    name: Optional[str] = None
    is_admin: bool = False

    def __post_init__(self):
        if self.name is not None:
            self.name = self.name.strip() or None

        if self.is_admin and self.name is None:
            raise ValueError("Anonymous user cannot carry the admin claim")

    @property
    def is_authenticated(self) -> bool:
        return self.name is not None
