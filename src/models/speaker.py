"""Speaker data model."""
from dataclasses import dataclass
from typing import Any, Dict


@dataclass
class Speaker:
    """Speaker presenting a session."""

    id: int
    name: str

    def __post_init__(self):
        """Validate speaker data after initialization."""
        if not self.name or not self.name.strip():
            raise ValueError("Speaker name cannot be empty")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Speaker":
        return cls(id=data["id"], name=data["name"])
