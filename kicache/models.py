"""Character entity and the persistence interface."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Optional, Protocol, runtime_checkable

# Attribute name -> key used when the character is serialised to JSON.
_WIRE_NAMES = {
    "id": "ID",
    "name": "Name",
    "ki": "Ki",
    "max_ki": "MaxKi",
    "race": "Race",
    "gender": "Gender",
    "description": "Description",
    "image": "Image",
    "affiliation": "Affiliation",
}
_LOOKUP = {wire.lower(): attr for attr, wire in _WIRE_NAMES.items()}


@dataclass
class Character:
    """A Dragon Ball character as stored and served."""

    id: int = 0
    name: str = ""
    ki: str = ""
    max_ki: str = ""
    race: str = ""
    gender: str = ""
    description: str = ""
    image: str = ""
    affiliation: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON representation served to HTTP clients."""
        return {wire: getattr(self, attr) for attr, wire in _WIRE_NAMES.items()}

    @classmethod
    def from_json(cls, data: Optional[Mapping[str, Any]]) -> "Character":
        """Build a character from decoded JSON; keys match case-insensitively.

        Unknown keys and null values are ignored. A value of the wrong type
        raises ValueError.
        """
        if data is None:
            return cls()
        if not isinstance(data, Mapping):
            raise ValueError(f"expected a JSON object, got {type(data).__name__}")
        values: dict[str, Any] = {}
        for key, value in data.items():
            attr = _LOOKUP.get(str(key).lower())
            if attr is None or value is None:
                continue
            expected = int if attr == "id" else str
            if isinstance(value, bool) or not isinstance(value, expected):
                raise ValueError(
                    f"field {key!r}: expected {expected.__name__}, "
                    f"got {type(value).__name__}"
                )
            values[attr] = value
        return cls(**values)


class NotFoundError(LookupError):
    """The requested character does not exist."""

    def __init__(self, message: str = "character not found") -> None:
        super().__init__(message)


@runtime_checkable
class CharacterRepository(Protocol):
    """Persistence port used by the character service."""

    def save(self, character: Character) -> None:
        """Store the character, replacing any previous record."""

    def find_by_name(self, name: str) -> Character:
        """Return the stored character or raise NotFoundError."""