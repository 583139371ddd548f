"""Character repository backed by Redis hashes."""

from __future__ import annotations

from typing import Any

from .models import Character, NotFoundError


def key_for(name: str) -> str:
    """Return the Redis key that holds the named character."""
    return "character:" + name.lower()


def _text(value: Any) -> str:
    if isinstance(value, bytes):
        return value.decode("utf-8")
    return "" if value is None else str(value)


class RedisRepository:
    """Stores each character as a hash under ``character:<lowercase name>``."""

    def __init__(self, client: Any) -> None:
        self._client = client

    def save(self, character: Character) -> None:
        """Write every field of the character into its hash."""
        self._client.hset(
            key_for(character.name),
            mapping={
                "id": character.id,
                "name": character.name,
                "ki": character.ki,
                "maxKi": character.max_ki,
                "race": character.race,
                "gender": character.gender,
                "description": character.description,
                "image": character.image,
                "affiliation": character.affiliation,
            },
        )

    def find_by_name(self, name: str) -> Character:
        """Return the stored character; raise NotFoundError if absent."""
        raw = self._client.hgetall(key_for(name))
        if not raw:
            raise NotFoundError()
        fields = {_text(k): _text(v) for k, v in raw.items()}
        try:
            ident = int(fields.get("id", ""))
        except ValueError:
            ident = 0
        return Character(
            id=ident,
            name=fields.get("name", ""),
            ki=fields.get("ki", ""),
            max_ki=fields.get("maxKi", ""),
            race=fields.get("race", ""),
            gender=fields.get("gender", ""),
            description=fields.get("description", ""),
            image=fields.get("image", ""),
            affiliation=fields.get("affiliation", ""),
        )