"""Character lookup: local store first, external API on a miss."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from .client import ExternalAPIError
from .models import Character, CharacterRepository, NotFoundError


@runtime_checkable
class ExternalClient(Protocol):
    """Source of characters that are not yet stored locally."""

    def fetch_by_name(self, name: str) -> Character:
        """Return the named character or raise an error."""


class CharacterService:
    """Serves characters from the repository, filling it from the API."""

    def __init__(self, repository: CharacterRepository, client: ExternalClient) -> None:
        self._repository = repository
        self._client = client

    def find_or_create(self, name: str) -> Character:
        """Return the stored character, fetching and storing it if missing.

        Failures of the external client are raised as ExternalAPIError;
        repository failures other than NotFoundError propagate unchanged.
        """
        try:
            return self._repository.find_by_name(name)
        except NotFoundError:
            pass

        try:
            character = self._client.fetch_by_name(name)
        except Exception as err:
            raise ExternalAPIError(f"external api: {err}") from err

        self._repository.save(character)
        return character