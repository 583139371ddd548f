"""HTTP client for the public Dragon Ball character API."""

from __future__ import annotations

import logging
from typing import Optional

import requests

from .models import Character, NotFoundError

DEFAULT_BASE_URL = "https://dragonball-api.com/api/characters"

log = logging.getLogger(__name__)


class ExternalAPIError(RuntimeError):
    """The external API could not be reached or answered unusably."""


class DragonBallClient:
    """Looks characters up by name on the external API."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 10.0,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.base_url = base_url
        self.timeout = timeout
        self._session = session if session is not None else requests.Session()

    def fetch_by_name(self, name: str) -> Character:
        """Return the first character the API lists for ``name``.

        Raises NotFoundError when the API returns no match and
        ExternalAPIError on transport, status or decoding failures.
        """
        try:
            response = self._session.get(
                self.base_url, params={"name": name}, timeout=self.timeout
            )
        except requests.RequestException as err:
            raise ExternalAPIError(f"request: {err}") from err

        with response:
            log.debug("GET %s", response.url)
            if response.status_code != requests.codes.ok:
                raise ExternalAPIError(
                    f"API responded {response.status_code} {response.reason}"
                )
            log.debug("body: %s", response.text)
            try:
                payload = response.json()
            except ValueError as err:
                raise ExternalAPIError(f"unmarshal: {err}") from err

        if payload is None:
            payload = []
        if not isinstance(payload, list):
            raise ExternalAPIError("unmarshal: expected a JSON array")
        try:
            characters = [Character.from_json(item) for item in payload]
        except ValueError as err:
            raise ExternalAPIError(f"unmarshal: {err}") from err

        for ch in characters:
            log.info("%d - %s (%s)  Ki: %s", ch.id, ch.name, ch.race, ch.ki)
        if not characters:
            raise NotFoundError()
        return characters[0]