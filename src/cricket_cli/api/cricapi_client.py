"""Async client for the CricketData (cricapi.com) API.

Endpoints used:
- /v1/currentMatches: matches currently listed by the API (live and recently finished)
- /v1/matches: all matches, including fixtures that have not started

Every request carries the API key and a zero offset; the offset is never advanced.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import httpx
from loguru import logger
from pydantic import ValidationError
from tenacity import retry, retry_if_exception_type, stop_after_attempt, wait_exponential_jitter

from ..config import APISettings
from ..errors import CricketAPIError
from ..schemas import ApiResponse, Match


CURRENT_MATCHES_PATH = "/v1/currentMatches"
ALL_MATCHES_PATH = "/v1/matches"
INVALID_API_KEY_REASON = "Invalid API Key"


def _mask(api_key: str) -> str:
    if len(api_key) <= 4:
        return "****"
    return f"{api_key[:4]}****"


class CricAPIClient:
    """Thin wrapper over httpx for the two match endpoints."""

    def __init__(
        self,
        base_url: str = "https://api.cricapi.com",
        timeout: float = 30.0,
        retry_attempts: int = 1,
        user_agent: str = "cricket-cli/0.1",
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.retry_attempts = max(retry_attempts, 1)
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout,
            headers={"User-Agent": user_agent},
            transport=transport,
        )

    @classmethod
    def from_settings(cls, settings: APISettings, transport: Optional[httpx.AsyncBaseTransport] = None) -> "CricAPIClient":
        return cls(
            base_url=settings.base_url,
            timeout=settings.timeout,
            retry_attempts=settings.retry_attempts,
            user_agent=settings.user_agent,
            transport=transport,
        )

    async def __aenter__(self) -> "CricAPIClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _get(self, path: str, api_key: str) -> ApiResponse:
        """GET ``path`` and parse the response envelope."""
        params = {"apikey": api_key, "offset": 0}

        @retry(
            reraise=True,
            stop=stop_after_attempt(self.retry_attempts),
            wait=wait_exponential_jitter(initial=0.5, max=8.0),
            retry=retry_if_exception_type(httpx.HTTPError),
        )
        async def _do() -> Dict[str, Any]:
            logger.debug(f"GET {path} apikey={_mask(api_key)}")
            resp = await self._client.get(path, params=params)
            resp.raise_for_status()
            return resp.json()

        try:
            payload = await _do()
        except httpx.HTTPError as e:
            raise CricketAPIError(f"Request to {path} failed: {e}") from e
        except ValueError as e:
            raise CricketAPIError(f"Malformed response from {path}: {e}") from e

        try:
            return ApiResponse.model_validate(payload)
        except ValidationError as e:
            raise CricketAPIError(f"Unexpected response shape from {path}: {e}") from e

    async def _fetch_matches(self, path: str, api_key: str) -> List[Match]:
        response = await self._get(path, api_key)
        if response.is_failure:
            raise CricketAPIError(response.reason or f"API reported failure for {path}")
        matches = response.data or []
        logger.info(f"Fetched {len(matches)} matches from {path}")
        return matches

    async def fetch_current(self, api_key: str) -> List[Match]:
        """Return the matches listed by the current-matches endpoint."""
        return await self._fetch_matches(CURRENT_MATCHES_PATH, api_key)

    async def fetch_upcoming(self, api_key: str) -> List[Match]:
        """Return the matches listed by the all-matches endpoint."""
        return await self._fetch_matches(ALL_MATCHES_PATH, api_key)

    async def check_api_key(self, api_key: str) -> bool:
        """Return False only when the API explicitly rejects the key.

        Other failure reasons (e.g. exhausted quota) count as valid.
        Transport errors raise CricketAPIError.
        """
        response = await self._get(CURRENT_MATCHES_PATH, api_key)
        if response.is_failure and response.reason == INVALID_API_KEY_REASON:
            return False
        if response.is_failure:
            logger.warning(f"API key accepted despite failure response: {response.reason}")
        return True
