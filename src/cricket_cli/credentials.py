"""API key storage and first-run acquisition."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Callable, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from rich.console import Console

from .api import CricAPIClient


logger = logging.getLogger(__name__)

API_KEY_PROMPT = "Enter your API key (Get your api key from - https://cricketdata.org)"
INVALID_KEY_MESSAGE = "Invalid API Key. Please enter a valid API Key."


class Credentials(BaseModel):
    """Shape of the persisted credentials file."""

    model_config = ConfigDict(populate_by_name=True)

    api_key: str = Field(..., alias="apiKey", min_length=1)


class CredentialStore:
    """Reads and writes the API key file."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def load(self) -> Optional[str]:
        """Return the stored key, or None if the file is missing or unusable."""
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.debug(f"No credentials file at {self.path}")
            return None
        except OSError as e:
            logger.debug(f"Cannot read credentials file {self.path}: {e}")
            return None

        try:
            credentials = Credentials.model_validate(json.loads(raw))
        except (ValueError, ValidationError) as e:
            logger.debug(f"Ignoring unparseable credentials file {self.path}: {e}")
            return None

        key = credentials.api_key.strip()
        return key or None

    def save(self, api_key: str) -> None:
        """Overwrite the credentials file with ``api_key``."""
        payload = Credentials(api_key=api_key).model_dump(by_alias=True)
        self.path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        logger.info(f"Saved API key to {self.path}")


async def load_or_prompt(
    store: CredentialStore,
    client: CricAPIClient,
    ask: Callable[[str], str],
    console: Console,
) -> str:
    """Return a usable API key, prompting until the API accepts one.

    A stored key is trusted as-is; it is only validated when entered.
    """
    api_key = store.load()
    if api_key:
        logger.debug("Using stored API key")
        return api_key

    while True:
        api_key = ask(API_KEY_PROMPT).strip()
        if not api_key:
            console.print(f"[bold red]{INVALID_KEY_MESSAGE}[/bold red]")
            continue
        if await client.check_api_key(api_key):
            break
        console.print(f"[bold red]{INVALID_KEY_MESSAGE}[/bold red]")

    store.save(api_key)
    return api_key
