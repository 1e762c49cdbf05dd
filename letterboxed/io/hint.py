"""Lightweight HTTP client that turns a solution word into a hint."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import requests

from ..core.exceptions import HintLookupError
from ..utils.logger import get_logger

LOGGER = get_logger(__name__)


@dataclass
class WordHint:
    word: str
    meanings: List[str] = field(default_factory=list)
    synonyms: List[str] = field(default_factory=list)
    usage_example: Optional[str] = None


class HintClient:
    """Minimal client around the free dictionaryapi.dev REST API."""

    API_BASE = "https://api.dictionaryapi.dev/api/v2/entries/en"

    def __init__(
        self,
        api_base: Optional[str] = None,
        api_base_env: str = "LETTERBOXED_HINT_API",
        timeout_env: str = "LETTERBOXED_HINT_TIMEOUT",
        timeout_seconds: float = 10.0,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.api_base = (api_base or os.environ.get(api_base_env) or self.API_BASE).rstrip("/")
        self.timeout_seconds = _timeout_from_env(timeout_env, timeout_seconds)
        self._session = session if session is not None else requests.Session()

    def lookup(self, word: str) -> WordHint:
        """Fetch definitions for ``word`` and condense them into a hint."""
        url = f"{self.api_base}/{word}"
        try:
            response = self._session.get(url, timeout=self.timeout_seconds)
            response.raise_for_status()
        except requests.RequestException as exc:
            raise HintLookupError(f"Hint lookup for '{word}' failed: {exc}") from exc

        try:
            data = response.json()
        except ValueError as exc:
            raise HintLookupError(f"Hint service returned invalid JSON for '{word}'") from exc

        hint = self._extract_hint(word, data)
        if not hint.meanings:
            LOGGER.warning("Hint response for '%s' has no definitions: %s", word, data)
            raise HintLookupError(f"No definitions found for '{word}'")
        return hint

    @staticmethod
    def _extract_hint(word: str, payload: Any) -> WordHint:
        """Collect meanings, synonyms and the first usage example."""
        hint = WordHint(word=word)
        entries: List[Dict[str, Any]] = payload if isinstance(payload, list) else []
        for entry in entries:
            for meaning in entry.get("meanings") or []:
                part_of_speech = meaning.get("partOfSpeech")
                for definition in meaning.get("definitions") or []:
                    text = definition.get("definition")
                    if text:
                        hint.meanings.append(f"({part_of_speech}) {text}" if part_of_speech else text)
                    if hint.usage_example is None and definition.get("example"):
                        hint.usage_example = definition["example"]
                    _extend_unique(hint.synonyms, definition.get("synonyms") or [])
                _extend_unique(hint.synonyms, meaning.get("synonyms") or [])
        return hint


def _extend_unique(target: List[str], values: List[str]) -> None:
    for value in values:
        if value not in target:
            target.append(value)


def _timeout_from_env(name: str, default: float) -> float:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = float(raw)
    except ValueError:
        LOGGER.warning("Ignoring %s=%r (not a number); using %.1fs", name, raw, default)
        return default
    if value <= 0:
        LOGGER.warning("Ignoring %s=%r (must be positive); using %.1fs", name, raw, default)
        return default
    return value
