"""
Lazy, single-flight dictionary loading.

The word list is fetched at most once per loader. The first caller starts
the fetch as an asyncio task and every caller that arrives before it
finishes awaits that same task, so concurrent callers never trigger a
second fetch. A failed fetch is reported as an error result and forgotten,
so the next call retries.
"""

import asyncio
import json
import logging
from pathlib import Path
from typing import Any, Callable, List, Optional, Union

import requests

from .models import DictionaryResult


log = logging.getLogger(__name__)

DEFAULT_DICTIONARY = Path(__file__).parent / "data" / "dictionary.json"
FETCH_TIMEOUT = 30

Source = Union[str, Path]
Fetcher = Callable[[Source], Any]


def parse_word_list(payload: Any) -> List[str]:
    """
    Extract the word list from a dictionary payload of the form {"data": [...]}.

    Raises:
        KeyError: If the payload has no `data` field
        TypeError: If `data` is not a list of strings
    """
    words = payload["data"]
    if not isinstance(words, list) or not all(isinstance(w, str) for w in words):
        raise TypeError("dictionary 'data' must be a list of strings")
    return words


def fetch_word_list(source: Source) -> List[str]:
    """
    Fetch and parse a dictionary from a URL or a local JSON file.

    Args:
        source: http(s) URL or filesystem path

    Returns:
        The ordered list of words
    """
    source = str(source)
    if source.startswith(("http://", "https://")):
        response = requests.get(source, timeout=FETCH_TIMEOUT)
        response.raise_for_status()
        payload = response.json()
    else:
        with open(source, encoding="utf-8") as f:
            payload = json.load(f)
    return parse_word_list(payload)


class DictionaryLoader:
    """
    Loads a word list once and shares it with every caller.

    Attributes:
        source: Where the word list lives (URL or path)
        fetcher: Blocking callable turning `source` into a list of words
    """

    def __init__(self, source: Source = DEFAULT_DICTIONARY, fetcher: Fetcher = fetch_word_list):
        self.source = source
        self.fetcher = fetcher
        self._task: Optional[asyncio.Task] = None

    def loaded(self) -> bool:
        """Whether a load has been started or completed (success not implied)."""
        return self._task is not None

    async def load(self) -> DictionaryResult:
        """
        Return the dictionary, fetching it on first use.

        Returns:
            A success result carrying the words, or an error result
        """
        if self._task is None:
            self._task = asyncio.ensure_future(self._fetch())

        task = self._task
        try:
            result = await asyncio.shield(task)
        except BaseException:
            if task.done() and self._task is task:
                self._task = None
            raise

        if not result.ok and self._task is task:
            self._task = None

        return result

    async def _fetch(self) -> DictionaryResult:
        log.info("Loading dictionary from %s", self.source)
        try:
            words = await asyncio.to_thread(self.fetcher, self.source)
            result = DictionaryResult.success(list(words))
        except Exception as e:
            # Any fetcher failure, or a word list of the wrong shape, means unavailable
            log.warning("Dictionary load from %s failed: %s", self.source, e)
            return DictionaryResult.failure(e)

        log.info("Loaded %s words from %s", f"{len(result.data):,}", self.source)
        return result
