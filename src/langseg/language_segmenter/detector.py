"""
Per-word language detection with caching and a heuristic fallback.

An optional external backend (e.g. CLD2) is tried first; whenever it is
missing, unavailable, returns nothing or fails, the deterministic heuristic
is used instead. Both paths return the same DetectionResult shape and both
results are cached.
"""

import logging
from typing import Optional, Protocol, Sequence

from .cache import DetectionCache
from .heuristic import heuristic_detect
from .results import DetectionCandidate, DetectionResult, clamp_confidence

_LOGGER = logging.getLogger(__name__)


class LanguageDetectorBackend(Protocol):
    """External language identification capability."""

    def is_available(self) -> bool:
        """Cheap check performed before every detection."""
        ...

    async def detect(
        self, word: str, expected_langs: Sequence[str] = ()
    ) -> Sequence[DetectionCandidate]:
        """Return candidates ranked best first (possibly empty)."""
        ...


def normalize_cache_key(word: str) -> str:
    """Cache key for a word: trimmed, then lowercased."""
    return word.strip().lower()


class WordLanguageDetector:
    """
    Detects the language of single words.

    Owns a DetectionCache so that repeated words never hit the backend or
    the heuristic twice.
    """

    def __init__(
        self,
        backend: Optional[LanguageDetectorBackend] = None,
        cache: Optional[DetectionCache] = None,
    ):
        """
        Initialize the detector.

        Args:
            backend: Optional external detector. If None, only the heuristic
                     is used.
            cache: Result cache. A fresh DetectionCache with the default
                   capacity is created if not given.
        """
        self.backend = backend
        self.cache = cache if cache is not None else DetectionCache()

    def is_available(self) -> bool:
        """Whether an external backend is configured and ready."""
        if self.backend is None:
            return False
        try:
            return bool(self.backend.is_available())
        except Exception as e:
            _LOGGER.warning("Language detector availability check failed: %s", e)
            return False

    def clear_cache(self) -> None:
        self.cache.clear()

    async def _detect_with_backend(
        self, word: str, expected_langs: Sequence[str]
    ) -> Optional[DetectionResult]:
        """Run the backend; None means "fall back to the heuristic"."""
        if not self.is_available():
            return None

        try:
            candidates = await self.backend.detect(word, expected_langs)
        except Exception as e:
            _LOGGER.warning("Language detection error for word %r: %s", word, e)
            return None

        if not candidates:
            _LOGGER.debug("Backend returned no candidates for %r", word)
            return None

        try:
            top = candidates[0]
            return DetectionResult(
                lang=top.detected_language,
                confidence=clamp_confidence(top.confidence),
            )
        except Exception as e:
            _LOGGER.warning("Unusable detection result for word %r: %s", word, e)
            return None

    async def detect(
        self, word: str, expected_langs: Sequence[str] = ()
    ) -> Optional[DetectionResult]:
        """
        Detect the language of a single word.

        Never raises because of the backend: any backend failure degrades to
        the heuristic guess.

        Args:
            word: Word to analyze.
            expected_langs: Likely languages, passed to the backend as a hint.

        Returns:
            DetectionResult, or None if the word is empty or whitespace.
        """
        text = word.strip()
        if not text:
            return None

        key = normalize_cache_key(text)
        cached = self.cache.get(key)
        if cached is not None:
            return cached

        result = await self._detect_with_backend(text, tuple(expected_langs))
        if result is None:
            result = heuristic_detect(text)

        self.cache.put(key, result)
        return result
