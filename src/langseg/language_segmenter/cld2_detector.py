"""CLD2-backed external detector for WordLanguageDetector."""

import logging
from typing import Sequence

import pycld2 as cld2

from .results import DetectionCandidate

_LOGGER = logging.getLogger(__name__)

# CLD2 code for "unknown"
_UNKNOWN = "un"


class Cld2Detector:
    """
    Language detector backend using Compact Language Detector 2.

    CLD2 is synchronous and fast, so detection runs inline in the event loop.
    Errors raised by CLD2 are left to propagate: WordLanguageDetector logs
    them and falls back to the heuristic.
    """

    def __init__(self, best_effort: bool = True, require_reliable: bool = False):
        """
        Args:
            best_effort: Ask CLD2 for a result even on short/ambiguous text.
            require_reliable: Return no candidates when CLD2 flags its own
                              result as unreliable (typical for single words).
        """
        self.best_effort = best_effort
        self.require_reliable = require_reliable

    def is_available(self) -> bool:
        return True

    async def detect(
        self, word: str, expected_langs: Sequence[str] = ()
    ) -> list[DetectionCandidate]:
        clean_text = word.replace("\n", " ").strip()
        if not clean_text:
            return []

        hint_language = expected_langs[0] if expected_langs else None
        is_reliable, _, details = cld2.detect(
            clean_text,
            bestEffort=self.best_effort,
            hintLanguage=hint_language,
        )

        if self.require_reliable and not is_reliable:
            _LOGGER.debug("CLD2 unreliable for %r, discarding", clean_text)
            return []

        allowed = set(expected_langs) if expected_langs else None
        candidates: list[DetectionCandidate] = []
        for _name, code, percent, _score in details:
            if code == _UNKNOWN:
                continue
            # Normalize some CLD2 codes (zh-Hant -> zh, etc.)
            if code.startswith("zh"):
                code = "zh"
            if allowed is not None and code not in allowed:
                continue
            candidates.append(DetectionCandidate(detected_language=code, confidence=percent / 100.0))

        return candidates
