"""
Language segmentation of mixed-language text.

Splits text into contiguous language-tagged segments so that a TTS engine
can switch voices at segment boundaries instead of per word.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional, Sequence

from .detector import WordLanguageDetector
from .results import DetectionResult
from .tokenizer import tokenize

_LOGGER = logging.getLogger(__name__)

DEFAULT_THRESHOLD = 0.7
DEFAULT_LANG = "en"


@dataclass
class Segment:
    """A run of text in a single language, including its inner spacing."""

    text: str
    lang: str


@dataclass(frozen=True)
class SegmentOptions:
    """
    Segmentation options.

    Attributes:
        expected_languages: Likely languages, used as a detection hint.
        threshold: Minimum confidence for a detected language to be used.
                   A confidence equal to the threshold passes.
        default_lang: Language assigned to neutral, undetermined and
                      low-confidence tokens.
    """

    expected_languages: tuple[str, ...] = field(default_factory=tuple)
    threshold: float = DEFAULT_THRESHOLD
    default_lang: str = DEFAULT_LANG


def effective_language(
    detection: Optional[DetectionResult], threshold: float, default_lang: str
) -> str:
    """Resolve a detection to a concrete language tag."""
    if detection is None or detection.lang is None or detection.confidence < threshold:
        return default_lang
    return detection.lang


class LanguageSegmenter:
    """Groups consecutive same-language tokens into segments."""

    def __init__(self, detector: Optional[WordLanguageDetector] = None):
        self.detector = detector if detector is not None else WordLanguageDetector()

    async def segment(
        self, text: str, options: Optional[SegmentOptions] = None
    ) -> list[Segment]:
        """
        Split text into language-tagged segments.

        Tokens are detected strictly in document order, one at a time.

        Args:
            text: Input text.
            options: Segmentation options; defaults are used if None.

        Returns:
            Segments whose texts concatenate to the tokenized input. Empty
            for empty or whitespace-only text.
        """
        options = options or SegmentOptions()
        if not text or not text.strip():
            return []

        segments: list[Segment] = []
        current_lang: Optional[str] = None
        current_parts: list[str] = []

        for token in tokenize(text):
            detection = await self.detector.detect(token.text, options.expected_languages)
            token_lang = effective_language(detection, options.threshold, options.default_lang)

            if token_lang != current_lang and current_parts:
                segments.append(Segment(text="".join(current_parts), lang=current_lang))
                current_parts = []

            current_lang = token_lang
            current_parts.append(token.text + token.trailing_space)

        if current_parts:
            segments.append(Segment(text="".join(current_parts), lang=current_lang))

        _LOGGER.debug("Segmented %d chars into %d segments", len(text), len(segments))
        return segments


# =============================================================================
# MODULE-LEVEL CONVENIENCE API
# =============================================================================

_default_segmenter: Optional[LanguageSegmenter] = None


def get_default_segmenter() -> LanguageSegmenter:
    """Return the process-wide segmenter, creating a heuristic-only one if needed."""
    global _default_segmenter
    if _default_segmenter is None:
        _default_segmenter = LanguageSegmenter()
    return _default_segmenter


def set_default_segmenter(segmenter: Optional[LanguageSegmenter]) -> None:
    """Install the segmenter used by the module-level functions (None resets it)."""
    global _default_segmenter
    _default_segmenter = segmenter


async def detect_word_language(
    word: str, expected_langs: Sequence[str] = ()
) -> Optional[DetectionResult]:
    """Detect the language of a single word with the default segmenter."""
    return await get_default_segmenter().detector.detect(word, expected_langs)


async def segment_text_by_language(
    text: str,
    options: Optional[SegmentOptions] = None,
    *,
    expected_languages: Sequence[str] = (),
    threshold: float = DEFAULT_THRESHOLD,
    default_lang: str = DEFAULT_LANG,
) -> list[Segment]:
    """
    Convenience function to segment text with the default segmenter.

    Args:
        text: Input text.
        options: Segmentation options. If given, the keyword arguments are ignored.
        expected_languages: Likely languages in the text.
        threshold: Minimum confidence threshold.
        default_lang: Language used when confidence is too low.

    Returns:
        List of Segment.
    """
    if options is None:
        options = SegmentOptions(
            expected_languages=tuple(expected_languages),
            threshold=threshold,
            default_lang=default_lang,
        )
    return await get_default_segmenter().segment(text, options)


def clear_cache() -> None:
    """Empty the default segmenter's detection cache."""
    get_default_segmenter().detector.clear_cache()


def is_language_detector_available() -> bool:
    """Whether the default segmenter has an external detector backend."""
    return get_default_segmenter().detector.is_available()


if __name__ == "__main__":
    import asyncio
    import sys

    # Simple CLI for testing
    if len(sys.argv) > 1:
        input_text = " ".join(sys.argv[1:])
    else:
        input_text = "Καλημέρα hello κόσμος"

    print(f"Input: {input_text}\n")
    print("Segments:")
    for seg in asyncio.run(segment_text_by_language(input_text)):
        print(f"  ({seg.lang}): {seg.text!r}")
