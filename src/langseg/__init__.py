"""langseg: split mixed-language text into per-language segments for TTS."""

from .language_segmenter import (
    DetectionResult,
    LanguageSegmenter,
    Segment,
    SegmentOptions,
    clear_cache,
    detect_word_language,
    get_default_segmenter,
    is_language_detector_available,
    segment_text_by_language,
    set_default_segmenter,
)

__version__ = "0.1.0"

__all__ = [
    "DetectionResult",
    "LanguageSegmenter",
    "Segment",
    "SegmentOptions",
    "clear_cache",
    "detect_word_language",
    "get_default_segmenter",
    "is_language_detector_available",
    "segment_text_by_language",
    "set_default_segmenter",
]
