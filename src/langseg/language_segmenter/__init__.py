"""Word-level language detection and segmentation for multilingual TTS."""

from .cache import DetectionCache
from .cld2_detector import Cld2Detector
from .detector import LanguageDetectorBackend, WordLanguageDetector
from .heuristic import heuristic_detect
from .results import DetectionCandidate, DetectionResult
from .segmenter import (
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
from .tokenizer import Token, tokenize

__all__ = [
    "Cld2Detector",
    "DetectionCache",
    "DetectionCandidate",
    "DetectionResult",
    "LanguageDetectorBackend",
    "LanguageSegmenter",
    "Segment",
    "SegmentOptions",
    "Token",
    "WordLanguageDetector",
    "clear_cache",
    "detect_word_language",
    "get_default_segmenter",
    "heuristic_detect",
    "is_language_detector_available",
    "segment_text_by_language",
    "set_default_segmenter",
    "tokenize",
]
