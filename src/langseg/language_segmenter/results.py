"""Detection result types shared by the detectors and the segmenter."""

import math
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class DetectionResult:
    """
    Language of a single word.

    Attributes:
        lang: Language tag, or None for language-neutral (numbers,
              punctuation; confidence 1.0) and undetermined words.
        confidence: Confidence in [0, 1].
    """

    lang: Optional[str]
    confidence: float


@dataclass(frozen=True)
class DetectionCandidate:
    """One ranked guess returned by an external detector backend."""

    detected_language: str
    confidence: float


def clamp_confidence(value: float) -> float:
    """Clamp a backend-supplied confidence into [0, 1].

    Raises:
        ValueError: If the value is NaN or infinite.
        TypeError: If the value is not a number.
    """
    confidence = float(value)
    if not math.isfinite(confidence):
        raise ValueError(f"Confidence must be finite, got {value!r}")
    return max(0.0, min(1.0, confidence))
