"""Deterministic script-based language guess for a single word."""

from .results import DetectionResult
from .scripts import is_number, is_punctuation, is_url, script_proportions

# Checked in order; Latin comes last since it is shared by many languages.
SCRIPT_LANGUAGE_RULES: tuple[tuple[str, str, float], ...] = (
    ("greek", "el", 0.9),
    ("cyrillic", "ru", 0.8),
    ("arabic", "ar", 0.9),
    ("hebrew", "he", 0.9),
    ("cjk", "zh", 0.7),
    ("latin", "en", 0.6),
)

MAJORITY = 0.5

NEUTRAL = DetectionResult(lang=None, confidence=1.0)
URL_RESULT = DetectionResult(lang="en", confidence=0.6)
UNDETERMINED = DetectionResult(lang=None, confidence=0.3)


def heuristic_detect(word: str) -> DetectionResult:
    """
    Guess the language of a word from its shape and script.

    Numbers and punctuation are language-neutral, URLs are assumed English,
    everything else is decided by the majority script bucket.

    Args:
        word: Word to analyze. Surrounding whitespace is ignored.

    Returns:
        DetectionResult, with ``lang=None`` for neutral or undetermined words.
    """
    text = word.strip()

    if is_number(text):
        return NEUTRAL
    if is_url(text):
        return URL_RESULT
    if is_punctuation(text):
        return NEUTRAL

    proportions = script_proportions(text)
    for bucket, lang, confidence in SCRIPT_LANGUAGE_RULES:
        if proportions[bucket] > MAJORITY:
            return DetectionResult(lang=lang, confidence=confidence)

    return UNDETERMINED
