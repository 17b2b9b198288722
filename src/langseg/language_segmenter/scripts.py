"""
Script and token-shape classification for single words.

Script buckets are fixed Unicode block ranges rather than full Unicode
script properties: the heuristic detector only needs to know whether a word
is mostly written in one of a handful of alphabets.
"""

import regex

# =============================================================================
# SCRIPT BUCKETS
# =============================================================================

# Bucket name -> inclusive code point ranges. Order matters: the first
# matching bucket wins for a character.
SCRIPT_RANGES: dict[str, tuple[tuple[int, int], ...]] = {
    "greek": ((0x0370, 0x03FF),),
    "cyrillic": ((0x0400, 0x04FF),),
    "arabic": ((0x0600, 0x06FF),),
    "hebrew": ((0x0590, 0x05FF),),
    "cjk": (
        (0x4E00, 0x9FFF),  # Han
        (0x3040, 0x309F),  # Hiragana
        (0x30A0, 0x30FF),  # Katakana
    ),
    "latin": (
        (0x0041, 0x005A),
        (0x0061, 0x007A),
        (0x00C0, 0x024F),  # Latin-1 Supplement letters + Latin Extended-A/B
    ),
}

SCRIPT_BUCKETS: tuple[str, ...] = tuple(SCRIPT_RANGES)


def classify_char(char: str) -> str | None:
    """Return the script bucket of a single character, or None."""
    code = ord(char)
    for bucket, ranges in SCRIPT_RANGES.items():
        for low, high in ranges:
            if low <= code <= high:
                return bucket
    return None


def _utf16_length(text: str) -> int:
    # Characters outside the BMP occupy a surrogate pair
    return sum(2 if ord(char) > 0xFFFF else 1 for char in text)


def script_proportions(text: str) -> dict[str, float]:
    """
    Compute the fraction of ``text`` that falls in each script bucket.

    The denominator is the UTF-16 length of the text, so unclassified
    characters (digits, punctuation, emoji) dilute every bucket. Empty text
    yields all-zero proportions.

    Args:
        text: Text to analyze.

    Returns:
        Mapping of bucket name to proportion in [0, 1].
    """
    counts = dict.fromkeys(SCRIPT_BUCKETS, 0)
    length = _utf16_length(text)
    if length == 0:
        return {bucket: 0.0 for bucket in SCRIPT_BUCKETS}

    for char in text:
        bucket = classify_char(char)
        if bucket is not None:
            counts[bucket] += 1

    return {bucket: count / length for bucket, count in counts.items()}


# =============================================================================
# TOKEN SHAPES
# =============================================================================

URL_TLDS = ("com", "org", "net", "edu", "gov", "io", "app")

_NUMBER_RE = regex.compile(r"[\d\s.,\-+()]+")
_URL_RE = regex.compile(
    r"(?:https?://|www\.|\w+\.(?:" + "|".join(URL_TLDS) + r"))",
    regex.IGNORECASE,
)
_PUNCTUATION_RE = regex.compile(r"[^\w\s]+")


def is_number(text: str) -> bool:
    """Digits with optional separators, signs, spaces and parentheses."""
    return _NUMBER_RE.fullmatch(text) is not None


def is_url(text: str) -> bool:
    """Check for a URL-looking prefix (scheme, ``www.`` or ``name.tld``)."""
    return _URL_RE.match(text) is not None


def is_punctuation(text: str) -> bool:
    """Check that text has no letters, digits, underscores or whitespace."""
    return _PUNCTUATION_RE.fullmatch(text) is not None
