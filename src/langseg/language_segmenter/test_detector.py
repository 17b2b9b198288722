import unittest

from .cache import DetectionCache
from .detector import WordLanguageDetector, normalize_cache_key
from .heuristic import heuristic_detect
from .results import DetectionCandidate, DetectionResult

_LOGGER_NAME = "langseg.language_segmenter.detector"


class StubBackend:
    """Backend test double that records calls."""

    def __init__(self, candidates=None, error=None, available=True):
        self.candidates = candidates if candidates is not None else []
        self.error = error
        self.available = available
        self.calls: list[tuple[str, tuple[str, ...]]] = []

    def is_available(self) -> bool:
        return self.available

    async def detect(self, word, expected_langs=()):
        self.calls.append((word, tuple(expected_langs)))
        if self.error is not None:
            raise self.error
        return self.candidates


class BrokenAvailabilityBackend(StubBackend):
    def is_available(self) -> bool:
        raise RuntimeError("probe failed")


class TestWordLanguageDetector(unittest.IsolatedAsyncioTestCase):
    """Test cache, backend and fallback paths."""

    async def test_empty_word_returns_none_and_is_not_cached(self):
        detector = WordLanguageDetector()
        for word in ("", "   ", "\n\t"):
            with self.subTest(word=word):
                self.assertIsNone(await detector.detect(word))
        self.assertEqual(len(detector.cache), 0)

    async def test_heuristic_only_without_backend(self):
        detector = WordLanguageDetector()
        self.assertFalse(detector.is_available())
        result = await detector.detect("Привет")
        self.assertEqual(result, DetectionResult(lang="ru", confidence=0.8))
        self.assertIn("привет", detector.cache)

    async def test_backend_top_candidate_is_used(self):
        backend = StubBackend([
            DetectionCandidate("de", 0.95),
            DetectionCandidate("nl", 0.04),
        ])
        detector = WordLanguageDetector(backend=backend)
        self.assertTrue(detector.is_available())
        result = await detector.detect("Hallo")
        self.assertEqual(result, DetectionResult(lang="de", confidence=0.95))

    async def test_repeated_word_hits_cache(self):
        backend = StubBackend([DetectionCandidate("en", 0.9)])
        detector = WordLanguageDetector(backend=backend)

        first = await detector.detect("Hello")
        second = await detector.detect("Hello")

        self.assertEqual(first, second)
        self.assertEqual(len(backend.calls), 1)

    async def test_cache_key_is_trimmed_and_lowercased(self):
        backend = StubBackend([DetectionCandidate("en", 0.9)])
        detector = WordLanguageDetector(backend=backend)

        await detector.detect(" Hello ")
        await detector.detect("hello")
        await detector.detect("HELLO")

        self.assertEqual(backend.calls, [("Hello", ())])
        self.assertEqual(detector.cache.keys(), ["hello"])
        self.assertEqual(normalize_cache_key("  MiXeD "), "mixed")

    async def test_backend_error_falls_back_to_heuristic(self):
        backend = StubBackend(error=RuntimeError("model crashed"))
        detector = WordLanguageDetector(backend=backend)

        with self.assertLogs(_LOGGER_NAME, level="WARNING") as logs:
            result = await detector.detect("Καλημέρα")

        self.assertEqual(result, heuristic_detect("Καλημέρα"))
        self.assertIn("model crashed", logs.output[0])
        self.assertEqual(detector.cache.get("καλημέρα"), result)

    async def test_no_candidates_falls_back_to_heuristic(self):
        backend = StubBackend([])
        detector = WordLanguageDetector(backend=backend)
        result = await detector.detect("שלום")
        self.assertEqual(result, DetectionResult(lang="he", confidence=0.9))
        self.assertEqual(len(backend.calls), 1)

    async def test_unavailable_backend_is_not_called(self):
        backend = StubBackend([DetectionCandidate("fr", 0.99)], available=False)
        detector = WordLanguageDetector(backend=backend)
        self.assertFalse(detector.is_available())

        result = await detector.detect("bonjour")

        self.assertEqual(result, DetectionResult(lang="en", confidence=0.6))
        self.assertEqual(backend.calls, [])

    async def test_availability_probe_error_counts_as_unavailable(self):
        backend = BrokenAvailabilityBackend([DetectionCandidate("fr", 0.99)])
        detector = WordLanguageDetector(backend=backend)

        with self.assertLogs(_LOGGER_NAME, level="WARNING"):
            result = await detector.detect("bonjour")

        self.assertEqual(result, heuristic_detect("bonjour"))
        self.assertEqual(backend.calls, [])

    async def test_backend_tags_pass_through_verbatim(self):
        backend = StubBackend([DetectionCandidate("x-Custom", 0.8)])
        detector = WordLanguageDetector(backend=backend)
        result = await detector.detect("word")
        self.assertEqual(result.lang, "x-Custom")

    async def test_backend_confidence_is_clamped(self):
        cases = [(1.7, 1.0), (-0.2, 0.0), (0.42, 0.42)]
        for raw, expected in cases:
            with self.subTest(raw=raw):
                backend = StubBackend([DetectionCandidate("en", raw)])
                detector = WordLanguageDetector(backend=backend)
                result = await detector.detect("word")
                self.assertAlmostEqual(result.confidence, expected)

    async def test_unusable_candidates_fall_back_to_heuristic(self):
        cases = [
            ([DetectionCandidate("fr", None)], "Missing confidence"),
            ([DetectionCandidate("fr", "high")], "Non-numeric confidence"),
            ([DetectionCandidate("fr", float("nan"))], "NaN confidence"),
            ([DetectionCandidate("fr", float("inf"))], "Infinite confidence"),
            ([{"detectedLanguage": "fr", "confidence": 0.9}], "Wrong candidate shape"),
            ({"fr": 0.9}, "Mapping instead of a sequence"),
        ]
        for candidates, desc in cases:
            with self.subTest(desc=desc):
                detector = WordLanguageDetector(backend=StubBackend(candidates))

                with self.assertLogs(_LOGGER_NAME, level="WARNING"):
                    result = await detector.detect("Привет")

                self.assertEqual(result, DetectionResult(lang="ru", confidence=0.8))
                self.assertEqual(detector.cache.get("привет"), result)

    async def test_expected_langs_forwarded_to_backend(self):
        backend = StubBackend([DetectionCandidate("de", 0.9)])
        detector = WordLanguageDetector(backend=backend)
        await detector.detect("Haus", ["de", "en"])
        self.assertEqual(backend.calls, [("Haus", ("de", "en"))])

    async def test_clear_cache_forces_redetection(self):
        backend = StubBackend([DetectionCandidate("en", 0.9)])
        detector = WordLanguageDetector(backend=backend)

        await detector.detect("Hello")
        detector.clear_cache()
        self.assertEqual(len(detector.cache), 0)
        await detector.detect("Hello")

        self.assertEqual(len(backend.calls), 2)

    async def test_shared_cache_capacity(self):
        detector = WordLanguageDetector(cache=DetectionCache(capacity=2))
        for word in ("one", "two", "three"):
            await detector.detect(word)
        self.assertEqual(detector.cache.keys(), ["two", "three"])


if __name__ == "__main__":
    unittest.main(verbosity=2)
