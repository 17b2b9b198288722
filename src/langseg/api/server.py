"""FastAPI server exposing word language detection and segmentation."""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI, HTTPException, Query
from pydantic import BaseModel, Field

from ..config import SegmenterConfig, build_segmenter, load_config
from ..language_segmenter import SegmentOptions

logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(name)s: %(message)s")
_LOGGER = logging.getLogger(__name__)


class SegmentRequest(BaseModel):
    """Request body for text segmentation."""

    text: str = Field(..., description="Text to segment")
    expected_languages: Optional[list[str]] = Field(None, description="Likely languages (detection hint)")
    threshold: Optional[float] = Field(None, ge=0.0, le=1.0, description="Minimum detection confidence")
    default_lang: Optional[str] = Field(None, min_length=1, description="Language for low-confidence tokens")


class SegmentInfo(BaseModel):
    """One language segment with the speaker it routes to."""

    text: str
    lang: str
    speaker: str


class SegmentResponse(BaseModel):
    segments: list[SegmentInfo]


class DetectionInfo(BaseModel):
    word: str
    lang: Optional[str]
    confidence: float


def _normalize_locale(lang: str) -> str:
    """Normalize locale code to canonical BCP 47 format (e.g., en-us -> en-US)."""
    parts = lang.lower().split("-")
    if len(parts) == 2:
        return f"{parts[0]}-{parts[1].upper()}"
    return parts[0]


def _resolve_speaker(lang: str, lang_speaker_map: dict[str, str]) -> str:
    """Map a language tag to a TTS speaker label, defaulting to the tag itself."""
    normalized = _normalize_locale(lang)
    return lang_speaker_map.get(normalized, lang_speaker_map.get(lang, normalized))


def create_app(config: SegmenterConfig | None = None) -> FastAPI:
    """Create the FastAPI app. Loads local/langseg.json if no config is given."""
    config = config or load_config()
    lang_speaker_map = {_normalize_locale(k): v for k, v in config.lang_speaker_map.items()}
    segmenter = build_segmenter(config)

    app = FastAPI(title="langseg", description="Word-level language segmentation for TTS")
    app.state.config = config
    app.state.segmenter = segmenter

    @app.get("/")
    async def health():
        """Health check and detector info."""
        detector = segmenter.detector
        return {
            "status": "ok",
            "detector_available": detector.is_available(),
            "cache_size": len(detector.cache),
        }

    @app.post("/segment", response_model=SegmentResponse)
    async def segment(request: SegmentRequest):
        """Split text into language segments, each routed to a speaker."""
        options = SegmentOptions(
            expected_languages=tuple(
                request.expected_languages
                if request.expected_languages is not None
                else config.expected_languages
            ),
            threshold=request.threshold if request.threshold is not None else config.threshold,
            default_lang=request.default_lang or config.default_lang,
        )
        segments = await segmenter.segment(request.text, options)

        infos = [
            SegmentInfo(text=seg.text, lang=seg.lang, speaker=_resolve_speaker(seg.lang, lang_speaker_map))
            for seg in segments
        ]
        _LOGGER.info("Segmented into: %s", [(info.lang, info.speaker) for info in infos])
        return SegmentResponse(segments=infos)

    @app.get("/detect", response_model=DetectionInfo)
    async def detect(
        word: str = Query(..., description="Single word to analyze"),
        expected: Optional[list[str]] = Query(None, description="Expected languages"),
    ):
        """Detect the language of a single word."""
        result = await segmenter.detector.detect(word, expected or config.expected_languages)
        if result is None:
            raise HTTPException(status_code=400, detail="Word must not be empty")
        return DetectionInfo(word=word, lang=result.lang, confidence=result.confidence)

    @app.delete("/cache")
    async def clear_cache():
        """Empty the detection cache."""
        segmenter.detector.clear_cache()
        return {"cleared": True}

    return app


def run():
    """Run the server with uvicorn."""
    import os

    import uvicorn

    host = os.environ.get("HOST", "0.0.0.0")
    port = int(os.environ.get("PORT", "8000"))
    _LOGGER.info("Starting server at http://%s:%d", host, port)
    uvicorn.run("langseg.api.server:create_app", host=host, port=port, reload=False, factory=True)
