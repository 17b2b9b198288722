"""Segmenter configuration loaded from local/langseg.json."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Literal, Optional

from pydantic import BaseModel, Field, ValidationError

from .language_segmenter import (
    Cld2Detector,
    DetectionCache,
    LanguageSegmenter,
    SegmentOptions,
    WordLanguageDetector,
)

_LOGGER = logging.getLogger(__name__)

CONFIG_PATH = Path("local/langseg.json")
CONFIG_ENV_VAR = "LANGSEG_CONFIG"


class SegmenterConfig(BaseModel):
    """Segmenter configuration."""

    threshold: float = Field(0.7, ge=0.0, le=1.0, description="Minimum detection confidence")
    default_lang: str = Field("en", min_length=1, description="Language for low-confidence tokens")
    expected_languages: list[str] = Field(default_factory=list)
    cache_capacity: int = Field(1000, ge=1)
    backend: Literal["none", "cld2"] = "none"
    cld2_require_reliable: bool = False
    lang_speaker_map: dict[str, str] = Field(default_factory=dict)

    def segment_options(self) -> SegmentOptions:
        return SegmentOptions(
            expected_languages=tuple(self.expected_languages),
            threshold=self.threshold,
            default_lang=self.default_lang,
        )


def _resolve_config_path(path: Optional[Path]) -> Path:
    if path is not None:
        return Path(path)
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path)
    return CONFIG_PATH


def load_config(path: Optional[Path] = None) -> SegmenterConfig:
    """Load configuration from JSON.

    Lookup order: ``path``, then $LANGSEG_CONFIG, then local/langseg.json.
    A missing file yields the defaults.

    Raises:
        ValueError: If the file is not valid JSON or has invalid values.
    """
    config_path = _resolve_config_path(path)
    if not config_path.exists():
        _LOGGER.debug("No config at %s, using defaults", config_path)
        return SegmenterConfig()

    try:
        with config_path.open("r", encoding="utf-8") as f:
            data = json.load(f)
        return SegmenterConfig(**data)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {config_path}: {e}") from e
    except (TypeError, ValidationError) as e:
        raise ValueError(f"Invalid config in {config_path}: {e}") from e


def build_segmenter(config: SegmenterConfig) -> LanguageSegmenter:
    """Create a LanguageSegmenter wired according to the config."""
    backend = None
    if config.backend == "cld2":
        backend = Cld2Detector(require_reliable=config.cld2_require_reliable)

    detector = WordLanguageDetector(
        backend=backend,
        cache=DetectionCache(capacity=config.cache_capacity),
    )
    _LOGGER.info(
        "Segmenter ready: backend=%s, cache_capacity=%d", config.backend, config.cache_capacity
    )
    return LanguageSegmenter(detector)
