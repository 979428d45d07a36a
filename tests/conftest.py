"""Shared pytest fixtures for animate-library tests."""

from __future__ import annotations

import logging
import logging.handlers
from typing import Any, Callable, Iterator

import pytest

from animate_library.settings import AppSettings

DocumentFactory = Callable[..., dict[str, Any]]


def make_document(
    bitmaps: list[dict[str, Any]] | None = None,
    shapes: list[dict[str, Any]] | None = None,
    texts: list[dict[str, Any]] | None = None,
    timelines: list[dict[str, Any]] | None = None,
    stage_name: str = "MC",
    framerate: float = 24,
) -> dict[str, Any]:
    """Build a minimal export document."""
    return {
        "Bitmaps": bitmaps or [],
        "Shapes": shapes or [],
        "Texts": texts or [],
        "Timelines": timelines or [],
        "_meta": {"stageName": stage_name, "framerate": framerate},
    }


@pytest.fixture
def document_factory() -> DocumentFactory:
    """Factory for minimal export documents."""
    return make_document


@pytest.fixture
def sample_document() -> dict[str, Any]:
    """A small export with every category and timeline variant."""
    return make_document(
        bitmaps=[
            {"assetId": 1, "name": "hero", "src": "images/hero.png", "width": 64, "height": 32},
        ],
        shapes=[
            {"assetId": 2, "paths": [{"d": [0, 0, 10, 0, 10, 10], "color": "#ff0000"}]},
            {"assetId": 3},
        ],
        texts=[
            {"assetId": 4, "name": "title", "text": "Hello", "style": {"fontSize": 12}},
        ],
        timelines=[
            {"assetId": 5, "type": "movieclip", "totalFrames": 1, "name": "static_clip"},
            {"assetId": 6, "type": "graphic", "totalFrames": 10, "name": "blink"},
            {"assetId": 7, "type": "movieclip", "totalFrames": 30, "name": "walk",
             "labels": {"start": 0}},
            {"assetId": 8, "type": "stage", "totalFrames": 1, "name": "MC"},
        ],
    )


@pytest.fixture
def app_settings() -> Iterator[AppSettings]:
    """Settings on a dedicated profile, cleared after the test."""
    settings = AppSettings(profile="pytest")
    settings.clear()
    yield settings
    settings.clear()


@pytest.fixture(autouse=True)
def restore_root_logging() -> Iterator[None]:
    """Remove the console and file handlers installed by setup_logging()."""
    root_logger = logging.getLogger()
    level = root_logger.level
    yield
    for handler in list(root_logger.handlers):
        if type(handler) in (logging.StreamHandler, logging.handlers.RotatingFileHandler):
            root_logger.removeHandler(handler)
            handler.close()
    root_logger.setLevel(level)
