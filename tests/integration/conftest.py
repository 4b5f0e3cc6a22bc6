from collections.abc import Callable
from pathlib import Path

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from legal_analyzer.api.app import create_app
from legal_analyzer.config.settings import Settings
from legal_analyzer.processor.processor import build_processor
from legal_analyzer.translation.factory import TranslatorFactory
from legal_analyzer.translation.translator import Translator


@pytest.fixture()
def offline_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Settings:
    """Settings wired to the offline example providers."""
    monkeypatch.chdir(tmp_path)
    return Settings(
        ocr_provider="example",
        analysis_provider="example",
        translation_provider="example",
        cors_allowed_origins=["http://localhost:3000"],
        frontend_url="https://app.example.test",
    )


@pytest.fixture()
def make_app(offline_settings: Settings) -> Callable[..., FastAPI]:
    def _make(translator: Translator | None = None) -> FastAPI:
        translator = translator or TranslatorFactory.create(offline_settings)
        processor = build_processor(offline_settings, translator)
        return create_app(offline_settings, processor, translator)

    return _make


@pytest.fixture()
def client(make_app: Callable[..., FastAPI]) -> TestClient:
    return TestClient(make_app())
