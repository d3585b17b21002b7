from pathlib import Path

import pytest

from training_generator.config.settings import Settings
from training_generator.generation.example_client_adapter import ExampleClientAdapter
from training_generator.session.session import TrainingSession, build_session


@pytest.fixture()
def test_settings(tmp_path: Path) -> Settings:
    return Settings(
        ai_provider="example",
        ai_model_name="example",
        history_path=str(tmp_path / "history.json"),
        pdf_engine="pymupdf",
    )


@pytest.fixture()
def session(test_settings: Settings) -> TrainingSession:
    return build_session(test_settings, ExampleClientAdapter())
