"""Unit tests for logging setup and the pipeline logger."""

import logging

import pytest

from laura.config import Settings
from laura.infrastructure.logging.colored_logger import PipelineLogger, PipelineStage
from laura.infrastructure.logging.log_config import level_from_name, setup_logging


@pytest.fixture
def restore_levels():
    names = ["", "httpx", "httpcore", "RagChatService", "laura.infrastructure.mistral"]
    saved = {name: logging.getLogger(name or None).level for name in names}
    yield
    for name, level in saved.items():
        logging.getLogger(name or None).setLevel(level)


def test_category_levels_are_applied(restore_levels):
    settings = Settings(
        _env_file=None,
        log_level="WARNING",
        log_level_http="ERROR",
        log_level_pipeline="DEBUG",
        log_level_mistral="critical",
    )

    setup_logging(settings)

    assert logging.getLogger().level == logging.WARNING
    assert logging.getLogger("httpx").level == logging.ERROR
    assert logging.getLogger("httpcore").level == logging.ERROR
    assert logging.getLogger("RagChatService").level == logging.DEBUG
    assert logging.getLogger("laura.infrastructure.mistral").level == logging.CRITICAL


@pytest.mark.parametrize(
    "name, expected",
    [("debug", logging.DEBUG), (" Info ", logging.INFO), ("verbose", logging.INFO)],
)
def test_level_from_name(name, expected):
    assert level_from_name(name) == expected


def test_timed_step_logs_success(caplog):
    plog = PipelineLogger("test.pipeline.success")

    with caplog.at_level(logging.INFO, logger="test.pipeline.success"):
        with plog.timed_step(PipelineStage.EMBEDDING, "Embedding 2 chunk(s)", model="m"):
            pass

    messages = [r.getMessage() for r in caplog.records]
    assert len(messages) == 2
    assert "[EMBED]" in messages[0] and "model=m" in messages[0]
    assert "✓ Embedding 2 chunk(s)" in messages[1]


def test_timed_step_logs_and_reraises_failure(caplog):
    plog = PipelineLogger("test.pipeline.failure")

    with caplog.at_level(logging.INFO, logger="test.pipeline.failure"):
        with pytest.raises(RuntimeError):
            with plog.timed_step(PipelineStage.GENERATION, "Chat completion"):
                raise RuntimeError("upstream down")

    error = caplog.records[-1]
    assert error.levelno == logging.ERROR
    assert "Chat completion failed after" in error.getMessage()
    assert "RuntimeError: upstream down" in error.getMessage()
