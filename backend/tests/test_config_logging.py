import logging
import os
import subprocess
import sys
from pathlib import Path

import structlog

from ftracker.core.config import Settings
from ftracker.core.logging import get_logger, setup_logging


def test_cors_origins_from_comma_string():
    s = Settings(cors_origins="http://localhost:3000, http://127.0.0.1:3000")
    assert s.cors_origins == ["http://localhost:3000", "http://127.0.0.1:3000"]


def test_cors_origins_from_env(monkeypatch):
    monkeypatch.setenv("CORS_ORIGINS", "http://a.test,http://b.test")
    assert Settings().cors_origins == ["http://a.test", "http://b.test"]


def test_defaults():
    s = Settings()
    assert s.log_format in ("console", "json")
    assert s.log_level


def test_setup_logging_twice_keeps_one_handler():
    setup_logging()
    setup_logging()
    ours = [
        h for h in logging.getLogger().handlers
        if isinstance(h.formatter, structlog.stdlib.ProcessorFormatter)
    ]
    assert len(ours) == 1
    get_logger("ftracker.tests").info("Logging configured")


def test_library_use_is_quiet_before_setup():
    backend_dir = Path(__file__).resolve().parents[1]
    env = dict(os.environ, PYTHONPATH=str(backend_dir), PYTHONIOENCODING="utf-8")
    code = (
        "from ftracker.core.report import show_training_info\n"
        "print(show_training_info(1, 'X', 1.0, 70.0))\n"
    )
    result = subprocess.run(
        [sys.executable, "-c", code],
        capture_output=True,
        text=True,
        encoding="utf-8",
        env=env,
        cwd=backend_dir,
    )
    assert result.returncode == 0, result.stderr
    assert result.stderr == ""
    assert result.stdout == "неизвестный тип тренировки\n"
