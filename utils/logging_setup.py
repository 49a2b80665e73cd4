from __future__ import annotations

import logging
import os
import sys
import uuid
from typing import Any, Optional, TextIO

from config.settings import get_settings


_INITIALIZED: bool = False

LOG_FORMAT = (
    "%(asctime)s %(levelname)s %(name)s %(message)s "
    "step=%(step)s status=%(status)s duration_ms=%(duration_ms)s "
    "source=%(source)s error=%(error)s run_id=%(run_id)s"
)


def current_run_id() -> str:
    """Run identifier shared by every log line of this process (RUN_ID env wins)."""
    run_id = os.getenv("RUN_ID")
    if not run_id:
        run_id = uuid.uuid4().hex
        os.environ["RUN_ID"] = run_id
    return run_id


class SafeExtraFormatter(logging.Formatter):
    """Formatter that tolerates missing extra fields by injecting defaults."""

    DEFAULTS: dict[str, Any] = {
        "step": "-",
        "status": "-",
        "duration_ms": "-",
        "source": "-",
        "error": "-",
        "run_id": "-",
    }

    def __init__(self, fmt: Optional[str] = None, run_id: Optional[str] = None) -> None:
        super().__init__(fmt=fmt or LOG_FORMAT)
        self.run_id = run_id

    def format(self, record: logging.LogRecord) -> str:  # type: ignore[override]
        for key, value in self.DEFAULTS.items():
            if not hasattr(record, key):
                if key == "run_id" and self.run_id:
                    value = self.run_id
                setattr(record, key, value)
        return super().format(record)


def init_logging(level: str | None = None, stream: Optional[TextIO] = None) -> None:
    """Configure the root logger once; later calls are no-ops."""
    global _INITIALIZED
    if _INITIALIZED:
        return

    settings = get_settings()
    log_level = getattr(logging, (level or settings.log_level).upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    if not root_logger.handlers:
        handler = logging.StreamHandler(stream or sys.stdout)
        handler.setLevel(log_level)
        handler.setFormatter(SafeExtraFormatter(run_id=current_run_id()))
        root_logger.addHandler(handler)

    _INITIALIZED = True
