"""Package logger.

Every process gets a short run id so log lines from one CLI invocation or one
API process can be grepped together.
"""
from __future__ import annotations

import logging
import sys
import uuid

from matchsight.config import settings

_RUN_ID = uuid.uuid4().hex[:8]


def get_run_id() -> str:
    return _RUN_ID


class _RunIdFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        record.run_id = _RUN_ID
        return True


def _build_logger() -> logging.Logger:
    log = logging.getLogger("matchsight")
    if not log.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(
            "%(asctime)s [%(levelname)s] [%(run_id)s] %(name)s: %(message)s"
        ))
        handler.addFilter(_RunIdFilter())
        log.addHandler(handler)
    log.setLevel(settings.LOG_LEVEL.upper())
    return log


logger = _build_logger()
