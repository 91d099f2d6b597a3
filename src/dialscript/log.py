# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Logging helpers for dialscript hosts."""

from __future__ import annotations

import logging
import os

DEFAULT_LOG_LEVEL = os.getenv("DIALSCRIPT_LOG_LEVEL", "WARNING").upper()
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def setup_logging(level: str | None = None, *, force: bool = False) -> None:
    """
    Configure standard logging for a script host.

    `fail()` calls are traced at DEBUG on the `dialscript.script.api` logger, so pass
    `level="debug"` to see them.
    """
    effective_level = (level or DEFAULT_LOG_LEVEL).upper()
    logging.basicConfig(
        level=getattr(logging, effective_level, logging.WARNING),
        format=LOG_FORMAT,
        force=force,
    )


__all__ = ["LOG_FORMAT", "setup_logging"]
