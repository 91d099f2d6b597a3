# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Configuration helpers for dialscript."""

import os
from dataclasses import dataclass

DEFAULT_SCRIPT_FILENAME = "<post_script>"


def _int_env(name: str, default: int) -> int:
    try:
        value = os.getenv(name)
        return int(value) if value is not None else default
    except ValueError:
        return default


def _bool_env(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


@dataclass
class ScriptSettings:
    """Post-script host defaults."""

    max_body_bytes: int = 16 * 1024 * 1024
    first_failure_wins: bool = False
    script_filename: str = DEFAULT_SCRIPT_FILENAME

    @classmethod
    def from_env(cls) -> "ScriptSettings":
        """Create settings from environment variables (evaluated at call time)."""
        max_body_bytes = _int_env("DIALSCRIPT_MAX_BODY_BYTES", cls.max_body_bytes)
        if max_body_bytes <= 0:
            max_body_bytes = cls.max_body_bytes
        return cls(
            max_body_bytes=max_body_bytes,
            first_failure_wins=_bool_env("DIALSCRIPT_FIRST_FAILURE_WINS", cls.first_failure_wins),
            script_filename=os.getenv("DIALSCRIPT_SCRIPT_FILENAME") or cls.script_filename,
        )


def load_script_settings() -> ScriptSettings:
    """Load script settings from environment with sensible defaults."""
    return ScriptSettings.from_env()
