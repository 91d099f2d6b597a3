# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Mutable scratch space a post script uses to report back to the host.

A script records named observations with `set_value` and marks the probe as failed
with `fail`. Not calling `fail` means the script's checks were satisfied.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Union

ObservationValue = Union[str, int, float, bool, None, List[Any], Dict[str, Any]]

logger = logging.getLogger(__name__)


class API:
    """Per-run result accumulator; create a fresh instance for every script execution."""

    def __init__(
        self,
        *,
        first_failure_wins: bool = False,
        log: Optional[logging.Logger] = None,
    ) -> None:
        self.values: Dict[str, ObservationValue] = {}
        self.is_failed = False
        self.error_message = ""
        self._first_failure_wins = first_failure_wins
        self._log = log or logger

    def set_value(self, key: str, value: ObservationValue) -> None:
        self.values[key] = value

    def get_value(self, key: str) -> ObservationValue:
        return self.values.get(key)

    def get_values(self) -> Dict[str, ObservationValue]:
        return self.values

    def fail(self, message: str = "") -> None:
        self._log.debug("post script failed: %s", message)
        if self.is_failed and self._first_failure_wins:
            return
        self.is_failed = True
        self.error_message = message

    setValue = set_value
    getValue = get_value
    getValues = get_values

    @property
    def failed(self) -> bool:
        return self.is_failed

    def to_dict(self) -> Dict[str, Any]:
        return {
            "values": self.values,
            "is_failed": self.is_failed,
            "error_message": self.error_message,
        }

    def __repr__(self) -> str:
        return f"API(values={self.values!r}, is_failed={self.is_failed!r}, error_message={self.error_message!r})"


__all__ = ["API", "ObservationValue"]
