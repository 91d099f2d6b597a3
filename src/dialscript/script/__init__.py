# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Objects injected into post scripts and the result serializer."""

from .api import API, ObservationValue
from .headers import HeaderValue, HeaderView
from .response import ResponseView
from .result import get_result, getResult

__all__ = [
    "API",
    "HeaderValue",
    "HeaderView",
    "ObservationValue",
    "ResponseView",
    "getResult",
    "get_result",
]
