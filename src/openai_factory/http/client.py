# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Transport contract consumed by HttpTransporter."""

from typing import Protocol

from .models import HttpRequest, HttpResponse


class HttpClient(Protocol):
    """
    Sends one HttpRequest and returns an HttpResponse.

    Transport failures come back as ``HttpResponse(ok=False, status_code=None)``
    instead of being raised. ``close()`` releases pooled connections and must be
    safe to call more than once.
    """

    def request(self, request: HttpRequest) -> HttpResponse: ...

    def close(self) -> None: ...
