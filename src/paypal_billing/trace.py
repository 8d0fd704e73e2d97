"""Optional request/response recording for diagnostics.

A recorder is handed to PayPalClient at construction time; the client calls
``record`` once per completed exchange (token requests excluded).
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, TextIO

import httpx

_REDACTED_HEADERS = {"authorization"}


class ExchangeRecorder(Protocol):
    def record(self, request: httpx.Request, response: httpx.Response) -> None: ...


def format_exchange(request: httpx.Request, response: httpx.Response) -> str:
    """Render one exchange as a readable block, with credentials redacted."""
    lines = ["=========== Begin ============", "[request]"]
    lines.append(f"{request.method} {response.status_code} {request.url}")
    for key, value in request.headers.items():
        if key.lower() in _REDACTED_HEADERS:
            value = "<redacted>"
        lines.append(f"{key}: {value}")
    if request.content:
        lines.append(request.content.decode("utf-8", errors="replace"))
    lines.append("[response]")
    for key, value in response.headers.items():
        lines.append(f"{key}: {value}")
    lines.append(response.text)
    lines.append("===========  End  ============")
    return "\n".join(lines) + "\n"


class StreamRecorder:
    """Writes every exchange to an open text stream."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream

    def record(self, request: httpx.Request, response: httpx.Response) -> None:
        self._stream.write(format_exchange(request, response))
        self._stream.flush()


class FileRecorder:
    """Appends every exchange to a file, opened per write."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def record(self, request: httpx.Request, response: httpx.Response) -> None:
        with open(self.path, "a", encoding="utf-8") as f:
            f.write(format_exchange(request, response))
