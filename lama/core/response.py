"""
In-memory stand-in for a server response object.

Server-style handler code mutates the headers, sets status_code and calls
end(payload). Callers await wait_ended() before serializing the response.
"""

import asyncio
import logging
from typing import Any, Dict, Optional, Union

from ..models.aws_v1 import HeaderValue

logger = logging.getLogger("lama.response")

Payload = Union[bytes, str]


class GatewayHttpResponse:
    """
    Synthetic response with a one-shot completion signal.

    Mutating the response after end() is a contract violation: it is logged
    but not prevented, and may or may not show up in a serialized response.
    """

    def __init__(self):
        self.headers: Dict[str, HeaderValue] = {}
        self.status_code: int = 200
        self.payload: Optional[Payload] = None
        self._ended = asyncio.Event()

    @property
    def ended(self) -> bool:
        return self._ended.is_set()

    def set_header(self, name: str, value: Any) -> None:
        """Set a header; writing the same name again turns the value into a list."""
        if self.ended:
            logger.warning("Header set after response ended", extra={"header": name})

        existing = self.headers.get(name)
        if existing is None:
            self.headers[name] = value
        elif isinstance(existing, list):
            existing.append(value)
        else:
            self.headers[name] = [existing, value]

    def get_header(self, name: str) -> Optional[HeaderValue]:
        return self.headers.get(name)

    def end(self, payload: Optional[Payload] = None) -> None:
        """Store the payload and wake every waiter. Repeated calls do not re-fire."""
        if self.ended:
            logger.warning("end() called on a response that already ended")
        self.payload = payload
        self._ended.set()

    async def wait_ended(self) -> None:
        """Suspend until end() has been called; returns at once if it already was."""
        await self._ended.wait()
