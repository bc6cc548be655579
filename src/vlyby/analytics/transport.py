"""
Outbound transport for analytics telemetry.

Sends are fire-and-forget: no response is consumed, failures are logged
and never propagate back into the caller.
"""

import threading
from dataclasses import dataclass
from typing import Protocol

import requests

from ..config.adapter_config import AdapterConfig, get_adapter_config
from ..logging import transport_logger
from ..utils.constants import CONTENT_TYPE


class Transport(Protocol):
    """Delivers a JSON body to a remote endpoint."""

    def send(self, url: str, body: str) -> None:
        ...


class HttpTransport:
    """
    POSTs JSON bodies with ``requests``.

    By default each send runs on a daemon thread so the caller never waits
    on the network. Set ``blocking`` to send inline. Without an injected
    ``session`` every send uses its own connection, so concurrent sends
    share no state.
    """

    def __init__(
        self,
        timeout_s: float | None = None,
        blocking: bool | None = None,
        session: requests.Session | None = None,
        config: AdapterConfig | None = None,
    ):
        config = config or get_adapter_config()
        self.timeout_s = timeout_s if timeout_s is not None else config.send_timeout_s
        self.blocking = blocking if blocking is not None else config.blocking_send
        self.session = session
        self.logger = transport_logger()

    def send(self, url: str, body: str) -> None:
        """Send ``body`` to ``url`` without waiting for the outcome."""
        if self.blocking:
            self._post(url, body)
            return

        thread = threading.Thread(target=self._post, args=(url, body), daemon=True)
        thread.start()

    def _post(self, url: str, body: str) -> None:
        try:
            post = self.session.post if self.session is not None else requests.post
            response = post(
                url,
                data=body,
                headers={"Content-Type": CONTENT_TYPE},
                timeout=self.timeout_s,
            )
            self.logger.debug(
                "Payload sent",
                url=url,
                status_code=response.status_code,
                bytes=len(body),
            )
        except requests.RequestException as e:
            self.logger.warning("Payload send failed", url=url, error=str(e))


@dataclass
class SentPayload:
    """A body recorded by InMemoryTransport."""

    url: str
    body: str


class InMemoryTransport:
    """
    Records bodies instead of sending them.

    Useful for testing and for dry-run replays.
    """

    def __init__(self):
        self.sent: list[SentPayload] = []

    def send(self, url: str, body: str) -> None:
        self.sent.append(SentPayload(url=url, body=body))

    def clear(self) -> None:
        self.sent.clear()
