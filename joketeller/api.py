"""JokeAPI client.

``requests_transport`` performs the HTTP GET; ``Joker`` ties a Selection,
the URL builder, a transport and the response interpreter together.
Network calls go through an injectable transport so they are easy to
mock in tests.
"""
from __future__ import annotations

import logging
from typing import Callable, List, Optional, Tuple

import requests

from .builder import BuiltRequest, build_url
from .config import Settings, load_settings
from .errors import TransportError
from .responses import JokeResult, interpret_response
from .selection import Selection

logger = logging.getLogger(__name__)

USER_AGENT = "joketeller/0.1"

# (url, timeout) -> (status code, body bytes)
Transport = Callable[[str, float], Tuple[int, bytes]]


def requests_transport(url: str, timeout: float = 5.0) -> Tuple[int, bytes]:
    """Perform a GET request and return the status code and raw body.

    The status code is not interpreted here: the API sends its error
    envelope with 4xx statuses too.

    Raises:
        TransportError: If the request could not be completed.
    """
    headers = {"User-Agent": USER_AGENT, "Accept": "application/json"}
    try:
        resp = requests.get(url, headers=headers, timeout=timeout)
    except requests.RequestException as e:
        raise TransportError(f"Request failed for {url}: {e}") from e
    return resp.status_code, resp.content


class Joker:
    """Fetch jokes matching a Selection.

    Basic usage::

        joker = Joker()
        joker.selection.add_categories([Category.PROGRAMMING]).set_amount(2)
        for joke in joker.get_jokes():
            print(joke.text)
    """

    def __init__(
        self,
        selection: Optional[Selection] = None,
        transport: Optional[Transport] = None,
        settings: Optional[Settings] = None,
    ) -> None:
        self.selection = selection if selection is not None else Selection()
        self.transport = transport or requests_transport
        self.settings = settings or load_settings()

    def build_url(self) -> BuiltRequest:
        """Return the request URL for the current selection, without fetching it."""
        return build_url(self.selection, base_url=self.settings.base_url)

    def get_jokes(self) -> List[JokeResult]:
        """Build the request, perform it, and parse the response.

        Raises:
            ValidationError: Before any network access, on bad options.
            TransportError: The request could not be performed.
            ApiFailure: The API answered with an error envelope.
            ParseError: The response could not be understood.
        """
        request = self.build_url()
        logger.info("Requesting %s", request.url)
        status, body = self.transport(request.url, self.settings.timeout)
        logger.debug("HTTP %s, %d bytes", status, len(body or b""))
        return interpret_response(body)

    def get_joke(self) -> JokeResult:
        """Fetch jokes like ``get_jokes`` and return the first one."""
        return self.get_jokes()[0]
