"""Turn a Selection into a validated JokeAPI request URL.

No network access happens here. Parameters are always emitted in the same
order and set members are sorted, so an unchanged Selection always builds
the same URL.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional
from urllib.parse import quote

from .options import (
    BASE_URL,
    CATEGORY_SEPARATOR,
    DEFAULT_AMOUNT,
    FLAG_SEPARATOR,
    JOKE_PATH,
    Category,
)
from .selection import IdRange, Selection, check_amount

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BuiltRequest:
    """A fully serialized joke request URL."""

    url: str

    def __str__(self) -> str:
        return self.url


def _category_segment(selection: Selection) -> str:
    # "Any" already covers every other category
    if not selection.categories or Category.ANY in selection.categories:
        return Category.ANY.value
    return CATEGORY_SEPARATOR.join(sorted(c.value for c in selection.categories))


def _format_id_range(id_range: IdRange) -> str:
    if id_range.upper is None:
        return str(id_range.lower)
    lower = 0 if id_range.lower is None else id_range.lower
    return f"{lower}-{id_range.upper}"


def _query_params(selection: Selection) -> List[str]:
    """Return the encoded ``key=value`` (or bare ``key``) query parts in order."""
    params: List[str] = []

    if selection.language is not None:
        params.append(f"lang={selection.language.value}")

    if selection.blacklist_flags and not selection.safe_mode:
        flags = FLAG_SEPARATOR.join(sorted(f.value for f in selection.blacklist_flags))
        params.append(f"blacklistFlags={flags}")

    if selection.joke_type is not None:
        params.append(f"type={selection.joke_type.value}")

    if selection.search_string:
        params.append(f"contains={quote(selection.search_string, safe='')}")

    if selection.id_range is not None:
        params.append(f"idRange={_format_id_range(selection.id_range)}")

    if selection.amount is not None and selection.amount != DEFAULT_AMOUNT:
        params.append(f"amount={selection.amount}")

    if selection.safe_mode:
        params.append("safe-mode")

    return params


def _validate(selection: Selection) -> None:
    """Re-check the scalar options, in case fields were assigned directly.

    Raises:
        ValidationError: On an out-of-range amount or a bad ID range.
    """
    if selection.amount is not None:
        check_amount(selection.amount)
    if selection.id_range is not None:
        selection.id_range.check()


def build_url(selection: Selection, base_url: Optional[str] = None) -> BuiltRequest:
    """Validate ``selection`` and serialize it into a request URL.

    Args:
        selection: The options to send. It is not modified.
        base_url: API root, defaults to the public JokeAPI.

    Returns:
        The built request.

    Raises:
        ValidationError: If the options violate an API rule.
    """
    snapshot = selection.copy()
    _validate(snapshot)

    root = base_url or BASE_URL
    if not root.endswith("/"):
        root += "/"

    url = f"{root}{JOKE_PATH}{_category_segment(snapshot)}"
    params = _query_params(snapshot)
    if params:
        url = f"{url}?{'&'.join(params)}"

    logger.debug("Built request URL %s", url)
    return BuiltRequest(url)
