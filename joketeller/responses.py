"""Interpret JokeAPI response bodies.

The API signals failure through the boolean ``error`` field of its JSON
envelope, so that field decides the outcome, not the HTTP status.
"""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, FrozenSet, List, Optional, Type, TypeVar, Union

from .errors import ApiFailure, ParseError, ValidationError
from .options import BlacklistFlag, Category, JokeType, Language, parse_option

logger = logging.getLogger(__name__)

E = TypeVar("E", Category, JokeType, Language)


@dataclass(frozen=True)
class JokeResult:
    id: int
    category: Category
    type: JokeType
    joke: Optional[str] = None
    setup: Optional[str] = None
    delivery: Optional[str] = None
    flags: FrozenSet[BlacklistFlag] = frozenset()
    safe: bool = False
    lang: Language = Language.ENGLISH

    @property
    def text(self) -> str:
        if self.type is JokeType.TWOPART:
            return f"{self.setup}\n{self.delivery}"
        return self.joke or ""


def _decode(body: Union[bytes, str, Dict[str, Any]]) -> Dict[str, Any]:
    if isinstance(body, dict):
        return body
    try:
        data = json.loads(body)
    except (TypeError, ValueError) as e:
        raise ParseError(f"Response is not valid JSON: {e}") from e
    if not isinstance(data, dict):
        raise ParseError(f"Expected a JSON object, got {type(data).__name__}")
    return data


def _require_str(payload: Dict[str, Any], key: str) -> str:
    value = payload.get(key)
    if not isinstance(value, str):
        raise ParseError(f"Joke payload is missing string field {key!r}")
    return value


def _enum_field(payload: Dict[str, Any], key: str, enum_cls: Type[E]) -> E:
    value = payload.get(key)
    if not isinstance(value, str):
        raise ParseError(f"Joke payload is missing field {key!r}")
    try:
        return parse_option(enum_cls, value)
    except ValidationError as e:
        raise ParseError(str(e)) from e


def _flags(raw: Any) -> FrozenSet[BlacklistFlag]:
    if raw is None:
        return frozenset()
    if not isinstance(raw, dict):
        raise ParseError("Joke payload field 'flags' must be an object")
    known = {f.value: f for f in BlacklistFlag}
    active = set()
    for name, on in raw.items():
        if name not in known:
            logger.debug("Ignoring unknown flag %r in response", name)
            continue
        if on:
            active.add(known[name])
    return frozenset(active)


def parse_joke(payload: Dict[str, Any]) -> JokeResult:
    """Parse a single joke object from a successful response.

    Raises:
        ParseError: If a required field is missing or has an unknown value.
    """
    if not isinstance(payload, dict):
        raise ParseError("Joke entry must be a JSON object")

    joke_type = _enum_field(payload, "type", JokeType)
    joke_id = payload.get("id")
    if not isinstance(joke_id, int) or isinstance(joke_id, bool):
        raise ParseError("Joke payload is missing integer field 'id'")

    common = dict(
        id=joke_id,
        category=_enum_field(payload, "category", Category),
        type=joke_type,
        flags=_flags(payload.get("flags")),
        safe=bool(payload.get("safe", False)),
        lang=_enum_field(payload, "lang", Language) if "lang" in payload else Language.ENGLISH,
    )
    if joke_type is JokeType.TWOPART:
        return JokeResult(
            setup=_require_str(payload, "setup"),
            delivery=_require_str(payload, "delivery"),
            **common,
        )
    return JokeResult(joke=_require_str(payload, "joke"), **common)


def _failure(data: Dict[str, Any]) -> ApiFailure:
    code = data.get("code")
    message = data.get("message")
    if not isinstance(code, int) or not isinstance(message, str):
        raise ParseError("Error envelope is missing 'code' or 'message'")
    caused_by = data.get("causedBy") or []
    if not isinstance(caused_by, list):
        raise ParseError("Error envelope field 'causedBy' must be a list")
    return ApiFailure(
        code=code,
        message=message,
        caused_by=[str(c) for c in caused_by],
        additional_info=data.get("additionalInfo"),
        internal_error=bool(data.get("internalError", False)),
    )


def interpret_response(body: Union[bytes, str, Dict[str, Any]]) -> List[JokeResult]:
    """Turn a response body into jokes, or raise the API's error.

    Args:
        body: Raw response bytes/text, or an already decoded JSON object.

    Returns:
        One JokeResult per joke in the response (several when ``amount > 1``).

    Raises:
        ApiFailure: The API returned its error envelope.
        ParseError: The body matches neither envelope.
    """
    data = _decode(body)
    logger.debug("Received payload %s", data)

    error = data.get("error")
    if not isinstance(error, bool):
        raise ParseError("Response has no boolean 'error' field")
    if error:
        raise _failure(data)

    if "jokes" in data:
        jokes = data["jokes"]
        if not isinstance(jokes, list) or not jokes:
            raise ParseError("Field 'jokes' must be a non-empty list")
        return [parse_joke(j) for j in jokes]
    return [parse_joke(data)]
