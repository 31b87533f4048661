"""joketeller: build requests for and fetch jokes from JokeAPI (https://jokeapi.dev)."""
from .api import Joker, requests_transport
from .builder import BuiltRequest, build_url
from .errors import ApiFailure, JokeError, ParseError, TransportError, ValidationError
from .options import BASE_URL, MAX_AMOUNT, BlacklistFlag, Category, JokeType, Language
from .responses import JokeResult, interpret_response, parse_joke
from .selection import IdRange, Selection

__all__ = [
    "ApiFailure",
    "BASE_URL",
    "BlacklistFlag",
    "BuiltRequest",
    "Category",
    "IdRange",
    "JokeError",
    "JokeResult",
    "JokeType",
    "Joker",
    "Language",
    "MAX_AMOUNT",
    "ParseError",
    "Selection",
    "TransportError",
    "ValidationError",
    "build_url",
    "interpret_response",
    "parse_joke",
    "requests_transport",
]
