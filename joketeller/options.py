"""Closed vocabularies understood by the JokeAPI.

Each enum member's ``value`` is the exact string the API expects in a
request URL (and echoes back in its responses).
"""
from __future__ import annotations

from enum import Enum
from typing import Type, TypeVar

from .errors import ValidationError

BASE_URL = "https://v2.jokeapi.dev/"
JOKE_PATH = "joke/"

DEFAULT_AMOUNT = 1
MAX_AMOUNT = 10

CATEGORY_SEPARATOR = ","
FLAG_SEPARATOR = ","


class Category(Enum):
    ANY = "Any"
    PROGRAMMING = "Programming"
    MISC = "Misc"
    DARK = "Dark"
    PUN = "Pun"
    SPOOKY = "Spooky"
    CHRISTMAS = "Christmas"


class BlacklistFlag(Enum):
    NSFW = "nsfw"
    RELIGIOUS = "religious"
    POLITICAL = "political"
    RACIST = "racist"
    SEXIST = "sexist"
    EXPLICIT = "explicit"


class JokeType(Enum):
    SINGLE = "single"
    TWOPART = "twopart"


# English is the API default, it only needs to be sent explicitly to pin it.
class Language(Enum):
    CZECH = "cs"
    GERMAN = "de"
    ENGLISH = "en"
    SPANISH = "es"
    FRENCH = "fr"
    PORTUGUESE = "pt"


E = TypeVar("E", bound=Enum)


def parse_option(enum_cls: Type[E], text: str) -> E:
    """Look up a member of ``enum_cls`` by value or name, ignoring case.

    Args:
        enum_cls: One of the vocabulary enums above.
        text: User or API supplied text, e.g. ``"programming"`` or ``"TwoPart"``.

    Returns:
        The matching enum member.

    Raises:
        ValidationError: If ``text`` names no member.
    """
    key = (text or "").strip().lower()
    for member in enum_cls:
        if key in (member.value.lower(), member.name.lower()):
            return member
    allowed = ", ".join(m.value for m in enum_cls)
    raise ValidationError(f"Unknown {enum_cls.__name__} {text!r}. Allowed: {allowed}")
