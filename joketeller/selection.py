"""Mutable accumulator of the options a caller wants in a joke request.

Every ``add_*``/``set_*`` method returns the same instance so calls can be
chained::

    sel = Selection().add_categories([Category.PUN]).set_amount(3)

A Selection is meant for a single owner; it does no locking.
"""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Iterable, Optional, Set

from .errors import ValidationError
from .options import MAX_AMOUNT, BlacklistFlag, Category, JokeType, Language


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class IdRange:
    lower: Optional[int] = None
    upper: Optional[int] = None

    def check(self) -> None:
        """Raise ValidationError unless the bounds describe a usable range."""
        if self.lower is None and self.upper is None:
            raise ValidationError("ID range needs at least one bound")
        for bound in (self.lower, self.upper):
            if bound is None:
                continue
            if not _is_int(bound):
                raise ValidationError(f"ID range bound must be an integer, got {bound!r}")
            if bound < 0:
                raise ValidationError(f"ID range bound must be >= 0, got {bound}")
        if self.lower is not None and self.upper is not None and self.lower > self.upper:
            raise ValidationError(
                f"ID range is inverted: lower {self.lower} > upper {self.upper}"
            )


def check_amount(amount: int) -> None:
    """Raise ValidationError unless ``amount`` is an integer in 1..MAX_AMOUNT."""
    if not _is_int(amount):
        raise ValidationError(f"Amount must be an integer, got {amount!r}")
    if not 1 <= amount <= MAX_AMOUNT:
        raise ValidationError(f"Amount must be between 1 and {MAX_AMOUNT}, got {amount}")


@dataclass
class Selection:
    categories: Set[Category] = field(default_factory=set)
    blacklist_flags: Set[BlacklistFlag] = field(default_factory=set)
    joke_type: Optional[JokeType] = None
    language: Optional[Language] = None
    safe_mode: bool = False
    search_string: Optional[str] = None
    amount: Optional[int] = None
    id_range: Optional[IdRange] = None

    def add_categories(self, categories: Iterable[Category]) -> "Selection":
        """Add ``categories`` to the selected set; duplicates are ignored."""
        self.categories.update(categories)
        return self

    def add_blacklist_flags(self, flags: Iterable[BlacklistFlag]) -> "Selection":
        """Exclude jokes carrying any of ``flags``; duplicates are ignored."""
        self.blacklist_flags.update(flags)
        return self

    def set_joke_type(self, joke_type: Optional[JokeType]) -> "Selection":
        """Only ask for jokes of ``joke_type`` (``None`` allows both)."""
        self.joke_type = joke_type
        return self

    def set_language(self, language: Optional[Language]) -> "Selection":
        """Ask for jokes in ``language`` (``None`` leaves the API default)."""
        self.language = language
        return self

    def set_safe_mode(self, enabled: bool = True) -> "Selection":
        """Only ask for jokes the API considers safe.

        Safe mode supersedes any blacklist flags; they are kept here but not
        sent while safe mode is on.
        """
        self.safe_mode = bool(enabled)
        return self

    def set_search_string(self, text: Optional[str]) -> "Selection":
        """Restrict results to jokes containing ``text`` (``None`` clears it)."""
        self.search_string = text
        return self

    def set_amount(self, amount: Optional[int]) -> "Selection":
        """Ask for ``amount`` jokes at once (``None`` clears it).

        Raises:
            ValidationError: If ``amount`` is not an integer in 1..MAX_AMOUNT.
                The selection is left unchanged.
        """
        if amount is not None:
            check_amount(amount)
        self.amount = amount
        return self

    def set_id_range(self, lower: Optional[int] = None, upper: Optional[int] = None) -> "Selection":
        """Limit the joke pool to IDs between ``lower`` and ``upper`` inclusive.

        Raises:
            ValidationError: If no bound is given, a bound is negative, or the
                bounds are inverted. The selection is left unchanged.
        """
        id_range = IdRange(lower, upper)
        id_range.check()
        self.id_range = id_range
        return self

    def copy(self) -> "Selection":
        """Return an independent snapshot of this selection."""
        return replace(
            self,
            categories=set(self.categories),
            blacklist_flags=set(self.blacklist_flags),
        )
