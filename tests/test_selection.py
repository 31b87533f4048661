import pytest

from joketeller import BlacklistFlag, Category, JokeType, Language, Selection, ValidationError
from joketeller.selection import IdRange


def test_mutations_chain_and_return_same_instance():
    sel = Selection()
    out = (
        sel.add_categories([Category.PUN])
        .add_blacklist_flags([BlacklistFlag.NSFW])
        .set_joke_type(JokeType.SINGLE)
        .set_language(Language.GERMAN)
        .set_safe_mode()
        .set_search_string("bar")
        .set_amount(3)
        .set_id_range(1, 9)
    )
    assert out is sel
    assert sel.categories == {Category.PUN}
    assert sel.blacklist_flags == {BlacklistFlag.NSFW}
    assert sel.joke_type is JokeType.SINGLE
    assert sel.language is Language.GERMAN
    assert sel.safe_mode is True
    assert sel.search_string == "bar"
    assert sel.amount == 3
    assert sel.id_range == IdRange(1, 9)


def test_duplicates_collapse():
    sel = Selection().add_categories([Category.DARK, Category.DARK])
    sel.add_categories([Category.DARK])
    sel.add_blacklist_flags([BlacklistFlag.RACIST, BlacklistFlag.RACIST])
    assert sel.categories == {Category.DARK}
    assert sel.blacklist_flags == {BlacklistFlag.RACIST}


@pytest.mark.parametrize("amount", [0, -1, 11])
def test_set_amount_rejects_out_of_range(amount):
    sel = Selection()
    with pytest.raises(ValidationError):
        sel.set_amount(amount)
    assert sel.amount is None


def test_set_amount_none_clears():
    sel = Selection().set_amount(4).set_amount(None)
    assert sel.amount is None


@pytest.mark.parametrize(
    "lower, upper",
    [(5, 2), (None, None), (-1, 3), (0, -2)],
)
def test_set_id_range_rejects_bad_bounds(lower, upper):
    sel = Selection()
    with pytest.raises(ValidationError):
        sel.set_id_range(lower, upper)
    assert sel.id_range is None


def test_single_bound_id_ranges_allowed():
    assert Selection().set_id_range(7).id_range == IdRange(7, None)
    assert Selection().set_id_range(upper=7).id_range == IdRange(None, 7)
    assert Selection().set_id_range(4, 4).id_range == IdRange(4, 4)


def test_copy_is_independent():
    sel = Selection().add_categories([Category.PUN])
    snap = sel.copy()
    sel.add_categories([Category.MISC])
    assert snap.categories == {Category.PUN}


@pytest.mark.parametrize("amount", [2.5, "3", True, False])
def test_set_amount_rejects_non_integers(amount):
    sel = Selection()
    with pytest.raises(ValidationError):
        sel.set_amount(amount)
    assert sel.amount is None


@pytest.mark.parametrize("lower, upper", [(1.5, None), (None, "9"), (True, 4)])
def test_set_id_range_rejects_non_integers(lower, upper):
    with pytest.raises(ValidationError):
        Selection().set_id_range(lower, upper)
