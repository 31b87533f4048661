import json

import pytest

from joketeller import (
    ApiFailure,
    BlacklistFlag,
    Category,
    JokeType,
    Language,
    ParseError,
    interpret_response,
)

SINGLE = {
    "error": False,
    "category": "Programming",
    "type": "single",
    "joke": "There are 10 kinds of people.",
    "flags": {"nsfw": False, "religious": False, "political": False,
              "racist": False, "sexist": False, "explicit": True},
    "id": 12,
    "safe": False,
    "lang": "en",
}

TWOPART = {
    "error": False,
    "category": "Pun",
    "type": "twopart",
    "setup": "Why did the scarecrow win?",
    "delivery": "He was outstanding in his field.",
    "flags": {"nsfw": False, "religious": False},
    "id": 99,
    "safe": True,
    "lang": "de",
}


def test_single_joke_from_bytes():
    [joke] = interpret_response(json.dumps(SINGLE).encode())
    assert joke.id == 12
    assert joke.category is Category.PROGRAMMING
    assert joke.type is JokeType.SINGLE
    assert joke.joke == "There are 10 kinds of people."
    assert joke.flags == frozenset({BlacklistFlag.EXPLICIT})
    assert joke.safe is False
    assert joke.lang is Language.ENGLISH
    assert joke.text == joke.joke


def test_twopart_joke():
    [joke] = interpret_response(json.dumps(TWOPART))
    assert joke.type is JokeType.TWOPART
    assert joke.setup.startswith("Why")
    assert joke.delivery.startswith("He was")
    assert joke.flags == frozenset()
    assert joke.safe is True
    assert joke.lang is Language.GERMAN
    assert joke.text == f"{joke.setup}\n{joke.delivery}"


def test_multiple_jokes_envelope():
    body = {"error": False, "amount": 2, "jokes": [SINGLE, TWOPART]}
    jokes = interpret_response(body)
    assert [j.id for j in jokes] == [12, 99]


def test_twopart_missing_delivery_is_parse_error():
    payload = dict(TWOPART)
    del payload["delivery"]
    with pytest.raises(ParseError):
        interpret_response(payload)


def test_single_missing_joke_is_parse_error():
    payload = dict(SINGLE)
    del payload["joke"]
    with pytest.raises(ParseError):
        interpret_response(payload)


def test_error_envelope_is_api_failure():
    body = {
        "error": True,
        "internalError": False,
        "code": 106,
        "message": "No matching joke found",
        "causedBy": ["No jokes were found that match your provided filter(s)."],
        "additionalInfo": "The specified category is invalid",
        "timestamp": 1579170794412,
    }
    with pytest.raises(ApiFailure) as exc:
        interpret_response(json.dumps(body).encode())
    err = exc.value
    assert err.code == 106
    assert err.message == "No matching joke found"
    assert err.caused_by == ["No jokes were found that match your provided filter(s)."]
    assert err.additional_info == "The specified category is invalid"
    assert err.internal_error is False
    assert not isinstance(err, ParseError)


def test_error_envelope_without_code_is_parse_error():
    with pytest.raises(ParseError):
        interpret_response({"error": True, "message": "oops"})


@pytest.mark.parametrize(
    "body",
    [b"", b"<html>502</html>", b"[1, 2]", b'{"joke": "no error field"}', b'{"error": "no"}'],
)
def test_malformed_bodies_are_parse_errors(body):
    with pytest.raises(ParseError):
        interpret_response(body)


def test_unknown_category_is_parse_error():
    payload = dict(SINGLE, category="Cats")
    with pytest.raises(ParseError):
        interpret_response(payload)


def test_unknown_flags_are_ignored():
    payload = dict(SINGLE, flags={"explicit": True, "silly": True})
    [joke] = interpret_response(payload)
    assert joke.flags == frozenset({BlacklistFlag.EXPLICIT})


def test_empty_jokes_list_is_parse_error():
    with pytest.raises(ParseError):
        interpret_response({"error": False, "amount": 0, "jokes": []})


def test_invalid_utf8_body_is_parse_error():
    with pytest.raises(ParseError):
        interpret_response(b"\xff\xfe{")
