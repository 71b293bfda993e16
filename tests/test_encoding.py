"""Strict and tolerant percent-decoding."""

import logging

import pytest

from restfacade.encoding import (
    MalformedEncodingError,
    decode_or_raw,
    split_pairs,
    url_decode,
)


@pytest.mark.parametrize(
    "raw, decoded",
    [
        ("plain", "plain"),
        ("a+b", "a b"),
        ("%20this%20that", " this that"),
        ("%E2%82%AC", "€"),
        ("%7c%40", "|@"),
    ],
)
def test_url_decode(raw: str, decoded: str) -> None:
    assert url_decode(raw) == decoded


@pytest.mark.parametrize("raw", ["%invalid", "100%", "%2", "%E9", "ok%2Gno"])
def test_url_decode_invalid(raw: str) -> None:
    with pytest.raises(MalformedEncodingError) as info:
        url_decode(raw)
    assert info.value.value == raw
    assert isinstance(info.value, ValueError)


def test_decode_or_raw_falls_back(caplog) -> None:
    with caplog.at_level(logging.DEBUG, logger="restfacade.encoding"):
        assert decode_or_raw("%invalid") == "%invalid"
    assert "Keeping undecoded value" in caplog.text
    assert decode_or_raw("a%2Bb") == "a+b"


def test_split_pairs() -> None:
    assert split_pairs("a=1&&b&c==2&") == [("a", "1"), ("b", ""), ("c", "=2")]
    assert split_pairs("") == []
