import datetime as dt

import pytest

from sdf.encoding import (
    escape,
    format_date,
    format_height,
    format_scale,
    header_line,
    pad_keys,
    render_section,
)


class TestEscape:
    @pytest.mark.parametrize(
        "text, expected",
        (
            pytest.param("a=b", "a:b", id="equals"),
            pytest.param("<tag>", "[tag]", id="brackets"),
            pytest.param("C:\\scans", "C:|scans", id="backslash"),
            pytest.param("end*", "end#", id="asterisk"),
            pytest.param("=<>\\*", ":[]|#", id="all reserved"),
        ),
    )
    def test_replaces_reserved_characters(self, text: str, expected: str):
        assert escape(text) == expected

    @pytest.mark.parametrize(
        "text", ("", "plain text", "Zygo NewView 7300; 50x", "äöü µm")
    )
    def test_is_identity_without_reserved_characters(self, text: str):
        assert escape(text) == text

    @pytest.mark.parametrize("text", ("a=b<c>d\\e*f", "***", "x = <y>"))
    def test_preserves_length(self, text: str):
        assert len(escape(text)) == len(text)


@pytest.mark.parametrize(
    "value, expected",
    (
        pytest.param(dt.datetime(2017, 3, 9, 14, 5), "090320171405", id="padded"),
        pytest.param(dt.datetime(2020, 12, 31, 23, 59), "311220202359", id="end of year"),
        pytest.param(
            dt.datetime(2021, 1, 2, 3, 4, 59, tzinfo=dt.UTC), "020120210304", id="seconds dropped"
        ),
    ),
)
def test_format_date(value: dt.datetime, expected: str):
    assert format_date(value) == expected


@pytest.mark.parametrize(
    "value, expected",
    (
        pytest.param(1e-6, "1E-06", id="micrometer"),
        pytest.param(1.5e-7, "1.5E-07", id="sub micrometer"),
        pytest.param(0.00025, "0.00025", id="fixed notation"),
        pytest.param(1.23456789e-6, "1.2346E-06", id="rounded"),
        pytest.param(0.0, "0", id="zero"),
    ),
)
def test_format_scale(value: float, expected: str):
    assert format_scale(value) == expected


@pytest.mark.parametrize(
    "value, decimals, expected",
    (
        pytest.param(2e-6, 6, "2.000000", id="six decimals"),
        pytest.param(2e-6, 5, "2.00000", id="five decimals"),
        pytest.param(-1.25e-9, 6, "-0.001250", id="negative"),
        pytest.param(0.0, 6, "0.000000", id="zero"),
    ),
)
def test_format_height(value: float, decimals: int, expected: str):
    assert format_height(value, decimals) == expected


def test_header_line_pads_key():
    assert header_line("ManufacID", "NFI") == "ManufacID   = NFI"
    assert header_line("NumProfiles", 3) == "NumProfiles = 3"


class TestPadKeys:
    def test_pads_to_longest_trimmed_key(self):
        assert pad_keys({"a": "1", "longkey": "2"}) == {"a      ": "1", "longkey": "2"}

    def test_trims_keys_and_values(self):
        assert pad_keys({"  key ": "  value  "}) == {"key": "value"}

    def test_keeps_order(self):
        assert list(pad_keys({"b": "", "a": "", "c": ""})) == ["b", "a", "c"]

    def test_last_value_wins_for_equal_trimmed_keys(self):
        assert pad_keys({"key": "1", " key ": "2"}) == {"key": "2"}

    def test_empty(self):
        assert pad_keys({}) == {}


def test_render_section_appends_delimiter():
    assert render_section(["a", "b"]) == "a\nb\n*\n"
    assert render_section([]) == "*\n"
