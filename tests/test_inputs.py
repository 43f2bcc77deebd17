"""Tests for URL list loading."""

from __future__ import annotations

import types

import pytest

from botview.errors import ConfigurationError, EmptyOrInvalidInputError, MissingInputError
from botview.inputs import load_urls, write_placeholder


def test_yields_only_url_lines_in_order(tmp_path):
    path = tmp_path / "urls.txt"
    path.write_text(
        "# my sites\n"
        "https://b.example.com/\n"
        "\n"
        "not a url\n"
        "http://a.example.com/page\n"
        "ftp://files.example.com/\n"
        "  https://indented.example.com/\n"
        "HTTPS://upper.example.com/\n"
        "https://c.example.com/?q=1   \n",
        encoding="utf-8",
    )

    assert list(load_urls(path)) == [
        "https://b.example.com/",
        "http://a.example.com/page",
        "https://c.example.com/?q=1",
    ]


def test_result_is_lazy(tmp_path):
    path = tmp_path / "urls.txt"
    path.write_text("https://a.example.com/\n", encoding="utf-8")
    assert isinstance(load_urls(path), types.GeneratorType)


def test_crlf_line_endings(tmp_path):
    path = tmp_path / "urls.txt"
    path.write_bytes(b"https://a.example.com/\r\nhttps://b.example.com/\r\n")
    assert list(load_urls(path)) == ["https://a.example.com/", "https://b.example.com/"]


def test_missing_file(tmp_path):
    with pytest.raises(MissingInputError):
        load_urls(tmp_path / "nope.txt")


@pytest.mark.parametrize("content", ["", "\n\n", "example.com\nwww.example.com\n"])
def test_empty_or_invalid_file(tmp_path, content):
    path = tmp_path / "urls.txt"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(EmptyOrInvalidInputError) as excinfo:
        load_urls(path)
    assert isinstance(excinfo.value, ConfigurationError)


def test_placeholder_is_one_line_and_yields_no_urls(tmp_path):
    path = tmp_path / "urls.txt"
    write_placeholder(path, lang="en")

    lines = path.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 1
    with pytest.raises(EmptyOrInvalidInputError):
        load_urls(path)


def test_byte_order_mark_does_not_hide_first_url(tmp_path):
    path = tmp_path / "urls.txt"
    path.write_bytes("https://a.example.com/\nhttps://b.example.com/\n".encode("utf-8-sig"))
    assert list(load_urls(path)) == ["https://a.example.com/", "https://b.example.com/"]
