"""Tests for stylesheet syntax checks."""

import pytest

from inkwell.utils.css import css_errors, is_valid_css


@pytest.mark.parametrize(
    "css",
    [
        "h1 { color: red; }",
        "p { margin: 0 } /* note */ a:hover { text-decoration: underline }",
        "@media (max-width: 600px) { .sidebar { display: none } }",
        "",
    ],
)
def test_valid_stylesheets(css: str) -> None:
    assert css_errors(css) == []
    assert is_valid_css(css)


@pytest.mark.parametrize(
    "css",
    [
        "h1 color: red;",
        "h1 { : red }",
        "@media screen { p { : 0 } }",
    ],
)
def test_invalid_stylesheets(css: str) -> None:
    errors = css_errors(css)
    assert errors
    assert not is_valid_css(css)


def test_error_carries_position() -> None:
    (error,) = css_errors("h1 {\n  : red\n}")
    assert error.startswith("2:")
