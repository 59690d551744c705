import pytest

from bemhelper.naming import BemOptions
from bemhelper.navigation import get_preceding_class_name, suggest_child_class
from tests._shared_cases import PRECEDING_BLOCK_SOURCES


@pytest.mark.parametrize(
    ("style", "expected"),
    [
        ("kebab", "body-class-2"),
        ("camel", "bodyClass-2"),
        ("pascal", "BodyClass-2"),
        ("snake", "body_class_2"),
    ],
)
def test_preceding_block_class(style: str, expected: str) -> None:
    assert get_preceding_class_name(PRECEDING_BLOCK_SOURCES[style], False) == expected


@pytest.mark.parametrize(
    ("style", "expected"),
    [
        ("kebab", "body-class-2__child-1"),
        ("camel", "bodyClass-2__child-1"),
        ("pascal", "BodyClass-2__Child-1"),
        ("snake", "body_class_2__child_1"),
    ],
)
def test_preceding_element_class(style: str, expected: str) -> None:
    assert get_preceding_class_name(PRECEDING_BLOCK_SOURCES[style], True) == expected


def test_preceding_element_class_may_carry_modifier() -> None:
    markup = '<div class="nav"><a class="nav__link nav__link--active"></a><span class="nav--dark"></span>'

    assert get_preceding_class_name(markup, True) == "nav__link--active"
    assert get_preceding_class_name(markup, False) == "nav"


def test_preceding_class_missing_returns_none() -> None:
    assert get_preceding_class_name("", False) is None
    assert get_preceding_class_name('<div class="nav"></div>', True) is None
    assert get_preceding_class_name('<div class="nav__item"></div>', False) is None


def test_suggest_child_class_uses_element_separator() -> None:
    markup = PRECEDING_BLOCK_SOURCES["kebab"]

    assert suggest_child_class(markup) == "body-class-2__"
    assert suggest_child_class('<div class="nav"></div>', BemOptions(element_separator=":")) == "nav:"
    assert suggest_child_class("<p></p>") is None
