from bemhelper.naming import BemOptions
from bemhelper.stylesheet import build_stylesheet_tree, generate_stylesheet


def test_generate_single_flat() -> None:
    assert generate_stylesheet(["test-class"], True) == ".test-class{}"


def test_generate_multiple_flat_is_sorted() -> None:
    actual = generate_stylesheet(["test-class", "test-class-two", "class-test"], True)

    assert actual == ".class-test{}.test-class{}.test-class-two{}"


def test_generate_single_nested() -> None:
    assert generate_stylesheet(["test-class"], False) == ".test-class{}"


def test_generate_multiple_nested() -> None:
    actual = generate_stylesheet(
        [
            "test-class",
            "class-test__element",
            "class-test",
            "class-test__element--one",
            "class-test__element--two",
        ],
        False,
    )

    assert actual == ".class-test{&__element{&--one{}&--two{}}}.test-class{}"


def test_generate_modified_blocks_nested() -> None:
    actual = generate_stylesheet(["test-block", "test-block--mod", "test-block--mod-2"], False)

    assert actual == ".test-block{&--mod{}&--mod-2{}}"


def test_generate_nested_block_modifiers_precede_elements() -> None:
    actual = generate_stylesheet(["card__title", "card--wide", "card__body--muted"], False)

    assert actual == ".card{&--wide{}&__body{&--muted{}}&__title{}}"


def test_generate_duplicates_emit_one_rule() -> None:
    names = ["nav", "nav", "nav__item", "nav__item"]

    assert generate_stylesheet(names, True) == ".nav{}.nav__item{}"
    assert generate_stylesheet(names, False) == ".nav{&__item{}}"


def test_generate_skips_empty_names_and_empty_input() -> None:
    assert generate_stylesheet([], False) == ""
    assert generate_stylesheet(["", "nav"], True) == ".nav{}"


def test_generate_uses_configured_separators() -> None:
    options = BemOptions(element_separator="-", modifier_separator="_")

    actual = generate_stylesheet(["menu", "menu-item", "menu-item_active"], False, options)

    assert actual == ".menu{&-item{&_active{}}}"


def test_build_stylesheet_tree_groups_by_block() -> None:
    tree = build_stylesheet_tree(["b__x", "a", "b", "b--m", "b__x--y"])

    assert [block.name for block in tree] == ["a", "b"]
    block_b = tree[1]
    assert block_b.modifiers == ["m"]
    assert list(block_b.elements) == ["x"]
    assert block_b.elements["x"].modifiers == ["y"]
