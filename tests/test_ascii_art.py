from dodge.ascii_art import generate_ascii_art


def _rows(art):
    assert art.startswith("\n") and art.endswith("\n")
    return art[1:-1].split("\n")


def test_single_letter_rows():
    rows = _rows(generate_ascii_art("I"))
    assert rows == ["██╗", "██║", "██║", "██║", "██║", "╚═╝"]


def test_always_six_rows():
    for title in ["", "A", "Dodge SSG", "hello.world", "?!"]:
        assert len(_rows(generate_ascii_art(title))) == 6


def test_empty_title():
    assert generate_ascii_art("") == "\n" * 7


def test_case_does_not_matter():
    assert generate_ascii_art("dodge") == generate_ascii_art("DODGE")


def test_no_trailing_whitespace():
    for row in _rows(generate_ascii_art("Hello World ")):
        assert row == row.rstrip()


def test_trailing_space_is_trimmed():
    assert generate_ascii_art("I ") == generate_ascii_art("I")


def test_unknown_character_uses_default_glyph():
    rows = _rows(generate_ascii_art("#"))
    assert rows == ["███╗", "██╔╝", "██║", "██║", "███╗", "╚══╝"]


def test_letters_are_separated_by_a_space():
    rows = _rows(generate_ascii_art("II"))
    assert rows[0] == "██╗ ██╗"
    assert rows[5] == "╚═╝ ╚═╝"


def test_period_glyph():
    rows = _rows(generate_ascii_art("."))
    assert rows[4] == "██╗"
    assert rows[5] == "╚═╝"
    assert rows[:4] == ["", "", "", ""]