import pytest

from quicktask.utils.emoji import first_pictograph, is_pictograph, strip_pictographs


@pytest.mark.parametrize("ch", ["😀", "🙏", "🌀", "🗿", "🚀", "🛿", "🇦", "☀", "⛿", "✂", "➿"])
def test_range_members(ch):
    assert is_pictograph(ch)


@pytest.mark.parametrize("ch", ["a", "!", "⭐", "🤖", "€", " "])
def test_range_non_members(ch):
    assert not is_pictograph(ch)


def test_first_pictograph_none():
    assert first_pictograph("plain text") is None
    assert first_pictograph("") is None


def test_lone_regional_indicator():
    assert first_pictograph("x 🇺 y") == "🇺"


def test_strip_removes_attached_selectors_only():
    assert strip_pictographs("☀️ sun") == " sun"
    assert strip_pictographs("a️b") == "a️b"


def test_joiner_sequence_is_one_cluster():
    assert first_pictograph("go 👨‍💻 now") == "👨‍💻"
    assert strip_pictographs("go 👨‍💻 now") == "go  now"


def test_trailing_joiner_is_left_alone():
    assert first_pictograph("🔥‍") == "🔥"
