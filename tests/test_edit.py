import pytest

from poser.edit import (
    FStrError,
    StrError,
    insert,
    overwrite,
    pad,
    remove_at,
    substr,
    trim,
)


def test_raised_error_codes_match_documented_values():
    with pytest.raises(FStrError) as out_of_bounds:
        remove_at("abc", 3, 1)
    assert int(out_of_bounds.value.code) == 1
    assert out_of_bounds.value.code == StrError.INDEX_OUT_OF_BOUNDS

    with pytest.raises(FStrError) as null_arg:
        insert("abc", 0, None)
    assert int(null_arg.value.code) == 4
    assert null_arg.value.code == StrError.NULL_STRING_ARG


def test_fstr_error_carries_code_and_message():
    err = FStrError(StrError.NULL_STRING_ARG, "missing")
    assert err.code is StrError.NULL_STRING_ARG
    assert err.message == "missing"
    assert "missing" in str(err)


def test_remove_at_middle_keeps_surroundings():
    result = remove_at("abcdef", 1, 2)
    assert len(result) == 4
    assert result == "a" + "def"


def test_remove_at_clamps_length_to_end():
    text = "hello"
    assert remove_at(text, 2, 100) == text[:2]


def test_remove_at_empty_string_is_unchanged():
    assert remove_at("", 5, 3) == ""


def test_remove_at_index_out_of_bounds():
    with pytest.raises(FStrError) as info:
        remove_at("abc", 3, 1)
    assert info.value.code is StrError.INDEX_OUT_OF_BOUNDS


def test_remove_at_zero_length_is_identity():
    assert remove_at("abc", 1, 0) == "abc"


def test_overwrite_within_string():
    result = overwrite("abcdef", 1, "XY")
    assert len(result) == 6
    assert result[1:3] == "XY"
    assert result[0] + result[3:] == "a" + "def"


def test_overwrite_extends_with_spaces():
    assert overwrite("ab", 4, "xy") == "ab  xy"


def test_overwrite_at_end_appends():
    assert overwrite("abc", 3, "de") == "abc" + "de"


def test_overwrite_negative_index_raises():
    with pytest.raises(FStrError):
        overwrite("abc", -1, "x")


def test_pad_left():
    result = pad("ab", 5, "*", -1)
    assert len(result) == 5
    assert result.endswith("ab")
    assert result.count("*") == 3


def test_pad_right():
    result = pad("ab", 5, "*", 1)
    assert result.startswith("ab")
    assert result[2:] == "*" * 3


def test_pad_both_puts_smaller_half_left():
    assert pad("ab", 5, "-", 0) == "-ab--"


def test_pad_both_even_split():
    result = pad("ab", 6, "-", 0)
    assert result == "--" + "ab" + "--"


@pytest.mark.parametrize("target", [0, 1, 2])
def test_pad_target_not_longer_raises(target):
    with pytest.raises(FStrError) as info:
        pad("ab", target, "*", 1)
    assert info.value.code is StrError.INDEX_OUT_OF_BOUNDS


def test_pad_rejects_multi_character_fill():
    with pytest.raises(ValueError):
        pad("ab", 5, "**", 1)


def test_trim_both_sides():
    assert trim(" \t hi \n", 0) == "hi"


def test_trim_left_only():
    assert trim(" \t hi \n", -1) == "hi \n"


def test_trim_right_only():
    assert trim(" \t hi \n", 1) == " \t hi"


def test_trim_all_whitespace_gives_empty():
    assert trim("\v\f \r", 0) == ""


def test_trim_without_whitespace_is_identity():
    assert trim("word", 0) == "word"


def test_substr_returns_slice():
    text = "hello"
    assert substr(text, 1, 3) == text[1:4]


def test_substr_start_out_of_bounds():
    with pytest.raises(FStrError) as info:
        substr("abc", 3, 1)
    assert info.value.code is StrError.INDEX_OUT_OF_BOUNDS


def test_substr_running_past_end_raises():
    with pytest.raises(FStrError):
        substr("abc", 1, 5)


def test_insert_at_start():
    assert insert("world", 0, "hello ") == "hello " + "world"


def test_insert_at_end_appends():
    assert insert("abc", 3, "de") == "abc" + "de"


def test_insert_in_middle_preserves_length():
    result = insert("abcd", 2, "XY")
    assert len(result) == 6
    assert result[2:4] == "XY"


def test_insert_empty_is_identity():
    assert insert("abc", 10, "") == "abc"


def test_insert_past_end_raises():
    with pytest.raises(FStrError) as info:
        insert("abc", 4, "x")
    assert info.value.code is StrError.INDEX_OUT_OF_BOUNDS


def test_insert_none_raises_null_arg():
    with pytest.raises(FStrError) as info:
        insert("abc", 0, None)
    assert info.value.code is StrError.NULL_STRING_ARG