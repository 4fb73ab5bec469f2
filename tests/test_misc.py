import pytest

from studybook.misc import make_list, match_option, say_hello, split_at


def test_say_hello():
    assert say_hello() == "你好！"


def test_make_list():
    assert make_list(1, 2, 3, 4) == [1, 2, 3, 4]
    assert make_list() == []


def test_match_option_fifty():
    assert match_option(50, 10) == "Got 50"


def test_match_option_equal_to_guard():
    assert match_option(10, 10) == "匹配, n = 10"


def test_match_option_other_number():
    assert match_option(5, 10) == "Got a number: 5"


def test_match_option_none_raises():
    with pytest.raises(ValueError):
        match_option(None, 10)


def test_split_at_middle():
    assert split_at([1, 2, 3, 4, 5, 6], 3) == ([1, 2, 3], [4, 5, 6])


@pytest.mark.parametrize("mid", [0, 1, 2, 3])
def test_split_at_round_trip(mid):
    values = [7, 8, 9]
    left, right = split_at(values, mid)
    assert left + right == values
    assert len(left) == mid


def test_split_at_out_of_range():
    with pytest.raises(ValueError):
        split_at([1, 2], 3)
    with pytest.raises(ValueError):
        split_at([1, 2], -1)