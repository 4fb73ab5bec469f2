import pytest

from studybook.basics import (
    another_function,
    countdown,
    divisibility_message,
    even_sum,
    grade_for,
    hello,
    loop_until,
)


def test_hello_default_greets_world():
    assert hello() == "Hello, World!"


def test_hello_named():
    assert hello("Cargo") == "Hello, Cargo!"


@pytest.mark.parametrize("x", [-3, 0, 5, 41])
def test_another_function_is_successor(x):
    assert another_function(x) - x == 1


def test_divisibility_source_example():
    assert divisibility_message(6) == "数字可以被 3 整除"


def test_divisibility_prefers_four():
    assert divisibility_message(12) == "数字可以被 4 整除"


def test_divisibility_two_only():
    assert divisibility_message(10) == "数字可以被 2 整除"


def test_divisibility_none():
    assert divisibility_message(7) == "数字不能被 4、3 或 2 整除"


def test_grade_source_example():
    assert grade_for(85) == "B"


@pytest.mark.parametrize(
    "score,grade", [(90, "A"), (80, "B"), (70, "C"), (60, "D"), (59, "F")]
)
def test_grade_boundaries(score, grade):
    assert grade_for(score) == grade


def test_grades_never_improve_as_score_drops():
    grades = [grade_for(s) for s in range(100, -1, -1)]
    assert grades == sorted(grades)


def test_loop_until_source_example():
    assert loop_until(5) == 10


@pytest.mark.parametrize("limit", [0, -2])
def test_loop_until_rejects_small_limits(limit):
    with pytest.raises(ValueError):
        loop_until(limit)


def test_countdown_source_example():
    assert countdown(3) == [3, 2, 1]


def test_countdown_is_reverse_of_count_up():
    assert list(reversed(countdown(7))) == list(range(1, 8))


def test_countdown_zero_is_empty():
    assert countdown(0) == []


def test_countdown_negative():
    with pytest.raises(ValueError):
        countdown(-1)


def test_even_sum_source_example():
    assert even_sum(1, 10) == 30


def test_even_sum_ignores_odd_endpoints():
    assert even_sum(1, 11) == even_sum(2, 10)


def test_even_sum_empty_range():
    assert even_sum(5, 4) == even_sum(3, 3)