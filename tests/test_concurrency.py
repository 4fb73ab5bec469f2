import pytest

from studybook.concurrency import (
    increment_concurrently,
    merge_producers,
    run_in_thread,
    send_messages,
)

MESSAGES = ["消息1", "消息2", "消息3", "消息4"]
FIRST = ["来自线程1: 消息1", "来自线程1: 消息2"]
SECOND = ["来自线程2: 消息1", "来自线程2: 消息2"]


def test_send_messages_preserves_order():
    assert send_messages(MESSAGES) == MESSAGES


def test_send_messages_with_delay():
    assert send_messages(["a", "b"], 0.01) == ["a", "b"]


def test_send_messages_single_and_empty():
    assert send_messages(["你好"]) == ["你好"]
    assert send_messages([]) == []


def test_send_messages_accepts_generator():
    assert send_messages(x for x in MESSAGES) == MESSAGES


def test_merge_producers_receives_everything():
    received = merge_producers([FIRST, SECOND], 0.005)
    assert sorted(received) == sorted(FIRST + SECOND)


def test_merge_producers_keeps_each_producers_order():
    received = merge_producers([FIRST, SECOND], 0.005)
    assert [m for m in received if m in FIRST] == FIRST
    assert [m for m in received if m in SECOND] == SECOND


def test_merge_producers_no_producers():
    assert merge_producers([]) == []


def test_increment_concurrently_counts_every_thread():
    assert increment_concurrently(10) == 10
    assert increment_concurrently(0) == 0


def test_increment_concurrently_many_threads():
    assert increment_concurrently(200) == 200


def test_increment_concurrently_negative_raises():
    with pytest.raises(ValueError):
        increment_concurrently(-1)


def test_run_in_thread_reports_vector():
    assert run_in_thread([1, 2, 3]) == "在线程中访问向量: [1, 2, 3]"


def test_run_in_thread_quotes_strings_and_copies():
    values = ["a", "b"]
    assert run_in_thread(values) == '在线程中访问向量: ["a", "b"]'
    assert values == ["a", "b"]