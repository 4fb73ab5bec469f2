import pytest

from studybook.tracker import LimitTracker, Messenger, MockMessenger


def test_mock_messenger_records_messages():
    messenger = MockMessenger()
    messenger.send_message("a")
    messenger.send_message("b")
    assert messenger.sent_messages == ["a", "b"]
    assert messenger.sent_message_count() == 2


def test_messenger_is_abstract():
    with pytest.raises(TypeError):
        Messenger()


def test_no_message_below_three_quarters():
    messenger = MockMessenger()
    tracker = LimitTracker(messenger, 100)
    tracker.set_value(50)
    assert messenger.sent_message_count() == 0
    assert tracker.value == 50


def test_warning_sequence():
    messenger = MockMessenger()
    tracker = LimitTracker(messenger, 100)
    tracker.set_value(80)
    assert messenger.sent_messages == ["警告：已使用超过75%的配额！"]
    tracker.set_value(95)
    assert messenger.sent_messages[-1] == "紧急警告：已使用超过90%的配额！"
    tracker.set_value(105)
    assert messenger.sent_messages[-1] == "错误：已超过配额！"
    assert messenger.sent_message_count() == 3


@pytest.mark.parametrize(
    ("value", "message"),
    [
        (75, "警告：已使用超过75%的配额！"),
        (90, "紧急警告：已使用超过90%的配额！"),
        (100, "错误：已超过配额！"),
    ],
)
def test_boundaries_are_inclusive(value, message):
    messenger = MockMessenger()
    LimitTracker(messenger, 100).set_value(value)
    assert messenger.sent_messages == [message]


def test_zero_maximum():
    messenger = MockMessenger()
    tracker = LimitTracker(messenger, 0)
    tracker.set_value(0)
    assert messenger.sent_messages == []
    tracker.set_value(1)
    assert messenger.sent_messages == ["错误：已超过配额！"]