# studybook

A collection of small, self-contained and tested example modules covering
everyday programming ideas: structs and enums, pattern matching, strings and
collections, error handling, closures, linked lists, operator overloading and
threads. Many of the messages the functions return are in Chinese.

Requires Python 3.10 or later and has no runtime dependencies.

## Installing

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Examples

```python
from studybook.arith import complex_operation, check_at_most_100
from studybook.shapes import Rectangle
from studybook.text import first_word, longest
from studybook.generics import largest
from studybook.operators import Point
from studybook.lists import create_list, list_to_string
from studybook.closures import create_multiplier
from studybook.counting import word_counts
from studybook.textops import byte_slice
from studybook.concurrency import increment_concurrently

complex_operation(4)                        # 14
check_at_most_100(200)                      # raises ValueError
Rectangle.square(25).area()                 # 625
first_word("Hello world")                   # "Hello"
longest("long string", "xyz")               # "long string"
largest([34, 50, 25, 100, 65])              # 100
Point(1, 0) + Point(2, 3)                   # Point(x=3, y=3)
list_to_string(create_list(1, 2, 3))        # "1 -> 2 -> 3 -> Nil"
create_multiplier(3)(4)                     # 12
word_counts("hello world wonderful world")  # {"hello": 1, "world": 2, "wonderful": 1}
byte_slice("你好世界", 0, 6)                 # "你好"
increment_concurrently(10)                  # 10
```

## Modules

- `studybook.arith`: `add_two`, `multiply_by_three`, `complex_operation`,
  `greeting`, `check_at_most_100`, `internal_adder`.
- `studybook.shapes`: `Rectangle` (`area`, `can_hold`, `square`,
  `perimeter`), `User`, `Color`, `build_user`.
- `studybook.messages`: `IpAddrKind` and `route`, `IpV4`, `IpV6`,
  `describe_ip`, the messages `Quit`, `Move`, `Write`, `ChangeColor` with
  `describe_message`, and `describe_option`.
- `studybook.text`: `first_word`, `longest`, `calculate_length` (UTF-8
  bytes), `change`, `first_sentence`, `ImportantExcerpt`,
  `longest_with_an_announcement`.
- `studybook.generics`: `largest`, `Point` (`distance_from_origin`,
  `mixup`), `MixedPoint`.
- `studybook.closures`: `apply_function`, `call_once`, `call_twice`,
  `create_multiplier`, `make_accumulator`, `make_contains`.
- `studybook.lists`: cons-cell lists with `Cons`, shared mutable `Cell`
  values, `create_list` and `list_to_string`.
- `studybook.tracker`: `Messenger`, `MockMessenger` and `LimitTracker`, which
  sends a warning at 75%, 90% and 100% of its maximum.
- `studybook.widgets`: `Button`, `SelectBox` and `draw_screen`.
- `studybook.operators`: `Point` addition and `outline`, `Millimeters` plus
  `Meters`, `Human` and `Dog`.
- `studybook.misc`: `say_hello`, `make_list`, `match_option`, `split_at`.
- `studybook.counting`: `word_counts`, `zip_scores`, `describe_review`.
- `studybook.textops`: `byte_slice`, `chars_of`, `bytes_of`.
- `studybook.cells`: `IntCell`, `FloatCell`, `TextCell`, `describe_cell`,
  `get_or_none`, `add_to_each`.
- `studybook.errors`: `read_username`, `read_and_validate_username` (raising
  `CustomError` or `UsernameFormatError`), `validate_age`.
- `studybook.concurrency`: `send_messages`, `merge_producers`,
  `increment_concurrently`, `run_in_thread`.
- `studybook.basics`: `hello`, `another_function`, `divisibility_message`,
  `grade_for`, `loop_until`, `countdown`, `even_sum`.
- `studybook.patterns`: `describe_number`, `classify_letter`, `parity`,
  `describe_tuple`, `locate_point`, `drain_stack`.
- `studybook.restaurant`: `add_to_waitlist`, `seat_at_table`,
  `eat_at_restaurant`.

## What it does not include

The package is a library only. It installs no command-line program, has no
to-do list manager, and keeps no data on disk; the only file it touches is the
username file that `studybook.errors` reads when asked to.