"""Small arithmetic and greeting helpers."""


def add_two(a: int) -> int:
    return a + 2


def multiply_by_three(a: int) -> int:
    return a * 3


def complex_operation(a: int) -> int:
    """Multiply by three, then add two."""
    return add_two(multiply_by_three(a))


def greeting(name: str) -> str:
    return f"你好，{name}！"


def check_at_most_100(value: int) -> None:
    """Raise ValueError when the value exceeds 100."""
    if value > 100:
        raise ValueError(f"值必须小于等于 100，但得到了 {value}")


def internal_adder(a: int, b: int) -> int:
    return a + b