"""Reading and validating a username, and validating ages."""

from __future__ import annotations

from pathlib import Path


class CustomError(Exception):
    """A username could not be read or is not acceptable."""


class UsernameFormatError(CustomError):
    """The username's content is not acceptable."""


def read_username(path: str | Path = "username.txt") -> str:
    """The whole content of the username file; OSError propagates."""
    return Path(path).read_text(encoding="utf-8")


def read_and_validate_username(path: str | Path = "username.txt") -> str:
    """The trimmed username from the file.

    Raises CustomError when the file cannot be read and UsernameFormatError
    when the name is blank or shorter than three bytes.
    """
    try:
        username = read_username(path)
    except OSError as exc:
        raise CustomError(f"IO错误: {exc}") from exc
    if not username.strip():
        raise UsernameFormatError("用户名不能为空")
    if len(username.encode("utf-8")) < 3:
        raise UsernameFormatError("用户名太短")
    return username.strip()


def validate_age(age: int) -> None:
    """Raise ValueError unless 0 <= age <= 150."""
    if age < 0:
        raise ValueError("年龄不能为负数")
    if age > 150:
        raise ValueError("年龄不太可能超过150岁")