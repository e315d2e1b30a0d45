# -*- encoding: utf-8 -*-
# @File   : exceptions.py
# @Time   : 2026/10/12 21:40:18
# @Author : Kariko Lin

"""Everything raised by `pyinifile` derives from `IniError`.

The concrete classes also inherit the builtin they refine,
so `except ValueError` / `except KeyError` keep working for callers
who don't care about this package.
"""


class IniError(Exception):
    """Base of all INI errors."""
    pass


class ArgumentError(IniError, ValueError):
    """An argument can't be used, e.g. a `None` stream or an empty name."""
    pass


class NotFoundError(IniError, LookupError):
    """A file path, or an item the caller referred to, doesn't exist."""
    pass


class FormatError(IniError, ValueError):
    """To record errors when reading INI text."""

    def __init__(
        self, message: str,
        line_number: int | None = None, line: str | None = None
    ) -> None:
        if line_number is not None:
            message = f'line {line_number}: {message}'
        super().__init__(message)
        self.line_number = line_number
        self.line = line


class ConversionError(IniError, ValueError):
    """A property value can't be read as the requested type."""

    def __init__(self, value: str, target: str) -> None:
        super().__init__(f'"{value}" cannot be converted to {target}.')
        self.value = value
        self.target = target


class DuplicateKeyError(IniError, KeyError):
    """A section with the same name already exists."""

    # KeyError.__str__ would repr() the message.
    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ''
