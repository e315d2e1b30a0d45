# -*- encoding: utf-8 -*-
# @File   : value.py
# @Time   : 2026/10/13 00:12:44
# @Author : Kariko Lin

"""Property values.

A value is *always* a string on disk, so that's what we keep.
When it's built from a typed Python value, that value rides along,
mostly so `as_xxx()` can hand it back without a parse round trip.
"""

from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any

from ..config import IniConfig
from ..exceptions import ArgumentError, ConversionError

# compared in lower case.
FALSE_ALIASES = ('0', 'f', 'n', 'off', 'no', 'disabled', 'false')
TRUE_ALIASES = ('1', 't', 'y', 'on', 'yes', 'enabled', 'true')


class PropertyValue:
    """Lossless string form of a property value, plus lossy conversions.

    Two values are equal when their strings are; a value also equals
    the plain `str` it holds, so `section['Player1'] == 'Ryan'` works.
    """

    __slots__ = ('_value', '_string')

    def __init__(self, value: Any = None, config: IniConfig | None = None):
        types = (config or IniConfig()).types
        self._value: Any = value
        self._string: str | None
        match value:
            case PropertyValue():
                self._value = value._value
                self._string = value._string
            case None:
                self._string = None
            case str():
                self._string = value
            # bool and enums before int: both may be ints underneath.
            case bool():
                self._string = types.true_string if value else types.false_string
            case Enum():
                self._string = value.name
            case int() | Decimal():
                self._string = str(value)
            case float():
                self._string = repr(value)
            case datetime() | date():
                self._string = value.strftime(types.date_format)
            case _:
                raise ArgumentError(
                    f'Cannot store a {type(value).__name__} as INI value.')

    @property
    def typed(self) -> Any:
        """The value this was built from (the string itself, if parsed)."""
        return self._value

    def is_empty(self) -> bool:
        return self._value is None and self._string is None

    def __str__(self) -> str:
        return '' if self._string is None else self._string

    def __repr__(self) -> str:
        return f'PropertyValue({str(self)!r})'

    def __eq__(self, other: object) -> bool:
        if isinstance(other, PropertyValue):
            return str(self) == str(other)
        if isinstance(other, str):
            return str(self) == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(str(self))

    def __int__(self) -> int:
        return self.as_int()

    def __float__(self) -> float:
        return self.as_float()

    def as_int(self) -> int:
        if type(self._value) is int:
            return self._value
        try:
            return int(str(self))
        except ValueError:
            raise ConversionError(str(self), 'int') from None

    def as_float(self) -> float:
        if type(self._value) is float:
            return self._value
        try:
            return float(str(self))
        except ValueError:
            raise ConversionError(str(self), 'float') from None

    def as_decimal(self) -> Decimal:
        if isinstance(self._value, Decimal):
            return self._value
        try:
            return Decimal(str(self).strip())
        except InvalidOperation:
            raise ConversionError(str(self), 'Decimal') from None

    def as_bool(self, config: IniConfig | None = None) -> bool:
        if isinstance(self._value, bool):
            return self._value
        types = (config or IniConfig()).types
        s = str(self).lower()
        if s in FALSE_ALIASES or s == types.false_string.lower():
            return False
        if s in TRUE_ALIASES or s == types.true_string.lower():
            return True
        raise ConversionError(str(self), 'bool')

    def as_datetime(
        self, fmt: str | None = None, config: IniConfig | None = None
    ) -> datetime:
        """Parse with `fmt`, or with the config's `date_format`."""
        if isinstance(self._value, datetime):
            return self._value
        if fmt is None:
            fmt = (config or IniConfig()).types.date_format
        try:
            return datetime.strptime(str(self), fmt)
        except ValueError:
            raise ConversionError(str(self), 'datetime') from None

    def as_enum[E: Enum](
        self, enum_type: type[E], case_sensitive: bool = False
    ) -> E:
        """Look a member up by name, or by value if the string is a number."""
        if not (isinstance(enum_type, type) and issubclass(enum_type, Enum)):
            raise ArgumentError(f'{enum_type!r} is not an Enum type.')
        if isinstance(self._value, enum_type):
            return self._value

        s = str(self).strip()
        for name, member in enum_type.__members__.items():
            if name == s or (not case_sensitive and name.lower() == s.lower()):
                return member
        try:
            return enum_type(int(s))
        except ValueError:
            raise ConversionError(str(self), enum_type.__name__) from None
