# -*- encoding: utf-8 -*-
# @File   : document.py
# @Time   : 2026/10/14 00:03:29
# @Author : Kariko Lin

"""The INI document.

`Ini` is an ordered, name-keyed collection of sections
(a `MutableMapping[str, Section]`, plus positional access),
and owns the comments/blank lines left over at the end of the file.

    ```python
    ini = Ini.load(text)
    ini['Game State']['Player1'] = 'Ryan'
    assert str(Ini.load(text)) == text  # untouched -> same text
    ```
"""

import asyncio
import logging
from collections.abc import Iterator, Mapping, MutableMapping
from io import StringIO, TextIOBase
from os import PathLike
from os.path import isfile
from typing import IO, Any, Self

from .abstract import FileHandler
from .config import IniConfig, IniFormatOptions, IniLoadSettings
from .exceptions import ArgumentError, DuplicateKeyError, NotFoundError
from .items import (
    BlankLine,
    Comment,
    CommentPadding,
    MinorIniItem,
    Property,
    PropertyPadding,
    PropertyValue,
    Section,
    SectionPadding,
    render
)
from .parser import decode_bytes, readstream

type SaveTarget = str | PathLike[str] | TextIOBase | IO[bytes]


class Ini(MutableMapping[str, Section]):
    """In-memory INI file.

    Section names are unique under `settings.case_sensitive`
    (case-insensitive by default). Iterating yields section names,
    `ini[0]` gives the first section, `ini['Name']` the named one.
    """

    def __init__(
        self,
        settings: IniLoadSettings | None = None,
        config: IniConfig | None = None
    ) -> None:
        self.settings = settings or IniLoadSettings()
        self.config = config or IniConfig()
        self.__sections: list[Section] = []
        # comments/blank lines after the last section or property.
        self.trailing_items: list[MinorIniItem] = []
        # whether the text ends with a line break.
        self.final_newline = True

    # ----- loading -----

    @classmethod
    def load(
        cls,
        content: str,
        settings: IniLoadSettings | None = None,
        config: IniConfig | None = None
    ) -> Self:
        """Parse INI text."""
        if content is None:
            raise ArgumentError('INI content must not be None.')
        # universal newlines: '\r\n' and '\r' end lines as well.
        return readstream(StringIO(content, newline=None), cls(settings, config))

    @classmethod
    def from_reader(
        cls,
        reader: TextIOBase,
        settings: IniLoadSettings | None = None,
        config: IniConfig | None = None
    ) -> Self:
        """Parse an opened text stream. The stream is left open."""
        if reader is None:
            raise ArgumentError('Reader must not be None.')
        if getattr(reader, 'closed', False):
            raise ArgumentError('Reader is closed.')
        return readstream(reader, cls(settings, config))

    @classmethod
    def from_stream(
        cls,
        stream: IO[bytes],
        settings: IniLoadSettings | None = None,
        config: IniConfig | None = None
    ) -> Self:
        """Parse an opened binary stream, decoded per `settings`."""
        if stream is None:
            raise ArgumentError('Stream must not be None.')
        # readable() itself raises ValueError once closed.
        if stream.closed or not stream.readable():
            raise ArgumentError('Stream is not readable.')
        raw = stream.read()
        if isinstance(raw, str):
            return cls.load(raw, settings, config)
        return cls.load(decode_bytes(raw, settings), settings, config)

    @classmethod
    def from_file(
        cls,
        path: str | PathLike[str],
        settings: IniLoadSettings | None = None,
        config: IniConfig | None = None
    ) -> 'Ini':
        return IniFile(path, settings, config).read()

    # ----- sections, by name or by position -----

    @property
    def sections(self) -> list[Section]:
        """A copy of the section list, in file order."""
        return list(self.__sections)

    def _same(self, a: str, b: str) -> bool:
        if self.settings.case_sensitive:
            return a == b
        return a.casefold() == b.casefold()

    def find(self, name: str) -> Section | None:
        for i in self.__sections:
            if self._same(i.name, name):
                return i
        return None

    def index(self, section: Section | str) -> int:
        target = self.find(section) if isinstance(section, str) else section
        for idx, i in enumerate(self.__sections):
            if i is target:
                return idx
        raise NotFoundError(f'Section {section!r} is not in this INI.')

    def __getitem__(self, key: str | int) -> Section:
        if isinstance(key, int):
            return self.__sections[key]
        if (ret := self.find(key)) is None:
            raise KeyError(key)
        return ret

    def __setitem__(
        self, key: str, value: Section | Mapping[str, Any]
    ) -> None:
        """Replace (in place) or append the section `key`.

        A plain mapping becomes a new section of those values.
        A section already in this document can only be set to its own
        key, use `rename()` to move it elsewhere.
        """
        if isinstance(value, Section):
            if value in self and value is not self.find(key):
                raise DuplicateKeyError(
                    f'Section [{value.name}] is already in this INI, '
                    f'it cannot be stored again as [{key}].')
            section = value
            section.name = key
        elif isinstance(value, Mapping):
            section = self.new_section(key)
            for k, v in value.items():
                section[k] = v
        else:
            raise ArgumentError(f'Cannot use {value!r} as a section.')

        if (old := self.find(key)) is None:
            self.add(section)
            return
        if section is old:
            return
        self._adopt(section)
        self.__sections[self.index(old)] = section

    def __delitem__(self, key: str | int) -> None:
        if isinstance(key, int):
            del self.__sections[key]
            return
        if (section := self.find(key)) is None:
            raise KeyError(key)
        self.__sections.remove(section)

    def __contains__(self, key: object) -> bool:
        if isinstance(key, Section):
            return any(i is key for i in self.__sections)
        return isinstance(key, str) and self.find(key) is not None

    def __iter__(self) -> Iterator[str]:
        return iter([i.name for i in self.__sections])

    def __len__(self) -> int:
        return len(self.__sections)

    def __repr__(self) -> str:
        return f'<Ini: {len(self)} section(s)>'

    def _adopt(self, section: Section) -> None:
        # sections follow their document's rules.
        section.case_sensitive = self.settings.case_sensitive
        section.config = self.config

    def _check_new(self, section: Section) -> None:
        if not isinstance(section, Section):
            raise ArgumentError(f'Expected a Section, got {section!r}.')
        if self.find(section.name) is not None:
            raise DuplicateKeyError(
                f'Section [{section.name}] already exists.')

    def add(
        self, section: Section, before: Section | str | None = None
    ) -> Section:
        """Append `section`, or insert it right above `before`.

        Raises:
            ArgumentError: `section` isn't a Section.
            DuplicateKeyError: a section of that name exists.
            NotFoundError: `before` isn't in this document.
        """
        if not isinstance(section, Section):
            raise ArgumentError(f'Expected a Section, got {section!r}.')
        idx = len(self.__sections) if before is None else self.index(before)
        self._check_new(section)
        self._adopt(section)
        self.__sections.insert(idx, section)
        return section

    def insert(self, index: int, section: Section) -> Section:
        self._check_new(section)
        self._adopt(section)
        self.__sections.insert(index, section)
        return section

    def remove(self, section: Section | str) -> None:
        del self.__sections[self.index(section)]

    def rename(self, old: str, new: str) -> bool:
        """Rename a section.

        Returns:
            `True` if succeed, otherwise `False`.
            May not success if `old` is not found or `new` already exists.
        """
        if (section := self.find(old)) is None:
            return False
        if (other := self.find(new)) is not None and other is not section:
            return False
        section.name = new
        return True

    def setdefault(  # type: ignore[override]
        self, key: str, default: Mapping[str, Any] | None = None
    ) -> Section:
        """Get section `key`, creating it (filled from `default`) if absent."""
        if (ret := self.find(key)) is None:
            self[key] = default or {}
            ret = self[key]
        return ret

    def clear(self) -> None:
        self.__sections.clear()
        self.trailing_items.clear()

    # ----- building items with this document's defaults -----

    def new_section(self, name: str) -> Section:
        """A detached section padded as `self.config` says."""
        ret = Section(name, padding=SectionPadding.from_config(self.config))
        self._adopt(ret)
        return ret

    def new_property(self, name: str, value: Any = None) -> Property:
        return Property(
            name, PropertyValue(value, self.config),
            padding=PropertyPadding.from_config(self.config))

    def new_comment(self, text: str) -> Comment:
        return Comment(
            text, self.config.comment_marker,
            CommentPadding.from_config(self.config))

    # ----- formatting -----

    def format(self, options: IniFormatOptions | None = None) -> None:
        """Reset all padding to `self.config`, and tidy blank lines.

        Changes the document in place. Formatting twice with the same
        options gives the same result as formatting once.
        """
        if options is None:
            options = IniFormatOptions()

        for s, section in enumerate(self.__sections):
            self._format_minor_items(
                section.minor_items, options.remove_successive_blank_lines)
            if options.ensure_blank_line_between_sections and s > 0:
                _ensure_leading_blank_line(section.minor_items)
            section.padding.reset(self.config)

            for p, prop in enumerate(section.properties):
                self._format_minor_items(
                    prop.minor_items, options.remove_successive_blank_lines)
                if options.ensure_blank_line_between_properties and p > 0:
                    _ensure_leading_blank_line(prop.minor_items)
                prop.padding.reset(self.config)

        while self.trailing_items and isinstance(
            self.trailing_items[-1], BlankLine
        ):
            self.trailing_items.pop()
        self._format_minor_items(
            self.trailing_items, options.remove_successive_blank_lines)

    def _format_minor_items(
        self, items: list[MinorIniItem], remove_successive_blank_lines: bool
    ) -> None:
        for i in items:
            i.padding.reset(self.config)
        if not remove_successive_blank_lines:
            return
        # backwards, so deleting doesn't shift what's left to check.
        for idx in range(len(items) - 1, 0, -1):
            if isinstance(items[idx], BlankLine) and isinstance(
                items[idx - 1], BlankLine
            ):
                del items[idx]

    # ----- saving -----

    def lines(self) -> Iterator[str]:
        """Rendered lines in file order (a heredoc value counts as one)."""
        for section in self.__sections:
            for i in section.minor_items:
                yield render(i, self.config)
            yield render(section, self.config)
            for prop in section.properties:
                for i in prop.minor_items:
                    yield render(i, self.config)
                yield render(prop, self.config)
        for i in self.trailing_items:
            yield render(i, self.config)

    def __str__(self) -> str:
        lines = list(self.lines())
        if not lines:
            return ''
        return '\n'.join(lines) + ('\n' if self.final_newline else '')

    def save_to(self, path: str | PathLike[str]) -> None:
        IniFile(path, self.settings, self.config).write(self)

    def save_to_writer(self, writer: TextIOBase) -> None:
        """Write to an opened text stream. The stream is left open."""
        if writer is None:
            raise ArgumentError('Writer must not be None.')
        if getattr(writer, 'closed', False):
            raise ArgumentError('Writer is closed.')
        writer.write(str(self))
        writer.flush()

    def save_to_stream(self, stream: IO[bytes]) -> None:
        """Write `settings.encoding` bytes to an opened binary stream."""
        if stream is None:
            raise ArgumentError('Stream must not be None.')
        if stream.closed or not stream.writable():
            raise ArgumentError('Stream is not writable.')
        stream.write(str(self).encode(self.settings.encoding))
        stream.flush()

    def save(self, target: SaveTarget) -> None:
        """Save to a path, a text stream or a binary stream."""
        match target:
            case str() | PathLike():
                self.save_to(target)
            case TextIOBase():
                self.save_to_writer(target)
            case None:
                raise ArgumentError('Save target must not be None.')
            case _:
                self.save_to_stream(target)

    async def save_to_async(self, target: SaveTarget) -> None:
        """`save()` in a worker thread, so the event loop isn't blocked."""
        await asyncio.to_thread(self.save, target)


def _ensure_leading_blank_line(items: list[MinorIniItem]) -> None:
    if not items or not isinstance(items[0], BlankLine):
        items.insert(0, BlankLine())


class IniFile(FileHandler[Ini]):
    """An INI file on disk."""

    def __init__(
        self,
        filename: str | PathLike[str],
        settings: IniLoadSettings | None = None,
        config: IniConfig | None = None
    ) -> None:
        super().__init__(filename)
        self.settings = settings or IniLoadSettings()
        self.config = config or IniConfig()

    def read(self) -> Ini:
        """Raises:
            NotFoundError: the file doesn't exist.
            FormatError: the content isn't valid INI (or text).
        """
        if not isfile(self._fn):
            raise NotFoundError(f'INI file "{self._fn}" does not exist.')
        with open(self._fn, 'rb') as fp:
            raw = fp.read()
        ini = Ini.load(decode_bytes(raw, self.settings), self.settings, self.config)
        logging.debug(f'INI read from {self._fn}.')
        return ini

    def write(self, instance: Ini) -> None:
        # newline='': lines end with '\n' on every platform, as they were read.
        with open(
            self._fn, 'w', encoding=self.settings.encoding, newline=''
        ) as fp:
            fp.write(str(instance))
        logging.debug(f'INI saved to {self._fn}: {len(instance)} section(s).')

    def __str__(self) -> str:
        return f'INI file: {super().__str__()} ({self.settings.encoding})'
