# -*- encoding: utf-8 -*-
# @File   : abstract.py
# @Time   : 2026/10/13 20:50:36
# @Author : Kariko Lin

from abc import ABCMeta, abstractmethod
from os import PathLike, fspath

from .exceptions import ArgumentError


class FileHandler[T](metaclass=ABCMeta):
    """Reads a `T` from, and writes it to, one file on disk."""

    def __init__(self, filename: str | PathLike[str]) -> None:
        if filename is None:
            raise ArgumentError('A file name is required.')
        self._fn = fspath(filename)

    @property
    def filename(self) -> str:
        return self._fn

    @abstractmethod
    def read(self) -> T:
        raise NotImplementedError

    @abstractmethod
    def write(self, instance: T) -> None:
        raise NotImplementedError

    def __str__(self) -> str:
        return self._fn
