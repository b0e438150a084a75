# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2024/10/10 00:57:10
# @Author : Kariko Lin

"""
Basically INI Structure: plain sections of `str: str` pairs.

Parsing and writing live in `ini.parser`, the owning document in `ini.store`.
"""

from collections.abc import MutableMapping
from dataclasses import dataclass
from typing import Iterator

from .consts import DEFAULT_KV_SEP, DEFAULT_LINE_SEP


@dataclass(kw_only=True)
class IniOptions:
    """解析与写出时使用的配置。每个`IniStore`实例各持一份，互不影响。"""
    line_sep: str = DEFAULT_LINE_SEP
    kv_sep: str = DEFAULT_KV_SEP
    parse_section: bool = False
    skip_comments: bool = False
    trim_quotes: bool = False


class IniSection(MutableMapping[str, str]):
    """INI 小节字典。

    只维护该小节自身的键值对，重复的键以后写入者为准。
    所有键值对均*应该*是`str: str`类型（哪怕值为空串），
    但由于 Python 的动态类型性质，运行时并不会对此作出限制。
    """

    def __init__(self, section_name: str, /) -> None:
        self._name = section_name
        self._data: dict[str, str] = {}

    def __getitem__(self, key: str) -> str:
        return self._data[key]

    def __setitem__(self, key: str, value: str) -> None:
        self._data[key] = value

    def __delitem__(self, key: str) -> None:
        del self._data[key]

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __str__(self) -> str:
        return f"[{self._name}]"

    def __repr__(self) -> str:
        return '[%s] { .cnt = %d }' % (self._name, len(self._data))

    def to_dict(self) -> dict[str, str]:
        """A detached copy of the pairs."""
        return self._data.copy()
