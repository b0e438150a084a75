# -*- encoding: utf-8 -*-
# @File   : store.py
# @Time   : 2024/10/12 22:41:08
# @Author : Kariko Lin

"""The INI document: sections, options, typed accessors."""

import logging
import math
import re
from dataclasses import replace
from typing import IO, Iterator

from .consts import (
    DEFAULT_KV_SEP,
    DEFAULT_LINE_SEP,
    DEFAULT_SECTION,
    FALSE_TOKENS,
    TRUE_TOKENS
)
from .model import IniOptions, IniSection
from .parser import (
    check_separators,
    decode_ini_bytes,
    parse_ini,
    write_ini
)

logger = logging.getLogger(__name__)

_INT_PATTERN = re.compile(r'[+-]?[0-9]+')
_HEX_FLOAT_PATTERN = re.compile(
    r'[+-]?0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)[pP][+-]?[0-9]+')

# same range as a 64-bit signed integer.
_INT_MIN, _INT_MAX = -(1 << 63), (1 << 63) - 1


class IniStore:
    """INI 文件表示，形如：

        ```ini
        key = val  ; 使用 self.header 访问不属于任何小节的键值对。

        [section]
        key233 = val666
        ```

    空串`""`即默认小节。一经解析，默认小节必然存在（可能为空）；
    小节一旦创建，只有`reset()`才会把它删掉。

    取值方法都返回`(value, found)`二元组，和字典查找的语义一致；
    类型转换失败同样视为找不到，而不是抛异常。

    Not safe for concurrent mutation.
    """

    def __init__(self, options: IniOptions | None = None) -> None:
        self.__sections: dict[str, IniSection] = {}
        # own copy, the caller's object stays untouched.
        self.__options = (
            replace(options) if options is not None else IniOptions())

    @property
    def options(self) -> IniOptions:
        return self.__options

    def set_parse_section(self, parse_section: bool) -> None:
        self.__options.parse_section = parse_section

    def set_skip_comments(self, skip_comments: bool) -> None:
        self.__options.skip_comments = skip_comments

    def set_trim_quotes(self, trim_quotes: bool) -> None:
        self.__options.trim_quotes = trim_quotes

    # parsing

    def parse(
        self,
        data: bytes | str,
        line_sep: str = DEFAULT_LINE_SEP,
        kv_sep: str = DEFAULT_KV_SEP,
        encoding: str | None = None
    ) -> None:
        """Parse `data` into this store.

        The separators given here are kept for later `write()` calls.
        Bytes are decoded with `encoding`, or detected when it is `None`
        (see `parser.decode_ini_bytes`).

        Raises:
            FormatError: on a line without `kv_sep`. Whatever was parsed
                before that line stays in the store.
            ValueError: on empty separators.
        """
        if isinstance(data, (bytes, bytearray)):
            data = decode_ini_bytes(bytes(data), encoding)
        check_separators(line_sep, kv_sep)
        self.__options.line_sep = line_sep
        self.__options.kv_sep = kv_sep
        parse_ini(self.__sections, data, self.__options)

    def parse_stream(
        self,
        reader: IO[bytes] | IO[str],
        line_sep: str = DEFAULT_LINE_SEP,
        kv_sep: str = DEFAULT_KV_SEP,
        encoding: str | None = None
    ) -> None:
        """Read `reader` to its end, then `parse()` it."""
        self.parse(reader.read(), line_sep, kv_sep, encoding)

    def parse_file(self, filename: str, encoding: str | None = None) -> None:
        """读取`filename`指定的文件并解析。

        注：会强制打开小节解析与`;`注释跳过，并使用默认分隔符。
        `encoding`为`None`时自动探测编码，见`parser.decode_ini_bytes`。
        """
        with open(filename, 'rb') as fp:
            raw = fp.read()
        text = decode_ini_bytes(raw, encoding)
        self.__options.parse_section = True
        self.__options.skip_comments = True
        logger.debug('parsing %s (%d bytes)', filename, len(raw))
        self.parse(text, DEFAULT_LINE_SEP, DEFAULT_KV_SEP)

    def reset(self) -> None:
        """Drop every section. Options are kept."""
        self.__sections = {}

    # writing

    def dumps(self) -> str:
        return write_ini(self.__sections, self.__options)

    def write(self, fp: IO[str]) -> None:
        """Write the whole document into a text stream."""
        fp.write(self.dumps())

    # section level access

    def __contains__(self, section: object) -> bool:
        return section in self.__sections

    def __len__(self) -> int:
        return len(self.__sections)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self.__sections))

    def __repr__(self) -> str:
        return 'IniStore { .sections = %d }' % len(self.__sections)

    def sections(self) -> list[str]:
        return list(self.__sections)

    @property
    def header(self) -> dict[str, str]:
        """默认小节（位于文件头部、不属于任何小节的键值对）的副本。"""
        return self.get_section_map(DEFAULT_SECTION)[0]

    def get_section_map(self, section: str) -> tuple[dict[str, str], bool]:
        """A copy of `section`'s pairs, and whether the section exists."""
        if (sect := self.__sections.get(section)) is None:
            return {}, False
        return sect.to_dict(), True

    def get_all(self) -> dict[str, dict[str, str]]:
        """A deep copy of all sections."""
        return {k: v.to_dict() for k, v in self.__sections.items()}

    def _section(self, section: str) -> IniSection | None:
        """for the differ. Read only, don't keep it."""
        return self.__sections.get(section)

    # getters

    def get(self, key: str) -> tuple[str, bool]:
        return self.section_get(DEFAULT_SECTION, key)

    def get_int(self, key: str) -> tuple[int, bool]:
        return self.section_get_int(DEFAULT_SECTION, key)

    def get_float(self, key: str) -> tuple[float, bool]:
        return self.section_get_float(DEFAULT_SECTION, key)

    def get_bool(self, key: str) -> tuple[bool, bool]:
        """`1 t T true TRUE True on ON On yes YES Yes` are true,
        `0 f F false FALSE False off OFF Off no NO No` are false.
        Anything else counts as not found."""
        return self.section_get_bool(DEFAULT_SECTION, key)

    def section_get(self, section: str, key: str) -> tuple[str, bool]:
        sect = self.__sections.get(section)
        if sect is None or key not in sect:
            return '', False
        return sect[key], True

    def section_get_int(self, section: str, key: str) -> tuple[int, bool]:
        val, ok = self.section_get(section, key)
        if ok and _INT_PATTERN.fullmatch(val):
            if _INT_MIN <= (ret := int(val)) <= _INT_MAX:
                return ret, True
        return 0, False

    def section_get_float(self, section: str, key: str) -> tuple[float, bool]:
        val, ok = self.section_get(section, key)
        # float() is laxer than we'd like about these.
        if not ok or val != val.strip() or '_' in val:
            return 0.0, False
        try:
            ret = (float.fromhex(val) if _HEX_FLOAT_PATTERN.fullmatch(val)
                   else float(val))
        except (ValueError, OverflowError):
            return 0.0, False
        # out of range, e.g. "1e999"
        if math.isinf(ret) and 'inf' not in val.lower():
            return 0.0, False
        return ret, True

    def section_get_bool(self, section: str, key: str) -> tuple[bool, bool]:
        val, ok = self.section_get(section, key)
        if ok:
            if val in TRUE_TOKENS:
                return True, True
            if val in FALSE_TOKENS:
                return False, True
        return False, False

    # setters

    def set(self, key: str, value: str) -> None:
        self.section_set(DEFAULT_SECTION, key, value)

    def set_int(self, key: str, value: int) -> None:
        self.section_set_int(DEFAULT_SECTION, key, value)

    def set_float(self, key: str, value: float) -> None:
        self.section_set_float(DEFAULT_SECTION, key, value)

    def set_bool(self, key: str, value: bool) -> None:
        self.section_set_bool(DEFAULT_SECTION, key, value)

    def section_set(self, section: str, key: str, value: str) -> None:
        """Store the triple, creating the section if it wasn't present."""
        if section not in self.__sections:
            self.__sections[section] = IniSection(section)
        self.__sections[section][key] = value

    def section_set_int(self, section: str, key: str, value: int) -> None:
        self.section_set(section, key, '%d' % value)

    def section_set_float(
        self, section: str, key: str, value: float
    ) -> None:
        self.section_set(section, key, f'{value:.8f}')

    def section_set_bool(self, section: str, key: str, value: bool) -> None:
        self.section_set(section, key, 'true' if value else 'false')

    def delete(self, section: str, key: str) -> None:
        """Remove `key` from `section`. The section itself stays."""
        if (sect := self.__sections.get(section)) is not None:
            sect.pop(key, None)
