# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2024/10/10 01:04:45
# @Author : Kariko Lin

"""Line oriented INI reading & writing.

Both directions work on a plain `dict[str, IniSection]` plus `IniOptions`,
so that `IniStore` stays the only owner of the data.

Recognized input, with default separators:

    key1 = value1       ; pairs before any header go to the default section.

    [sectionA]
    key3 = value3
    ; skipped only when `skip_comments` is on.
    # always skipped.
"""

import logging
from io import StringIO
from warnings import warn

from chardet import detect as guess_codec

from .consts import (
    DEFAULT_SECTION,
    FALLBACK_CODEC,
    MIN_CODEC_CONFIDENCE,
    QUOTE_CHARS
)
from .model import IniOptions, IniSection

logger = logging.getLogger(__name__)


class FormatError(Exception):
    """A non-blank, non-comment, non-header line without key/value separator.
    """
    def __init__(self, line: str) -> None:
        super().__init__(f'{line!r} is NOT a valid key/value pair')
        self.line = line


def check_separators(line_sep: str, kv_sep: str) -> None:
    if not line_sep:
        raise ValueError('line separator must not be empty')
    if not kv_sep:
        raise ValueError('key/value separator must not be empty')


def decode_ini_bytes(raw: bytes, encoding: str | None = None) -> str:
    """把读进来的字节串解码成文本。

    指定了`encoding`就直接用它解（解不了就抛`UnicodeDecodeError`）；
    否则先按 UTF-8 试，失败再让`chardet`猜，置信度不够则退回 latin-1。
    """
    if encoding is not None:
        return raw.decode(encoding)
    try:
        return raw.decode('utf-8-sig')
    except UnicodeDecodeError:
        pass

    codec = guess_codec(raw)
    if codec['encoding'] is None or codec['confidence'] < MIN_CODEC_CONFIDENCE:
        logger.warning(
            'unable to detect encoding reliably (%s, confidence %.2f), '
            'falling back to %s',
            codec['encoding'], codec['confidence'] or 0.0, FALLBACK_CODEC)
        return raw.decode(FALLBACK_CODEC)
    logger.debug('detected encoding %s', codec['encoding'])
    try:
        return raw.decode(codec['encoding'])
    except (UnicodeDecodeError, LookupError):
        return raw.decode(FALLBACK_CODEC)


def _is_comment(line: str, options: IniOptions) -> bool:
    # '#' lines are dropped whatever skip_comments says.
    return (options.skip_comments and line[0] == ';') or line[0] == '#'


def _is_header(line: str, options: IniOptions) -> bool:
    return options.parse_section and line[0] == '[' and line[-1] == ']'


def parse_ini(
    sections: dict[str, IniSection],
    text: str,
    options: IniOptions
) -> None:
    """Feed `text` into `sections`, splitting lines by `options.line_sep`.

    Raises:
        FormatError: on the first line lacking `options.kv_sep`.
            Sections filled before that line are kept.
    """
    check_separators(options.line_sep, options.kv_sep)

    this_sect = IniSection(DEFAULT_SECTION)
    sections[DEFAULT_SECTION] = this_sect
    declared = {DEFAULT_SECTION}
    pairs = 0

    for raw in text.split(options.line_sep):
        line = raw.strip()
        if not line:
            continue
        if _is_comment(line, options):
            continue
        if _is_header(line, options):
            name = line[1:-1]
            if name in declared:
                warn(f'[{name}] declared more than once, '
                     'earlier pairs of it are discarded.')
            declared.add(name)
            this_sect = IniSection(name)
            sections[name] = this_sect
            continue

        pos = line.find(options.kv_sep)
        if pos < 0:
            raise FormatError(line)
        key = line[:pos].strip()
        val = line[pos + len(options.kv_sep):].strip()
        if options.trim_quotes:
            val = val.strip(QUOTE_CHARS)
        this_sect[key] = val
        pairs += 1

    logger.debug('parsed %d pairs in %d sections', pairs, len(declared))


def _section2str(section: IniSection, options: IniOptions) -> str:
    return ''.join(
        f'{k}{options.kv_sep}{v}{options.line_sep}'
        for k, v in section.items())


def write_ini(sections: dict[str, IniSection], options: IniOptions) -> str:
    """Serialize: default section first (no header), then the rest."""
    buf = StringIO()
    if (header := sections.get(DEFAULT_SECTION)) is not None:
        buf.write(_section2str(header, options))
    for name, section in sections.items():
        if name == DEFAULT_SECTION:
            continue
        buf.write(f'[{name}]{options.line_sep}')
        buf.write(_section2str(section, options))
    return buf.getvalue()
