# -*- encoding: utf-8 -*-
# @File   : consts.py
# @Time   : 2024/10/10 01:15:56
# @Author : Kariko Lin

from enum import Enum

DEFAULT_SECTION = ''
DEFAULT_LINE_SEP = '\n'
DEFAULT_KV_SEP = '='

QUOTE_CHARS = '\'"'

TRUE_TOKENS = frozenset([
    '1', 't', 'T', 'true', 'TRUE', 'True',
    'on', 'ON', 'On', 'yes', 'YES', 'Yes'
])
FALSE_TOKENS = frozenset([
    '0', 'f', 'F', 'false', 'FALSE', 'False',
    'off', 'OFF', 'Off', 'no', 'NO', 'No'
])

# chardet guesses below this are not trusted.
MIN_CODEC_CONFIDENCE = 0.8
FALLBACK_CODEC = 'latin-1'


class DiffState(int, Enum):
    SECTION_ONLY_IN_A = 0
    KEY_ONLY_IN_A = 1
    VALUES_DIFFER = 2
    SECTION_ONLY_IN_B = 3
    KEY_ONLY_IN_B = 4
