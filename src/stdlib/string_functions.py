"""
nativekit string helpers
Padding, phonetic and edit-distance helpers, UUIDs and sprintf-style formatting
"""

import math
import random as _random
import re
from typing import Any, List, Union

from stdlib import number_functions
from stdlib.values import to_number

def _require_string(s: Any):
    if not isinstance(s, str):
        raise TypeError("First argument must be a string")

def is_string(value: Any) -> bool:
    return isinstance(value, str)

def uuid() -> str:
    """Random version 4 UUID in uppercase hex"""
    digits = '0123456789ABCDEF'
    chars = []
    for i in range(36):
        if i in (8, 13, 18, 23):
            chars.append('-')
        elif i == 14:
            chars.append('4')
        elif i == 19:
            chars.append(digits[(_random.randrange(16) & 0x3) | 0x8])
        else:
            chars.append(digits[_random.randrange(16)])
    return ''.join(chars)

def chars(s: str) -> List[str]:
    _require_string(s)
    return list(s)

def _compile(pattern: Union[str, re.Pattern], flags: str = '') -> re.Pattern:
    if isinstance(pattern, re.Pattern):
        return pattern
    return re.compile(pattern, re.IGNORECASE if 'i' in flags else 0)

def count(s: str, substr: Union[str, re.Pattern], flags: str = "gi") -> int:
    """
    Count matches of a regular expression.

    ``flags`` follows regex literal flags: ``i`` ignores case and without
    ``g`` at most one match is counted.
    """
    _require_string(s)
    regex = _compile(substr, flags)
    found = len(regex.findall(s))
    return found if 'g' in flags else min(found, 1)

def insert(s: str, substr: str, pos: int = 0) -> str:
    _require_string(s)
    return s[:pos] + substr + s[pos:]

def remove(s: str, substr: Union[str, re.Pattern]) -> str:
    """Remove the first occurrence of substr, or every match of a compiled pattern"""
    _require_string(s)
    if isinstance(substr, re.Pattern):
        return substr.sub('', s)
    return s.replace(substr, '', 1)

def reverse(s: str) -> str:
    _require_string(s)
    return s[::-1]

def ucfirst(s: str) -> str:
    _require_string(s)
    return s[:1].upper() + s[1:]

def swapcase(s: str) -> str:
    """Uppercase a-z, lowercase everything else"""
    _require_string(s)
    return ''.join(c.upper() if 'a' <= c <= 'z' else c.lower() for c in s)

def rpad(s: str, length: int, fill: str = ' ') -> str:
    """Append repetitions of fill up to length"""
    _require_string(s)
    length = int(length)
    if length < len(s):
        return s
    fill = fill or ' '
    result = s
    while len(result) < length:
        result += fill
    return result[:length]

def lpad(s: str, length: int, fill: str = ' ') -> str:
    """Prepend repetitions of the reversed fill up to length"""
    _require_string(s)
    length = int(length)
    if length < len(s):
        return s
    fill = (fill or ' ')[::-1]
    result = s
    while len(result) < length:
        result = fill + result
    return result[len(result) - length:]

def pad(s: str, length: int, fill: str = ' ') -> str:
    """Right pad for a positive length, left pad for a negative one"""
    length = int(length)
    if length > 0:
        return rpad(s, length, fill)
    return lpad(s, abs(length), fill)

_SOUNDEX_RULES = [
    (r'DG', 'G'),
    (r'GH', 'H'),
    (r'GN|KN', 'N'),
    (r'PH', 'F'),
    (r'MP([STZ])', r'M\1'),
    (r'^PS', 'S'),
    (r'^PF', 'F'),
    (r'MB', 'M'),
    (r'TCH', 'CH'),
    (r'[AEIOUHWY]', '0'),
    (r'[BFPV]', '1'),
    (r'[CGJKQSXZ]', '2'),
    (r'[DT]', '3'),
    (r'L', '4'),
    (r'[MN]', '5'),
    (r'R', '6'),
    (r'(\w)\1+', r'\1'),
    (r'0', ''),
]

def soundex(s: str) -> str:
    """Four character phonetic code: first letter plus three digits"""
    _require_string(s)
    tail = re.sub(r'[^A-Z]', '', s[1:].upper())
    for pattern, replacement in _SOUNDEX_RULES:
        tail = re.sub(pattern, replacement, tail)
    return s[:1].upper() + rpad(tail[:3], 3, '0')

def distance(s: str, other: str) -> int:
    """Levenshtein edit distance"""
    _require_string(s)
    _require_string(other)
    if not s or not other:
        return max(len(s), len(other))
    previous = list(range(len(other) + 1))
    for i, a in enumerate(s, 1):
        current = [i]
        for j, b in enumerate(other, 1):
            current.append(min(previous[j] + 1,
                               current[j - 1] + 1,
                               previous[j - 1] + (a != b)))
        previous = current
    return previous[-1]

_FORMAT = re.compile(r"%%|%(?:(\d+)[$#])?([+-])?('.|0| )?(\d*)(?:\.(\d+))?([bcdfosuxX])")

def _justify(text: str, align: str, width: str, fill: str, numeric: bool = False) -> str:
    if not width:
        return text
    size = int(width)
    if align == '-':
        return rpad(text, size, fill)
    if numeric and fill == '0' and text[:1] in ('+', '-'):
        # zeros go between the sign and the digits
        return text[0] + lpad(text[1:], size - 1, fill)
    return lpad(text, size, fill)

def _signed(text: str, align: str) -> str:
    if align == '+' and not text.startswith('-'):
        return '+' + text
    return text

def sprintf(fmt: str, *args) -> str:
    """
    printf-style formatting.

    Conversions: ``%b %c %d %f %o %s %u %x %X`` and ``%%``. A conversion may
    carry a 1-based argument position (``%2$s``), a ``+`` (force sign) or
    ``-`` (left justify) flag, a padding character (``0``, space or ``'x``
    for any x), a width and a precision.
    """
    _require_string(fmt)
    state = {'index': 0}

    def convert(match):
        if match.group(0) == '%%':
            return '%'
        position, align, padding, width, precision, kind = match.groups()
        align = align or ''
        fill = (padding or '')[-1:] or ' '
        if position and int(position):
            slot = int(position) - 1
        else:
            slot = state['index']
        state['index'] += 1
        if slot >= len(args):
            raise TypeError("Not enough arguments for format string")
        value = args[slot]

        if kind == 's':
            text = str(value)
            if precision:
                text = text[:int(precision)]
            return _justify(text, align, width, fill)

        number = to_number(value)
        if isinstance(number, float) and math.isnan(number):
            return _justify('NaN', align, width, fill)
        if kind == 'c':
            # char codes wrap to 16 bits
            code = int(number) % 0x10000 if math.isfinite(number) else 0
            return _justify(chr(code), align, width, fill)
        if kind == 'f':
            digits = int(precision) if precision else 6
            text = number_functions.to_fixed(number, digits)
        elif kind == 'u':
            text = number_functions.dec(int(number) & 0xFFFFFFFF)
        else:
            base = {'b': 2, 'o': 8, 'd': 10, 'x': 16, 'X': 16}[kind]
            text = number_functions.radix(int(number), base)
            if kind == 'X':
                text = text.upper()
        return _justify(_signed(text, align), align, width, fill, numeric=True)

    return _FORMAT.sub(convert, fmt)
