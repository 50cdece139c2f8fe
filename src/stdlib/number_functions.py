"""
nativekit number helpers
Rounding, radix conversion, divisibility and magnitude abbreviation
"""

import functools
import math
import random as _random
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Optional, Union

from stdlib import string_functions

Number = Union[int, float]

_DIGITS = '0123456789abcdefghijklmnopqrstuvwxyz'

def _require_number(value: Any):
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError("First argument must be a number")

def random(start: Number = 0, end: Optional[Number] = None) -> float:
    """Uniform float in [start, end); end defaults to start + 1"""
    start = start or 0
    end = end or start + 1
    return start + (end - start) * _random.random()

def chr_of(value: Number) -> str:
    _require_number(value)
    return chr(int(value))

def even(value: Number) -> bool:
    _require_number(value)
    return value % 2 == 0

def odd(value: Number) -> bool:
    return not even(value)

def _stein(a: int, b: int) -> int:
    if a == 0 or b == 0:
        return a | b
    shift = 0
    while ((a | b) & 1) == 0:
        a >>= 1
        b >>= 1
        shift += 1
    while (a & 1) == 0:
        a >>= 1
    while b != 0:
        while (b & 1) == 0:
            b >>= 1
        if a > b:
            a, b = b, a
        b -= a
    return a << shift

def gcd(*nums: int) -> int:
    """Greatest common divisor (binary GCD)"""
    if not nums:
        raise TypeError("gcd expects at least one number")
    for num in nums:
        _require_number(num)
    return functools.reduce(_stein, (abs(int(num)) for num in nums))

def lcm(*nums: int) -> int:
    if not nums:
        raise TypeError("lcm expects at least one number")

    def pair(a, b):
        if a == 0 or b == 0:
            return 0
        return abs(a * b) // _stein(a, b)
    for num in nums:
        _require_number(num)
    return functools.reduce(pair, (abs(int(num)) for num in nums))

def ceil(value: Number) -> int:
    _require_number(value)
    return math.ceil(value)

def floor(value: Number) -> int:
    _require_number(value)
    return math.floor(value)

def abs_of(value: Number) -> Number:
    _require_number(value)
    return abs(value)

def to_fixed(value: Number, digits: int = 0) -> str:
    """Fixed-point text, halves rounded away from zero on the exact value"""
    _require_number(value)
    if math.isnan(value):
        return 'NaN'
    if math.isinf(value):
        return 'Infinity' if value > 0 else '-Infinity'
    exponent = Decimal(1).scaleb(-int(digits))
    return format(Decimal(value).quantize(exponent, rounding=ROUND_HALF_UP), 'f')

def round_to(value: Number, digits: int = 0) -> Number:
    """
    Round to a number of decimal places.

    Zero digits rounds halves up, negative digits round to tens, hundreds
    and so on: round_to(15, -1) == 20.
    """
    _require_number(value)
    digits = int(digits or 0)
    if math.isnan(value) or math.isinf(value):
        return value
    if digits <= 0:
        factor = 10 ** (-digits)
        return int(math.floor(value / factor + 0.5)) * factor
    return float(to_fixed(value, digits))

def _to_base(value: Number, base: int) -> str:
    if not 2 <= base <= 36:
        raise ValueError(f"Radix must be between 2 and 36: {base}")
    if isinstance(value, float) and not value.is_integer():
        if math.isnan(value) or math.isinf(value) or base == 10:
            return repr(value)
    sign = '-' if value < 0 else ''
    value = abs(value)
    whole = int(value)
    text = ''
    while True:
        whole, digit = divmod(whole, base)
        text = _DIGITS[digit] + text
        if whole == 0:
            break

    fraction = value - int(value)
    if fraction:
        digits = []
        while fraction and len(digits) < 52:
            fraction *= base
            digit = int(fraction)
            digits.append(_DIGITS[digit])
            fraction -= digit
        text += '.' + ''.join(digits)
    return sign + text

def radix(value: Number, base: int = 10, size: int = 0, char: str = '0') -> str:
    """Digits in the given base, left padded to size with char"""
    _require_number(value)
    return string_functions.pad(_to_base(value, base), -int(size or 0), char or '0')

def bin(value: Number, size: int = 0, char: str = '0') -> str:
    return radix(value, 2, size, char)

def oct(value: Number, size: int = 0, char: str = '0') -> str:
    return radix(value, 8, size, char)

def dec(value: Number, size: int = 0, char: str = '0') -> str:
    return radix(value, 10, size, char)

def hexl(value: Number, size: int = 0, char: str = '0') -> str:
    """Lowercase hexadecimal"""
    return radix(value, 16, size, char)

def hex(value: Number, size: int = 0, char: str = '0') -> str:
    """Uppercase hexadecimal"""
    return radix(value, 16, size, char).upper()

_PREFIXES = ['k', 'M', 'G', 'T', 'P', 'E', 'Z', 'Y']

def abbr(value: Number, digits: int = 0, binary: bool = False) -> str:
    """
    Abbreviate with an SI prefix: abbr(1500, 1) == '1.5k'.

    With ``binary`` the prefixes step by 1024 instead of 1000.
    """
    _require_number(value)
    step = 1024 if binary else 1000
    divisors = [step ** (i + 1) for i in range(len(_PREFIXES))]
    if value < divisors[0]:
        return to_fixed(value, digits)
    for i, divisor in enumerate(divisors):
        if value / divisor < 1:
            return to_fixed(value / divisors[i - 1], digits) + _PREFIXES[i - 1]
    return to_fixed(value / divisors[-1], digits) + _PREFIXES[-1]
