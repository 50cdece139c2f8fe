"""
nativekit value semantics
Strict equality, truthiness and number coercion shared by the helper modules
"""

import math
from typing import Any, Union

from object_types import PRIMITIVE_TYPES

def strict_equal(a: Any, b: Any) -> bool:
    """
    Strict equality.

    NaN never equals anything, ints and floats compare by value, bools and
    strings never equal numbers, other immutable values compare by value
    within their own type and everything else compares by identity.
    """
    if isinstance(a, float) and math.isnan(a):
        return False
    if isinstance(b, float) and math.isnan(b):
        return False

    if type(a) in (int, float) and type(b) in (int, float):
        return a == b
    if type(a) is not type(b):
        return False
    if isinstance(a, PRIMITIVE_TYPES):
        return a == b
    return a is b

def truthy(value: Any) -> bool:
    """Empty lists and dicts are truthy; None, False, 0, NaN and '' are not"""
    if value is None or value is False:
        return False
    if isinstance(value, float) and math.isnan(value):
        return False
    if isinstance(value, (int, float)) and value == 0:
        return False
    if isinstance(value, str) and value == '':
        return False
    return True

def to_number(value: Any) -> Union[int, float]:
    """Coerce to a number; anything unparseable becomes NaN"""
    if value is None:
        return 0
    if isinstance(value, bool):
        return 1 if value else 0
    if isinstance(value, (int, float)):
        return value
    if isinstance(value, str):
        text = value.strip()
        if text == '':
            return 0
        try:
            if '.' in text or 'e' in text.lower() or 'inf' in text.lower():
                return float(text)
            return int(text)
        except ValueError:
            return float('nan')
    return float('nan')
