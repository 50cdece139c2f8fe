"""
nativekit array helpers
Set operations, ranges and in-place variants for Python lists
"""

import functools
import random as _random
import re
from typing import Any, Callable, List, Optional, Sequence

from descriptors import get_value
from object_types import is_object
from stdlib import object_functions
from stdlib.function_tools import call_flexible
from stdlib.values import strict_equal, to_number, truthy

def _require_array(arr: Any, position: str = "First"):
    if not isinstance(arr, list):
        raise TypeError(f"{position} argument must be an array")

def _require_function(func: Any):
    if not callable(func):
        raise TypeError(f"{func!r} is not a function")

# Searching

def index_of(arr: List[Any], value: Any, start: int = 0) -> int:
    """First index holding value under strict equality, or -1"""
    _require_array(arr)
    if start < 0:
        start = max(len(arr) + start, 0)
    for i in range(start, len(arr)):
        if strict_equal(arr[i], value):
            return i
    return -1

def last_index_of(arr: List[Any], value: Any, start: Optional[int] = None) -> int:
    """Last index holding value under strict equality, or -1"""
    _require_array(arr)
    if not arr:
        return -1
    if start is None:
        i = len(arr) - 1
    elif start >= 0:
        i = min(start, len(arr) - 1)
    else:
        i = len(arr) + start
    while i >= 0:
        if strict_equal(arr[i], value):
            return i
        i -= 1
    return -1

def contains(arr: List[Any], *values) -> bool:
    """True when every value is present"""
    _require_array(arr)
    return all(index_of(arr, value) != -1 for value in values)

# Static set operations

def intersect(arrays: Sequence[List[Any]]) -> List[Any]:
    """Values of the first array present in every array"""
    arrays = list(arrays)
    if not arrays:
        return []
    return [value for value in arrays[0]
            if all(contains(other, value) for other in arrays)]

def diff(arrays: Sequence[List[Any]]) -> List[Any]:
    """Values appearing exactly once across all arrays"""
    values = flatten(list(arrays), 1)
    return [value for value in values
            if index_of(values, value) == last_index_of(values, value)]

def union(arrays: Sequence[List[Any]]) -> List[Any]:
    """Distinct values from all arrays, in first-seen order"""
    combined: List[Any] = []
    for arr in arrays:
        _require_array(arr, "Each")
        combined.extend(arr)
    return unique(combined)

def range_of(start: float, stop: Optional[float] = None, step: float = 1) -> List[Any]:
    """Inclusive range; a single argument counts from 1"""
    if stop is None:
        start, stop = 1, start
    if step <= 0:
        raise ValueError("Range step must be positive")
    result = []
    value = start
    while value <= stop:
        result.append(value)
        value += step
    return result

# Per-array helpers

def swap(arr: List[Any], index1: int, index2: int) -> List[Any]:
    _require_array(arr)
    arr[index1], arr[index2] = arr[index2], arr[index1]
    return arr

def remove(arr: List[Any], *values) -> List[Any]:
    """Remove every instance of each value, in place"""
    _require_array(arr)
    arr[:] = [item for item in arr
              if not any(strict_equal(item, value) for value in values)]
    return arr

def shuffle_inplace(arr: List[Any]) -> List[Any]:
    _require_array(arr)
    for index in range(len(arr) - 1):
        swap(arr, index, _random.randint(index, len(arr) - 1))
    return arr

def shuffle(arr: List[Any]) -> List[Any]:
    return shuffle_inplace(clone(arr))

def clone(arr: List[Any]) -> List[Any]:
    """Shallow copy"""
    _require_array(arr)
    return arr[:]

def intersect_with(arr: List[Any], *others) -> List[Any]:
    _require_array(arr)
    return intersect([arr] + list(others))

def diff_with(arr: List[Any], *others) -> List[Any]:
    _require_array(arr)
    return diff(list(others) + [arr])

def union_with(arr: List[Any], *others) -> List[Any]:
    _require_array(arr)
    return union([arr] + list(others))

def chunk(arr: List[Any], size: int) -> List[List[Any]]:
    """Split into lists of at most size items"""
    _require_array(arr)
    if size <= 0:
        raise ValueError("Chunk size must be positive")
    return [arr[i:i + size] for i in range(0, len(arr), size)]

def chunk_inplace(arr: List[Any], size: int) -> List[Any]:
    arr[:] = chunk(arr, size)
    return arr

def unique(arr: List[Any]) -> List[Any]:
    _require_array(arr)
    return [value for i, value in enumerate(arr) if index_of(arr, value) == i]

def each(arr: List[Any], callback: Callable) -> Any:
    """Call callback(value, index, arr) until it returns something other than None"""
    _require_array(arr)
    _require_function(callback)
    for i, value in enumerate(arr):
        result = call_flexible(callback, value, i, arr)
        if result is not None:
            return result
    return None

def flatten(arr: List[Any], level: int = -1) -> List[Any]:
    """Flatten nested lists; a negative level flattens completely"""
    _require_array(arr)
    if level == 0:
        return clone(arr)
    result: List[Any] = []
    for value in arr:
        if isinstance(value, list):
            result.extend(flatten(value, level - 1))
        else:
            result.append(value)
    return result

def flatten_inplace(arr: List[Any], level: int = -1) -> List[Any]:
    arr[:] = flatten(arr, level)
    return arr

def sum_of(arr: List[Any]) -> Any:
    _require_array(arr)
    if not arr:
        raise TypeError("Reduce of empty array with no initial value")
    return functools.reduce(lambda a, b: to_number(a) + to_number(b), arr)

def product(arr: List[Any]) -> Any:
    _require_array(arr)
    if not arr:
        raise TypeError("Reduce of empty array with no initial value")
    return functools.reduce(lambda a, b: to_number(a) * to_number(b), arr)

def first(arr: List[Any], n: Optional[int] = None) -> Any:
    """First item, or the first n items when n is given"""
    _require_array(arr)
    if n:
        return arr[:n]
    return arr[0] if arr else None

def last(arr: List[Any], n: Optional[int] = None) -> Any:
    """Last item, or the last n items when n is given"""
    _require_array(arr)
    if n:
        return arr[max(len(arr) - n, 0):]
    return arr[-1] if arr else None

def clean(arr: List[Any]) -> List[Any]:
    """Drop falsy values"""
    _require_array(arr)
    return [value for value in arr if truthy(value)]

def clean_inplace(arr: List[Any]) -> List[Any]:
    return filter_inplace(arr, truthy)

def filter_inplace(arr: List[Any], callback: Callable) -> List[Any]:
    """Keep items for which callback(value, index, arr) is truthy"""
    _require_array(arr)
    _require_function(callback)
    kept = [value for i, value in enumerate(arr)
            if truthy(call_flexible(callback, value, i, arr))]
    arr[:] = kept
    return arr

def map_inplace(arr: List[Any], callback: Callable) -> List[Any]:
    _require_array(arr)
    _require_function(callback)
    for i, value in enumerate(arr):
        arr[i] = call_flexible(callback, value, i, arr)
    return arr

def _invoke_one(value: Any, name: str, args: tuple) -> Any:
    if isinstance(value, dict):
        method = value.get(name)
    else:
        method = getattr(value, name, None)
    _require_function(method)
    return method(*args)

def invoke(arr: List[Any], name: str, *args) -> List[Any]:
    """Call the named method on every item"""
    _require_array(arr)
    return [_invoke_one(value, name, args) for value in arr]

def invoke_inplace(arr: List[Any], name: str, *args) -> List[Any]:
    return map_inplace(arr, lambda value: _invoke_one(value, name, args))

def _pluck_one(value: Any, prop: Any) -> Any:
    if isinstance(prop, list):
        return object_functions.filter(value, prop)
    if is_object(value) or isinstance(value, str):
        return get_value(value, prop)
    return getattr(value, prop, None)

def pluck(arr: List[Any], prop: Any) -> List[Any]:
    """The named property of every item; a list of names keeps those keys"""
    _require_array(arr)
    return [_pluck_one(value, prop) for value in arr]

def pluck_inplace(arr: List[Any], prop: Any) -> List[Any]:
    return map_inplace(arr, lambda value: _pluck_one(value, prop))

def _matcher(pattern: Any) -> Callable[[Any], bool]:
    regex = pattern if isinstance(pattern, re.Pattern) else re.compile(pattern)
    return lambda value: regex.search(str(value)) is not None

def grep(arr: List[Any], pattern: Any) -> List[Any]:
    """Items whose string form matches the regular expression"""
    _require_array(arr)
    matches = _matcher(pattern)
    return [value for value in arr if matches(value)]

def grep_inplace(arr: List[Any], pattern: Any) -> List[Any]:
    return filter_inplace(arr, _matcher(pattern))

def sort_inplace(arr: List[Any], compare: Optional[Callable] = None) -> List[Any]:
    """Sort in place, with an optional compare(a, b) returning a number"""
    _require_array(arr)
    if compare is None:
        arr.sort()
    else:
        arr.sort(key=functools.cmp_to_key(compare))
    return arr

def sort_by(arr: List[Any], key: Any = None, compare: Optional[Callable] = None) -> List[Any]:
    """
    Sorted copy ordered by a derived key.

    ``key`` is a callable taking (value, index, arr) or a property name
    looked up on every item.
    """
    _require_array(arr)
    if key is None:
        return sort_inplace(clone(arr), compare)
    if callable(key):
        derived = [call_flexible(key, value, i, arr) for i, value in enumerate(arr)]
    else:
        derived = pluck(arr, key)

    order = list(range(len(arr)))
    if compare is None:
        order.sort(key=lambda i: derived[i])
    else:
        cmp_key = functools.cmp_to_key(compare)
        order.sort(key=lambda i: cmp_key(derived[i]))
    return [arr[i] for i in order]

def sort_by_inplace(arr: List[Any], key: Any = None, compare: Optional[Callable] = None) -> List[Any]:
    arr[:] = sort_by(arr, key, compare)
    return arr

def fetch(arr: List[Any], *order) -> List[Any]:
    """
    Values at the given indexes, in the order given.

    Indexes come as separate arguments, as one list, or from a callable
    applied to each (value, index, arr).
    """
    _require_array(arr)
    if len(order) == 1 and callable(order[0]):
        func = order[0]
        indexes = [call_flexible(func, value, i, arr) for i, value in enumerate(arr)]
    elif len(order) == 1 and isinstance(order[0], list):
        indexes = order[0]
    else:
        indexes = list(order)
    return [arr[int(i)] for i in indexes]

def reduce_right(arr: List[Any], callback: Callable, *initial) -> Any:
    """Fold from the right with callback(acc, value, index, arr)"""
    _require_array(arr)
    _require_function(callback)
    i = len(arr) - 1
    if initial:
        acc = initial[0]
    else:
        if not arr:
            raise TypeError("Reduce of empty array with no initial value")
        acc = arr[i]
        i -= 1
    while i >= 0:
        acc = call_flexible(callback, acc, arr[i], i, arr)
        i -= 1
    return acc
