"""
nativekit object helpers
Key/value iteration, merging, filtering and cloning on top of the descriptor layer,
so stored writable/enumerable/configurable attributes are honoured
"""

import copy
import functools
import logging
from typing import Any, Callable, Dict, List

import descriptors
from object_types import Kind, ProtoObject, classify
from object_types import is_object as _is_object
from stdlib.function_tools import call_flexible
from stdlib.values import truthy

logger = logging.getLogger('nativekit.object_functions')

def _require_object(obj: Any):
    if not _is_object(obj):
        raise TypeError("First argument must be an object")

def _require_function(func: Any):
    if not callable(func):
        raise TypeError(f"{func!r} is not a function")

def _mergeable(value: Any) -> bool:
    return isinstance(value, (dict, ProtoObject))

def get_own_property_descriptors(obj: Any) -> Dict[str, Any]:
    return descriptors.get_own_property_descriptors(obj)

def id_of(obj: Any) -> int:
    """Stable identity number of an object"""
    _require_object(obj)
    return descriptors.identity_of(obj)

def is_object(*values) -> bool:
    """True when every value is an object rather than a primitive"""
    return all(_is_object(value) for value in values)

def purify(obj: Any) -> Any:
    """Recursively delete dunder-named keys such as '__proto__' from dicts"""
    if isinstance(obj, dict):
        for key in list(obj):
            if isinstance(key, str) and key.startswith('__') and key.endswith('__'):
                if not descriptors.delete_property(obj, key):
                    logger.debug("purify kept non-configurable key %r", key)
            else:
                purify(obj[key])
    elif isinstance(obj, list):
        for item in obj:
            purify(item)
    return obj

def value(obj: Any, key: str, *new_value) -> Any:
    """
    Read a property, or assign it when a value is given.

    Non-writable properties are never assigned; the current value is
    returned instead.
    """
    _require_object(obj)
    current = descriptors.get_descriptor(obj, key)
    if current is not None and not current.is_accessor and not current.writable:
        return current.value
    if not new_value:
        return descriptors.get_value(obj, key)
    return descriptors.set_value(obj, key, new_value[0])

def remove(obj: Any, key: str) -> bool:
    """Delete a property; False when it is not configurable"""
    _require_object(obj)
    return descriptors.delete_property(obj, key)

def alias(obj: Any, prop: str, alias_name: str, complete: bool = False) -> Any:
    """
    Make alias_name another name for prop.

    A plain alias copies the descriptor. A complete alias installs an
    accessor pair that reads and writes prop itself, which needs an object
    with accessor support.
    """
    _require_object(obj)
    desc = descriptors.get_descriptor(obj, prop)
    if desc is None:
        raise KeyError(prop)
    if not complete:
        descriptors.define_property(obj, alias_name, desc)
    else:
        descriptors.define_property(obj, alias_name, {
            'get': lambda _self: descriptors.get_value(obj, prop),
            'set': lambda _self, val: descriptors.set_value(obj, prop, val),
            'enumerable': desc.enumerable,
            'configurable': desc.configurable,
        })
    return obj

def values(obj: Any) -> List[Any]:
    _require_object(obj)
    return [descriptors.get_value(obj, key) for key in descriptors.keys(obj)]

def for_each(obj: Any, callback: Callable) -> None:
    """Call callback(key, value, obj) for every enumerable key"""
    _require_object(obj)
    _require_function(callback)
    for key in descriptors.keys(obj):
        call_flexible(callback, key, descriptors.get_value(obj, key), obj)

def each(obj: Any, callback: Callable) -> Any:
    """Like for_each, but stop at the first result that is not None"""
    _require_object(obj)
    _require_function(callback)
    for key in descriptors.keys(obj):
        result = call_flexible(callback, key, descriptors.get_value(obj, key), obj)
        if result is not None:
            return result
    return None

def map_inplace(obj: Any, callback: Callable) -> Any:
    """Replace every value with callback(key, value); read-only values are kept"""
    _require_object(obj)
    _require_function(callback)
    for key in descriptors.keys(obj):
        value(obj, key, call_flexible(callback, key, descriptors.get_value(obj, key), obj))
    return obj

def map(obj: Any, callback: Callable) -> Any:
    return map_inplace(clone(obj), callback)

def reduce(obj: Any, callback: Callable, start: Any = None) -> Any:
    """Fold with callback(accumulator, key, value)"""
    _require_object(obj)
    _require_function(callback)
    for key in descriptors.keys(obj):
        start = call_flexible(callback, start, key, descriptors.get_value(obj, key))
    return start

def merge(objects: List[Any], level: int = 0) -> Dict[str, Any]:
    """
    Merge objects left to right into a new dict.

    ``level`` is how many nested levels of dicts are merged rather than
    replaced; 0 is a shallow merge and a negative level merges all the
    way down.
    """
    if not isinstance(objects, list):
        raise TypeError("First argument must be an array of objects")
    group: Dict[str, Any] = {}
    for obj in objects:
        _require_object(obj)
        for key in descriptors.keys(obj):
            val = descriptors.get_value(obj, key)
            if key not in group or level == 0 or not _mergeable(group[key]) \
                    or not _mergeable(val):
                group[key] = val
            else:
                group[key] = merge([group[key], val], level - 1)
    return group

def merge_inplace(obj: Any, objects: Any, level: int = 0) -> Any:
    """Merge objects into obj itself"""
    _require_object(obj)
    if not isinstance(objects, list):
        objects = [objects]
    merged = merge([obj] + objects, level)
    for key, val in merged.items():
        value(obj, key, val)
    return obj

def clone(obj: Any, inherit: bool = True) -> Any:
    """
    Shallow copy keeping the prototype and, when inherit is true, every own
    property with its attributes.
    """
    _require_object(obj)
    kind = classify(obj)
    if kind is Kind.ARRAY:
        return list(obj) if inherit else []
    if isinstance(obj, ProtoObject):
        descs = descriptors.get_own_property_descriptors(obj) if inherit else None
        return descriptors.create(descriptors.get_prototype_of(obj), descs)
    if isinstance(obj, dict):
        result: Dict[str, Any] = {}
        if inherit:
            descriptors.define_properties(result, descriptors.get_own_property_descriptors(obj))
        return result
    if not inherit:
        return type(obj).__new__(type(obj))
    return copy.copy(obj)

def filter_inplace(obj: Any, callback: Any) -> Any:
    """
    Delete properties in place.

    ``callback`` is either a list of keys to keep or a callable taking
    (key, value, obj); falsy results drop the key.
    """
    _require_object(obj)
    if isinstance(callback, list):
        keep = [str(key) for key in callback]
        for key in descriptors.keys(obj):
            if key not in keep:
                remove(obj, key)
        return obj

    _require_function(callback)
    for key in descriptors.keys(obj):
        if not truthy(call_flexible(callback, key, descriptors.get_value(obj, key), obj)):
            remove(obj, key)
    return obj

def filter(obj: Any, callback: Any) -> Any:
    return filter_inplace(clone(obj), callback)

def _has_value(key: str, val: Any) -> bool:
    return truthy(val)

def clean(obj: Any) -> Any:
    """Copy without falsy values"""
    return filter(obj, _has_value)

def clean_inplace(obj: Any) -> Any:
    return filter_inplace(obj, _has_value)

def size(obj: Any) -> int:
    """Number of enumerable keys"""
    _require_object(obj)
    return len(descriptors.keys(obj))

def combine(keys: List[Any], vals: List[Any]) -> Dict[Any, Any]:
    """Zip keys with values; missing values become None"""
    return {key: (vals[i] if i < len(vals) else None) for i, key in enumerate(keys)}

_HASH_HELPERS = {
    'size': size,
    'keys': descriptors.keys,
    'each': each,
    'for_each': for_each,
    'map': map,
    'map_inplace': map_inplace,
    'reduce': reduce,
    'filter': filter,
    'filter_inplace': filter_inplace,
    'clean': clean,
    'clean_inplace': clean_inplace,
    'clone': clone,
}

def hash_inplace(obj: Any) -> Any:
    """Attach non-enumerable helper methods bound to obj"""
    _require_object(obj)
    helpers = {}
    for name, helper in _HASH_HELPERS.items():
        helpers[name] = {
            'value': functools.partial(helper, obj),
            'writable': True,
            'enumerable': False,
            'configurable': True,
        }
    helpers['merge'] = {
        'value': lambda *others, level=0: merge([obj] + list(others), level),
        'writable': True, 'enumerable': False, 'configurable': True,
    }
    helpers['merge_inplace'] = {
        'value': lambda *others, level=0: merge_inplace(obj, list(others), level),
        'writable': True, 'enumerable': False, 'configurable': True,
    }
    return descriptors.define_properties(obj, helpers)

def hash(obj: Any) -> Any:
    return hash_inplace(clone(obj))
