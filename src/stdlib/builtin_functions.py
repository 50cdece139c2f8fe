"""
nativekit standard library
Registry of every helper, keyed by dotted name
"""

import logging
from typing import Any, Callable, Dict, Sequence

import descriptors
from stdlib import (
    array_functions,
    date_functions,
    function_tools,
    number_functions,
    object_functions,
    string_functions,
)

logger = logging.getLogger('nativekit.builtins')

def get_builtin_functions() -> Dict[str, Callable]:
    """Return dictionary of all built-in functions"""
    return {
        # Array functions
        'array.intersect': array_functions.intersect,
        'array.diff': array_functions.diff,
        'array.union': array_functions.union,
        'array.range': array_functions.range_of,
        'array.swap': array_functions.swap,
        'array.contains': array_functions.contains,
        'array.remove': array_functions.remove,
        'array.shuffle': array_functions.shuffle,
        'array.shuffle_inplace': array_functions.shuffle_inplace,
        'array.clone': array_functions.clone,
        'array.intersect_with': array_functions.intersect_with,
        'array.diff_with': array_functions.diff_with,
        'array.union_with': array_functions.union_with,
        'array.chunk': array_functions.chunk,
        'array.chunk_inplace': array_functions.chunk_inplace,
        'array.unique': array_functions.unique,
        'array.each': array_functions.each,
        'array.flatten': array_functions.flatten,
        'array.flatten_inplace': array_functions.flatten_inplace,
        'array.sum': array_functions.sum_of,
        'array.product': array_functions.product,
        'array.first': array_functions.first,
        'array.last': array_functions.last,
        'array.clean': array_functions.clean,
        'array.clean_inplace': array_functions.clean_inplace,
        'array.filter_inplace': array_functions.filter_inplace,
        'array.map_inplace': array_functions.map_inplace,
        'array.invoke': array_functions.invoke,
        'array.invoke_inplace': array_functions.invoke_inplace,
        'array.pluck': array_functions.pluck,
        'array.pluck_inplace': array_functions.pluck_inplace,
        'array.grep': array_functions.grep,
        'array.grep_inplace': array_functions.grep_inplace,
        'array.sort_inplace': array_functions.sort_inplace,
        'array.sort_by': array_functions.sort_by,
        'array.sort_by_inplace': array_functions.sort_by_inplace,
        'array.fetch': array_functions.fetch,
        'array.index_of': array_functions.index_of,
        'array.last_index_of': array_functions.last_index_of,
        'array.reduce_right': array_functions.reduce_right,

        # String functions
        'string.is_string': string_functions.is_string,
        'string.uuid': string_functions.uuid,
        'string.chars': string_functions.chars,
        'string.count': string_functions.count,
        'string.insert': string_functions.insert,
        'string.remove': string_functions.remove,
        'string.reverse': string_functions.reverse,
        'string.ucfirst': string_functions.ucfirst,
        'string.swapcase': string_functions.swapcase,
        'string.rpad': string_functions.rpad,
        'string.lpad': string_functions.lpad,
        'string.pad': string_functions.pad,
        'string.soundex': string_functions.soundex,
        'string.distance': string_functions.distance,
        'string.sprintf': string_functions.sprintf,

        # Number functions
        'number.random': number_functions.random,
        'number.chr': number_functions.chr_of,
        'number.odd': number_functions.odd,
        'number.even': number_functions.even,
        'number.gcd': number_functions.gcd,
        'number.lcm': number_functions.lcm,
        'number.ceil': number_functions.ceil,
        'number.floor': number_functions.floor,
        'number.abs': number_functions.abs_of,
        'number.round': number_functions.round_to,
        'number.to_fixed': number_functions.to_fixed,
        'number.radix': number_functions.radix,
        'number.bin': number_functions.bin,
        'number.oct': number_functions.oct,
        'number.dec': number_functions.dec,
        'number.hexl': number_functions.hexl,
        'number.hex': number_functions.hex,
        'number.abbr': number_functions.abbr,

        # Function tools
        'function.is_function': function_tools.is_function,
        'function.compose': function_tools.compose,
        'function.cache': function_tools.cache,
        'function.delay': function_tools.delay,
        'function.once': function_tools.once,
        'function.bind': function_tools.bind,

        # Object functions
        'object.purify': object_functions.purify,
        'object.value': object_functions.value,
        'object.remove': object_functions.remove,
        'object.id': object_functions.id_of,
        'object.alias': object_functions.alias,
        'object.values': object_functions.values,
        'object.for_each': object_functions.for_each,
        'object.is_object': object_functions.is_object,
        'object.each': object_functions.each,
        'object.map': object_functions.map,
        'object.map_inplace': object_functions.map_inplace,
        'object.get_own_property_descriptors': object_functions.get_own_property_descriptors,
        'object.reduce': object_functions.reduce,
        'object.merge': object_functions.merge,
        'object.merge_inplace': object_functions.merge_inplace,
        'object.clone': object_functions.clone,
        'object.filter': object_functions.filter,
        'object.filter_inplace': object_functions.filter_inplace,
        'object.clean': object_functions.clean,
        'object.clean_inplace': object_functions.clean_inplace,
        'object.size': object_functions.size,
        'object.combine': object_functions.combine,
        'object.hash': object_functions.hash,
        'object.hash_inplace': object_functions.hash_inplace,

        # Descriptor operations
        'object.get_descriptor': descriptors.get_descriptor,
        'object.set_descriptor': descriptors.set_descriptor,
        'object.define_property': descriptors.define_property,
        'object.define_properties': descriptors.define_properties,
        'object.delete_property': descriptors.delete_property,
        'object.list_own_property_names': descriptors.list_own_property_names,
        'object.keys': descriptors.keys,
        'object.seal': descriptors.seal,
        'object.is_sealed': descriptors.is_sealed,
        'object.freeze': descriptors.freeze,
        'object.is_frozen': descriptors.is_frozen,
        'object.prevent_extensions': descriptors.prevent_extensions,
        'object.is_extensible': descriptors.is_extensible,
        'object.get_prototype_of': descriptors.get_prototype_of,
        'object.create': descriptors.create,

        # Date functions
        'date.now': date_functions.now,
        'date.parse': date_functions.parse,
    }

def call_builtin(name: str, args: Sequence[Any] = ()) -> Any:
    """Call a registered helper by its dotted name"""
    builtins = get_builtin_functions()
    if name not in builtins:
        raise KeyError(f"Unknown function: {name}")
    logger.debug("Calling %s with %d argument(s)", name, len(args))
    return builtins[name](*args)
