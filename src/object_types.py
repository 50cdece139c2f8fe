"""
nativekit object model
Value classification, property descriptors, errors and the prototype-linked object
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Callable, Dict, Mapping, Optional

class DescriptorError(TypeError):
    """Base class for property-descriptor errors"""
    def __init__(self, message: str):
        self.message = message
        super().__init__(message)

class InvalidArgumentError(DescriptorError):
    """An object was required but something else was given"""
    pass

class NotExtensibleError(InvalidArgumentError):
    """The object is sealed, frozen or non-extensible"""
    pass

class ConflictingDescriptorError(DescriptorError):
    """A descriptor mixes data and accessor attributes or illegally redefines a property"""
    pass

class UnsupportedFeatureError(ConflictingDescriptorError):
    """Getters/setters were requested but the object has no accessor hooks"""
    pass

class Kind(Enum):
    ARRAY = "array"
    OBJECT = "object"
    FUNCTION = "function"
    PRIMITIVE = "primitive"

# Immutable values; tuples and frozensets count as values, not containers
PRIMITIVE_TYPES = (type(None), bool, int, float, complex, str, bytes, tuple, frozenset)

def classify(value: Any) -> Kind:
    """Classify a value once, at the API boundary"""
    if isinstance(value, PRIMITIVE_TYPES):
        return Kind.PRIMITIVE
    elif isinstance(value, list):
        return Kind.ARRAY
    elif isinstance(value, ProtoObject):
        return Kind.OBJECT
    elif callable(value):
        return Kind.FUNCTION
    else:
        return Kind.OBJECT

def is_object(value: Any) -> bool:
    return classify(value) is not Kind.PRIMITIVE

_DATA_KEYS = ("value", "writable")
_ACCESSOR_KEYS = ("get", "set")

@dataclass
class PropertyDescriptor:
    """
    How a named property behaves.

    A data descriptor carries ``value`` and ``writable``; an accessor descriptor
    carries ``get(obj)`` and/or ``set(obj, value)``. The two shapes never mix.
    """
    value: Any = None
    get: Optional[Callable] = None
    set: Optional[Callable] = None
    writable: bool = False
    enumerable: bool = False
    configurable: bool = False

    @property
    def is_accessor(self) -> bool:
        return self.get is not None or self.set is not None

    def copy(self) -> 'PropertyDescriptor':
        return replace(self)

    def to_dict(self) -> Dict[str, Any]:
        if self.is_accessor:
            return {
                'get': self.get,
                'set': self.set,
                'enumerable': self.enumerable,
                'configurable': self.configurable,
            }
        return {
            'value': self.value,
            'writable': self.writable,
            'enumerable': self.enumerable,
            'configurable': self.configurable,
        }

    @classmethod
    def from_value(cls, descriptor: Any) -> 'PropertyDescriptor':
        """Normalize a mapping (or descriptor) into a validated PropertyDescriptor"""
        if isinstance(descriptor, PropertyDescriptor):
            if descriptor.is_accessor and (descriptor.value is not None or descriptor.writable):
                raise ConflictingDescriptorError(
                    "A property cannot both have accessors and be writable or have a value")
            return descriptor.copy()

        if not isinstance(descriptor, Mapping):
            raise InvalidArgumentError(f"Property description must be a mapping: {descriptor!r}")

        if any(key in descriptor for key in _ACCESSOR_KEYS) and \
                any(key in descriptor for key in _DATA_KEYS):
            raise ConflictingDescriptorError(
                "A property cannot both have accessors and be writable or have a value")

        for key, label in (('get', 'Getter'), ('set', 'Setter')):
            func = descriptor.get(key)
            if func is not None and not callable(func):
                raise InvalidArgumentError(f"{label} must be callable: {func!r}")

        return cls(
            value=descriptor.get('value'),
            get=descriptor.get('get'),
            set=descriptor.get('set'),
            writable=bool(descriptor.get('writable', False)),
            enumerable=bool(descriptor.get('enumerable', False)),
            configurable=bool(descriptor.get('configurable', False)),
        )

def _lookup(target: Any, name: str) -> Any:
    if isinstance(target, dict):
        if name in target:
            return target[name]
        raise AttributeError(name)
    return getattr(target, name)

class ProtoObject:
    """
    An object whose failed attribute lookups continue on its prototype.

    The prototype is either held directly (a native link) or resolved through
    the registry that created the object. Getter/setter tables act as the
    accessor hooks used by ``define_property``.
    """
    __slots__ = ('__dict__', '__weakref__', '_proto', '_linked', '_registry', '_getters', '_setters')

    def __init__(self, proto: Any = None, registry: Any = None):
        object.__setattr__(self, '_proto', proto)
        object.__setattr__(self, '_linked', registry is None)
        object.__setattr__(self, '_registry', registry)
        object.__setattr__(self, '_getters', {})
        object.__setattr__(self, '_setters', {})

    def prototype_of(self) -> Any:
        if object.__getattribute__(self, '_linked'):
            return object.__getattribute__(self, '_proto')
        return object.__getattribute__(self, '_registry').get_prototype_of(self)

    def has_native_link(self) -> bool:
        return object.__getattribute__(self, '_linked')

    # Accessor hooks
    def define_getter(self, name: str, func: Callable):
        object.__getattribute__(self, '_getters')[name] = func
        self.__dict__.pop(name, None)

    def define_setter(self, name: str, func: Callable):
        object.__getattribute__(self, '_setters')[name] = func
        self.__dict__.pop(name, None)

    def lookup_getter(self, name: str) -> Optional[Callable]:
        return object.__getattribute__(self, '_getters').get(name)

    def lookup_setter(self, name: str) -> Optional[Callable]:
        return object.__getattribute__(self, '_setters').get(name)

    def remove_accessor(self, name: str) -> bool:
        getters = object.__getattribute__(self, '_getters')
        setters = object.__getattribute__(self, '_setters')
        found = name in getters or name in setters
        getters.pop(name, None)
        setters.pop(name, None)
        return found

    def accessor_names(self):
        getters = object.__getattribute__(self, '_getters')
        setters = object.__getattribute__(self, '_setters')
        return list(getters) + [name for name in setters if name not in getters]

    def __getattr__(self, name: str) -> Any:
        # Only reached when normal lookup fails
        getter = ProtoObject.lookup_getter(self, name)
        if getter is not None:
            return getter(self)
        if ProtoObject.lookup_setter(self, name) is not None:
            return None
        if name.startswith('__') and name.endswith('__'):
            raise AttributeError(name)

        proto = ProtoObject.prototype_of(self)
        if proto is None:
            raise AttributeError(f"'{type(self).__name__}' object has no attribute '{name}'")
        return _lookup(proto, name)

    def __setattr__(self, name: str, value: Any):
        setter = ProtoObject.lookup_setter(self, name)
        if setter is not None:
            setter(self, value)
        elif ProtoObject.lookup_getter(self, name) is not None:
            raise AttributeError(f"property '{name}' has no setter")
        else:
            self.__dict__[name] = value

    def __delattr__(self, name: str):
        if ProtoObject.remove_accessor(self, name):
            return
        try:
            del self.__dict__[name]
        except KeyError:
            raise AttributeError(name) from None

    def __getitem__(self, name: str) -> Any:
        try:
            return getattr(self, name)
        except AttributeError:
            raise KeyError(name) from None

    def __setitem__(self, name: str, value: Any):
        setattr(self, name, value)

    def __delitem__(self, name: str):
        try:
            delattr(self, name)
        except AttributeError:
            raise KeyError(name) from None

    def __contains__(self, name: str) -> bool:
        try:
            getattr(self, name)
            return True
        except AttributeError:
            return False

    def __repr__(self) -> str:
        return f"ProtoObject({self.__dict__!r})"
