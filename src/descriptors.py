"""
nativekit descriptor layer
Identity-keyed side tables emulating per-property attributes, sealed/frozen/extensible
flags and prototype links for arbitrary Python objects
"""

import logging
import math
import re
import threading
import weakref
from typing import Any, Dict, List, Mapping, Optional, Set

from host_config import HostConfig, get_config
from object_types import (
    ConflictingDescriptorError,
    InvalidArgumentError,
    Kind,
    NotExtensibleError,
    PropertyDescriptor,
    ProtoObject,
    UnsupportedFeatureError,
    classify,
)

logger = logging.getLogger('nativekit.descriptors')

MATH_CONSTANTS = ['pi', 'e', 'tau', 'inf', 'nan']
MATH_FUNCTIONS = [
    'cos', 'pow', 'log', 'tan', 'sqrt', 'ceil', 'asin', 'fabs', 'exp', 'atan2',
    'floor', 'acos', 'atan', 'sin', 'hypot', 'trunc',
]
REGEX_ATTRIBUTES = ['pattern', 'flags', 'groups', 'groupindex']
FUNCTION_ATTRIBUTES = ['__name__', '__qualname__', '__doc__', '__module__', '__defaults__']

_PATTERN_TYPE = type(re.compile(''))

def _builtin_names(obj: Any, kind: Kind) -> List[str]:
    """Well-known names for the object's classification"""
    names: List[str] = []
    if obj is math:
        names.extend(MATH_CONSTANTS + MATH_FUNCTIONS)
    if isinstance(obj, _PATTERN_TYPE):
        names.extend(REGEX_ATTRIBUTES)
    elif kind is Kind.FUNCTION:
        names.extend(FUNCTION_ATTRIBUTES)
    elif kind is Kind.ARRAY or isinstance(obj, str):
        names.append('length')
    return [name for name in names if name == 'length' or hasattr(obj, name)]

def _builtin_descriptor(obj: Any, kind: Kind, name: str) -> Optional[PropertyDescriptor]:
    if name not in _builtin_names(obj, kind):
        return None
    if obj is math and name in MATH_CONSTANTS:
        return PropertyDescriptor()
    if obj is math and name in MATH_FUNCTIONS:
        return PropertyDescriptor(writable=True, configurable=True)
    if name in REGEX_ATTRIBUTES:
        return PropertyDescriptor()
    if name in FUNCTION_ATTRIBUTES:
        return PropertyDescriptor(writable=True)
    # length of a list or string
    return PropertyDescriptor(writable=kind is Kind.ARRAY)

def _key(name: Any) -> str:
    """Property names are strings; integers are accepted as indexes"""
    if isinstance(name, str):
        return name
    if isinstance(name, int) and not isinstance(name, bool):
        return str(name)
    raise InvalidArgumentError(f"Property name must be a string: {name!r}")

def _index(obj: Any, name: str) -> Optional[int]:
    if name.isdigit():
        idx = int(name)
        if idx < len(obj):
            return idx
    return None

def _slot_names(obj: Any) -> List[str]:
    """Names declared in __slots__ anywhere along the class hierarchy"""
    names: List[str] = []
    for cls in type(obj).__mro__:
        slots = cls.__dict__.get('__slots__', ())
        if isinstance(slots, str):
            slots = (slots,)
        for name in slots:
            if name not in ('__dict__', '__weakref__') and name not in names:
                names.append(name)
    return names

def _has_dict(obj: Any) -> bool:
    try:
        vars(obj)
    except TypeError:
        return False
    return True

def _slot_is_set(obj: Any, name: str) -> bool:
    try:
        getattr(obj, name)
    except AttributeError:
        return False
    return True

def _valid_length(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    if isinstance(value, float) and not value.is_integer():
        return False
    return value >= 0

def _accepts_binding(obj: Any, kind: Kind, name: str) -> bool:
    """Whether a data value can be stored under name"""
    if kind is Kind.ARRAY or isinstance(obj, (dict, ProtoObject)):
        return True
    attr = getattr(type(obj), name, None)
    if isinstance(attr, property):
        return attr.fset is not None
    if _has_dict(obj):
        return True
    return name in _slot_names(obj)

def _check_bindable(obj: Any, kind: Kind, name: str, value: Any):
    """Reject data values that _write could not store"""
    if kind is Kind.ARRAY and name == 'length' and not _valid_length(value):
        raise InvalidArgumentError(f"Invalid array length: {value!r}")
    if not _accepts_binding(obj, kind, name):
        raise InvalidArgumentError(f"Cannot bind '{name}' on {type(obj).__name__}")

def _own_bindings(obj: Any, kind: Kind) -> List[str]:
    if kind is Kind.ARRAY or isinstance(obj, str):
        return [str(i) for i in range(len(obj))]
    if isinstance(obj, dict):
        return [key for key in obj if isinstance(key, str)]
    if isinstance(obj, ProtoObject):
        return list(vars(obj)) + ProtoObject.accessor_names(obj)
    names = list(vars(obj)) if _has_dict(obj) else []
    names.extend(name for name in _slot_names(obj)
                 if name not in names and _slot_is_set(obj, name))
    return names

def _has_binding(obj: Any, kind: Kind, name: str) -> bool:
    if kind is Kind.ARRAY or isinstance(obj, str):
        return _index(obj, name) is not None
    if isinstance(obj, dict):
        return name in obj
    if isinstance(obj, ProtoObject):
        return name in vars(obj) or ProtoObject.lookup_getter(obj, name) is not None \
            or ProtoObject.lookup_setter(obj, name) is not None
    if _has_dict(obj) and name in vars(obj):
        return True
    return name in _slot_names(obj) and _slot_is_set(obj, name)

def _read(obj: Any, kind: Kind, name: str) -> Any:
    if kind is Kind.ARRAY or isinstance(obj, str):
        if name == 'length':
            return len(obj)
        idx = _index(obj, name)
        return obj[idx] if idx is not None else None
    if isinstance(obj, dict):
        return obj.get(name)
    if isinstance(obj, ProtoObject):
        # own bindings first, so names shadowing ProtoObject methods read back as stored
        getter = ProtoObject.lookup_getter(obj, name)
        if getter is not None:
            return getter(obj)
        return vars(obj).get(name)
    return getattr(obj, name, None)

def _write(obj: Any, kind: Kind, name: str, value: Any):
    if kind is Kind.ARRAY:
        if name == 'length':
            if not _valid_length(value):
                raise InvalidArgumentError(f"Invalid array length: {value!r}")
            size = int(value)
            del obj[size:]
            obj.extend([None] * (size - len(obj)))
        elif name.isdigit():
            idx = int(name)
            if idx >= len(obj):
                obj.extend([None] * (idx + 1 - len(obj)))
            obj[idx] = value
        else:
            raise InvalidArgumentError(f"Array property must be an index or 'length': {name!r}")
    elif isinstance(obj, dict):
        obj[name] = value
    else:
        try:
            setattr(obj, name, value)
        except (AttributeError, TypeError) as e:
            raise InvalidArgumentError(
                f"Cannot bind '{name}' on {type(obj).__name__}: {e}") from e

def _unbind(obj: Any, kind: Kind, name: str):
    if kind is Kind.ARRAY:
        # Leaves a hole, the list keeps its length
        idx = _index(obj, name)
        if idx is not None:
            obj[idx] = None
    elif isinstance(obj, dict):
        obj.pop(name, None)
    else:
        try:
            delattr(obj, name)
        except AttributeError:
            pass

class IdentityRegistry:
    """Assigns stable integer identities to object references"""

    def __init__(self, weak: bool = False, on_release=None):
        self.weak = weak
        self.on_release = on_release
        self.lock = threading.RLock()
        self._next = 0
        self._by_address: Dict[int, int] = {}
        self._entries: Dict[int, Any] = {}

    def _referent(self, ident: int) -> Any:
        is_weak, ref = self._entries[ident]
        return ref() if is_weak else ref

    def peek(self, obj: Any) -> Optional[int]:
        """Identity of obj if one was already assigned"""
        with self.lock:
            ident = self._by_address.get(id(obj))
            if ident is not None and ident in self._entries and self._referent(ident) is obj:
                return ident
            return None

    def identity_of(self, obj: Any) -> int:
        with self.lock:
            ident = self.peek(obj)
            if ident is not None:
                return ident

            ident = self._next
            self._next += 1
            self._entries[ident] = self._make_entry(obj, ident)
            self._by_address[id(obj)] = ident
            return ident

    def _make_entry(self, obj: Any, ident: int):
        if self.weak:
            address = id(obj)
            try:
                return (True, weakref.ref(obj, lambda _ref: self._release(ident, address)))
            except TypeError:
                # dicts, lists and friends are not weak-referenceable
                pass
        return (False, obj)

    def _release(self, ident: int, address: int):
        with self.lock:
            self._entries.pop(ident, None)
            if self._by_address.get(address) == ident:
                del self._by_address[address]
        logger.debug("Released identity %d", ident)
        if self.on_release is not None:
            self.on_release(ident)

    def __len__(self) -> int:
        return len(self._entries)

class ObjectRegistry:
    """
    Descriptor, flag and prototype side tables plus the operations that use them.

    Every store is keyed by the identity assigned by the registry's
    IdentityRegistry. One re-entrant lock guards all of them.
    """

    def __init__(self, config: Optional[HostConfig] = None):
        self.config = config if config is not None else get_config()
        self.lock = threading.RLock()
        self.identities = IdentityRegistry(weak=self.config.weak_identities,
                                           on_release=self._forget)
        self.descriptors: Dict[int, Dict[str, PropertyDescriptor]] = {}
        self.sealed: Set[int] = set()
        self.frozen: Set[int] = set()
        self.non_extensible: Set[int] = set()
        self.prototypes: Dict[int, Any] = {}

    def _forget(self, ident: int):
        with self.lock:
            self.descriptors.pop(ident, None)
            self.sealed.discard(ident)
            self.frozen.discard(ident)
            self.non_extensible.discard(ident)
            self.prototypes.pop(ident, None)

    # Identity
    def identity_of(self, obj: Any) -> int:
        with self.lock:
            return self.identities.identity_of(obj)

    # Validation helpers
    def _require_object(self, obj: Any, operation: str) -> Kind:
        kind = classify(obj)
        if kind is Kind.PRIMITIVE:
            logger.debug("%s called on non-object %r", operation, obj)
            raise InvalidArgumentError(f"{operation} called on non-object: {obj!r}")
        return kind

    def _require_inspectable(self, obj: Any, operation: str) -> Kind:
        # Strings may be inspected but never modified
        if isinstance(obj, str):
            return Kind.PRIMITIVE
        return self._require_object(obj, operation)

    def supports_accessors(self, obj: Any) -> bool:
        return isinstance(obj, ProtoObject) and self.config.native_accessors

    # Descriptor store
    def _stored(self, obj: Any, name: str) -> Optional[PropertyDescriptor]:
        ident = self.identities.peek(obj)
        if ident is None:
            return None
        return self.descriptors.get(ident, {}).get(name)

    def _has_own(self, obj: Any, kind: Kind, name: str) -> bool:
        if name in _builtin_names(obj, kind):
            return True
        return _has_binding(obj, kind, name)

    def _current_descriptor(self, obj: Any, kind: Kind, name: str) -> Optional[PropertyDescriptor]:
        if not self._has_own(obj, kind, name):
            return None

        builtin = _builtin_descriptor(obj, kind, name)
        stored = self._stored(obj, name)
        if stored is not None:
            descriptor = stored.copy()
        elif builtin is not None:
            descriptor = builtin
        elif isinstance(obj, str):
            descriptor = PropertyDescriptor(enumerable=True)
        else:
            dunder = name.startswith('__') and name.endswith('__')
            descriptor = PropertyDescriptor(writable=True, enumerable=not dunder, configurable=True)

        if not descriptor.is_accessor:
            if kind is not Kind.PRIMITIVE and self._is_frozen(obj):
                descriptor.writable = False
            descriptor.value = _read(obj, kind, name)
        return descriptor

    def get_descriptor(self, obj: Any, name: str) -> Optional[PropertyDescriptor]:
        """Descriptor of an own property, or None when the property is absent"""
        kind = self._require_inspectable(obj, "get_descriptor")
        with self.lock:
            return self._current_descriptor(obj, kind, _key(name))

    def get_own_property_descriptors(self, obj: Any) -> Dict[str, PropertyDescriptor]:
        kind = self._require_inspectable(obj, "get_own_property_descriptors")
        with self.lock:
            result = {}
            for name in self._own_names(obj, kind):
                descriptor = self._current_descriptor(obj, kind, name)
                if descriptor is not None:
                    result[name] = descriptor
            return result

    def _check_definable(self, obj: Any, kind: Kind, name: str, descriptor: PropertyDescriptor):
        if kind is Kind.ARRAY and name != 'length' and not name.isdigit():
            raise InvalidArgumentError(f"Array property must be an index or 'length': {name!r}")
        if descriptor.is_accessor and not self.supports_accessors(obj):
            raise UnsupportedFeatureError(
                f"Accessors are not supported on {type(obj).__name__} objects")
        if self._is_frozen(obj):
            raise NotExtensibleError(f"Cannot define property '{name}': object is frozen")

        existing = self._current_descriptor(obj, kind, name)
        if existing is None:
            if not self._is_extensible(obj):
                raise NotExtensibleError(f"Cannot define property '{name}': object is not extensible")
            return
        if existing.configurable:
            return

        if descriptor.configurable or descriptor.enumerable != existing.enumerable \
                or descriptor.is_accessor != existing.is_accessor:
            raise ConflictingDescriptorError(f"Cannot redefine property: {name}")
        if descriptor.is_accessor:
            if descriptor.get is not existing.get or descriptor.set is not existing.set:
                raise ConflictingDescriptorError(f"Cannot redefine property: {name}")
        elif not existing.writable:
            if descriptor.writable or not _same_value(descriptor.value, existing.value):
                raise ConflictingDescriptorError(f"Cannot redefine property: {name}")

    def _validate(self, obj: Any, name: Any, descriptor: Any, operation: str):
        kind = self._require_object(obj, operation)
        name = _key(name)
        normalized = PropertyDescriptor.from_value(descriptor)
        self._check_definable(obj, kind, name, normalized)
        if not normalized.is_accessor:
            _check_bindable(obj, kind, name, normalized.value)
        return kind, name, normalized

    def _apply(self, obj: Any, kind: Kind, name: str, descriptor: PropertyDescriptor):
        ident = self.identities.identity_of(obj)
        if descriptor.is_accessor:
            ProtoObject.remove_accessor(obj, name)
            if descriptor.get is not None:
                ProtoObject.define_getter(obj, name, descriptor.get)
            if descriptor.set is not None:
                ProtoObject.define_setter(obj, name, descriptor.set)
        else:
            if isinstance(obj, ProtoObject):
                ProtoObject.remove_accessor(obj, name)
            _write(obj, kind, name, descriptor.value)
        self.descriptors.setdefault(ident, {})[name] = descriptor

    def set_descriptor(self, obj: Any, name: str, descriptor: Any,
                       operation: str = "set_descriptor") -> PropertyDescriptor:
        """Validate a descriptor, record it and bind its value or accessors on obj"""
        with self.lock:
            try:
                kind, name, normalized = self._validate(obj, name, descriptor, operation)
            except (InvalidArgumentError, ConflictingDescriptorError) as e:
                logger.debug("%s(%r) rejected: %s", operation, name, e)
                raise
            self._apply(obj, kind, name, normalized)
            logger.debug("Defined %r on %s #%d", name, type(obj).__name__,
                         self.identities.identity_of(obj))
            return normalized.copy()

    def define_property(self, obj: Any, name: str, descriptor: Any) -> Any:
        self.set_descriptor(obj, name, descriptor, "define_property")
        return obj

    def define_properties(self, obj: Any, descriptors: Mapping[str, Any]) -> Any:
        """Validate every descriptor first; apply none of them if any is invalid"""
        self._require_object(obj, "define_properties")
        if not isinstance(descriptors, Mapping):
            raise InvalidArgumentError(f"Property descriptions must be a mapping: {descriptors!r}")
        with self.lock:
            validated = []
            for name, descriptor in descriptors.items():
                try:
                    kind, key, normalized = self._validate(obj, name, descriptor, "define_properties")
                except (InvalidArgumentError, ConflictingDescriptorError) as e:
                    logger.debug("define_properties rejected %r: %s", name, e)
                    raise
                validated.append((kind, key, normalized))
            for kind, name, normalized in validated:
                self._apply(obj, kind, name, normalized)
            return obj

    def delete_property(self, obj: Any, name: str) -> bool:
        """Remove an own property; False when it is not configurable"""
        kind = self._require_object(obj, "delete_property")
        name = _key(name)
        with self.lock:
            existing = self._current_descriptor(obj, kind, name)
            if existing is None:
                return True
            if not existing.configurable or self._is_sealed(obj):
                logger.debug("Declined to delete %r", name)
                return False

            _unbind(obj, kind, name)
            ident = self.identities.peek(obj)
            if ident is not None:
                self.descriptors.get(ident, {}).pop(name, None)
            return True

    # Enumeration
    def _own_names(self, obj: Any, kind: Kind) -> List[str]:
        names = list(_builtin_names(obj, kind))
        names.extend(_own_bindings(obj, kind))
        ident = self.identities.peek(obj)
        if ident is not None:
            names.extend(self.descriptors.get(ident, {}))

        seen = set()
        result = []
        for name in names:
            if name not in seen and self._has_own(obj, kind, name):
                seen.add(name)
                result.append(name)
        return result

    def list_own_property_names(self, obj: Any) -> List[str]:
        kind = self._require_inspectable(obj, "list_own_property_names")
        with self.lock:
            return self._own_names(obj, kind)

    def keys(self, obj: Any) -> List[str]:
        """Own enumerable property names"""
        kind = self._require_inspectable(obj, "keys")
        with self.lock:
            return [name for name in self._own_names(obj, kind)
                    if self._current_descriptor(obj, kind, name).enumerable]

    def is_enumerable(self, obj: Any, name: str) -> bool:
        descriptor = self.get_descriptor(obj, name)
        return descriptor is not None and descriptor.enumerable

    # Values
    def get_value(self, obj: Any, name: str) -> Any:
        """Read a property, continuing along prototype links when it is not own"""
        kind = self._require_inspectable(obj, "get_value")
        name = _key(name)
        with self.lock:
            if self._has_own(obj, kind, name):
                return _read(obj, kind, name)
            if kind is Kind.PRIMITIVE:
                return None
            proto = self._linked_prototype(obj)
        if proto is None:
            if isinstance(obj, (dict, list, ProtoObject)):
                return None
            # Class attributes play the part of the prototype chain
            return getattr(obj, name, None)
        if isinstance(proto, type):
            return getattr(proto, name, None)
        return self.get_value(proto, name)

    def set_value(self, obj: Any, name: str, value: Any) -> Any:
        """Assign honouring writable/frozen/extensible; returns the value now held"""
        kind = self._require_object(obj, "set_value")
        name = _key(name)
        with self.lock:
            existing = self._current_descriptor(obj, kind, name)
            if existing is None:
                if not self._is_extensible(obj):
                    logger.debug("Refused to add %r to non-extensible object", name)
                    return None
                _write(obj, kind, name, value)
                return value
            if existing.is_accessor:
                if existing.set is not None:
                    existing.set(obj, value)
                return _read(obj, kind, name)
            if not existing.writable:
                logger.debug("Refused to overwrite non-writable %r", name)
                return existing.value
            _write(obj, kind, name, value)
            return value

    # Flags
    def _is_sealed(self, obj: Any) -> bool:
        ident = self.identities.peek(obj)
        return ident is not None and (ident in self.sealed or ident in self.frozen)

    def _is_frozen(self, obj: Any) -> bool:
        ident = self.identities.peek(obj)
        return ident is not None and ident in self.frozen

    def _is_extensible(self, obj: Any) -> bool:
        ident = self.identities.peek(obj)
        return ident is None or not (ident in self.non_extensible or ident in self.sealed
                                     or ident in self.frozen)

    def seal(self, obj: Any) -> Any:
        self._require_object(obj, "seal")
        with self.lock:
            self.sealed.add(self.identities.identity_of(obj))
        return obj

    def is_sealed(self, obj: Any) -> bool:
        self._require_object(obj, "is_sealed")
        with self.lock:
            return self._is_sealed(obj)

    def freeze(self, obj: Any) -> Any:
        self._require_object(obj, "freeze")
        with self.lock:
            self.frozen.add(self.identities.identity_of(obj))
        return obj

    def is_frozen(self, obj: Any) -> bool:
        self._require_object(obj, "is_frozen")
        with self.lock:
            return self._is_frozen(obj)

    def prevent_extensions(self, obj: Any) -> Any:
        self._require_object(obj, "prevent_extensions")
        with self.lock:
            self.non_extensible.add(self.identities.identity_of(obj))
        return obj

    def is_extensible(self, obj: Any) -> bool:
        self._require_object(obj, "is_extensible")
        with self.lock:
            return self._is_extensible(obj)

    # Prototypes
    def _linked_prototype(self, obj: Any) -> Any:
        if isinstance(obj, ProtoObject) and ProtoObject.has_native_link(obj):
            return ProtoObject.prototype_of(obj)
        ident = self.identities.peek(obj)
        if ident is not None and ident in self.prototypes:
            return self.prototypes[ident]
        return None

    def get_prototype_of(self, obj: Any) -> Any:
        self._require_object(obj, "get_prototype_of")
        with self.lock:
            if isinstance(obj, ProtoObject) and ProtoObject.has_native_link(obj):
                return ProtoObject.prototype_of(obj)
            ident = self.identities.peek(obj)
            if ident is not None and ident in self.prototypes:
                return self.prototypes[ident]
        if isinstance(obj, ProtoObject):
            return None
        return type(obj)

    def create(self, proto: Any = None, descriptors: Optional[Mapping[str, Any]] = None) -> ProtoObject:
        """New object whose lookups fall through to proto"""
        if proto is not None and classify(proto) is Kind.PRIMITIVE:
            raise InvalidArgumentError(f"Object prototype may only be an object or None: {proto!r}")
        with self.lock:
            if self.config.native_prototypes:
                obj = ProtoObject(proto)
            else:
                obj = ProtoObject(registry=self)
                self.prototypes[self.identities.identity_of(obj)] = proto
            if descriptors is not None:
                self.define_properties(obj, descriptors)
            return obj

def _same_value(a: Any, b: Any) -> bool:
    if isinstance(a, float) and isinstance(b, float) and math.isnan(a) and math.isnan(b):
        return True
    if a is b:
        return True
    return type(a) is type(b) and a == b

_default_registry: Optional[ObjectRegistry] = None
_default_lock = threading.Lock()

def default_registry() -> ObjectRegistry:
    """Process-wide registry, created on first use"""
    global _default_registry
    if _default_registry is None:
        with _default_lock:
            if _default_registry is None:
                _default_registry = ObjectRegistry()
    return _default_registry

def reset_default_registry(registry: Optional[ObjectRegistry] = None) -> ObjectRegistry:
    global _default_registry
    with _default_lock:
        _default_registry = registry if registry is not None else ObjectRegistry()
    return _default_registry

# Module-level operations on the default registry

def identity_of(obj: Any) -> int:
    return default_registry().identity_of(obj)

def get_descriptor(obj: Any, name: str) -> Optional[PropertyDescriptor]:
    return default_registry().get_descriptor(obj, name)

def get_own_property_descriptors(obj: Any) -> Dict[str, PropertyDescriptor]:
    return default_registry().get_own_property_descriptors(obj)

def set_descriptor(obj: Any, name: str, descriptor: Any) -> PropertyDescriptor:
    return default_registry().set_descriptor(obj, name, descriptor)

def define_property(obj: Any, name: str, descriptor: Any) -> Any:
    return default_registry().define_property(obj, name, descriptor)

def define_properties(obj: Any, descriptors: Mapping[str, Any]) -> Any:
    return default_registry().define_properties(obj, descriptors)

def delete_property(obj: Any, name: str) -> bool:
    return default_registry().delete_property(obj, name)

def list_own_property_names(obj: Any) -> List[str]:
    return default_registry().list_own_property_names(obj)

def keys(obj: Any) -> List[str]:
    return default_registry().keys(obj)

def get_value(obj: Any, name: str) -> Any:
    return default_registry().get_value(obj, name)

def set_value(obj: Any, name: str, value: Any) -> Any:
    return default_registry().set_value(obj, name, value)

def seal(obj: Any) -> Any:
    return default_registry().seal(obj)

def is_sealed(obj: Any) -> bool:
    return default_registry().is_sealed(obj)

def freeze(obj: Any) -> Any:
    return default_registry().freeze(obj)

def is_frozen(obj: Any) -> bool:
    return default_registry().is_frozen(obj)

def prevent_extensions(obj: Any) -> Any:
    return default_registry().prevent_extensions(obj)

def is_extensible(obj: Any) -> bool:
    return default_registry().is_extensible(obj)

def get_prototype_of(obj: Any) -> Any:
    return default_registry().get_prototype_of(obj)

def create(proto: Any = None, descriptors: Optional[Mapping[str, Any]] = None) -> ProtoObject:
    return default_registry().create(proto, descriptors)
