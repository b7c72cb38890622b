"""
Template introspection.

Decides which members of a template become mock functions, which
attributes are nested objects (mocked recursively in deep mode, copied
otherwise), and how the template's own implementation of each member is reached
when spying.

A template may be:
- a class: its public callables are mocked, the mock is an instance of it
- an instance: as above, using the instance's class
- a mapping of ``name -> callable`` describing an interface directly
- None, together with an explicit ``members`` list of names

Property getters and other computing descriptors (``cached_property``,
custom ``__get__``) are never evaluated, so introspection does not run
template logic.
"""

from __future__ import annotations

import inspect
import types
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple

_MISSING = object()

# Descriptors whose lookup only binds or reads a slot, never runs template code.
_PLAIN_DESCRIPTORS: Tuple[type, ...] = (
    types.FunctionType,
    types.BuiltinFunctionType,
    types.MethodDescriptorType,
    types.ClassMethodDescriptorType,
    types.WrapperDescriptorType,
    types.MemberDescriptorType,
    types.GetSetDescriptorType,
    staticmethod,
    classmethod,
)

SCALAR_TYPES: Tuple[type, ...] = (type(None), bool, int, float, complex, str, bytes)

# Protocol methods that public-name enumeration misses, per built-in shape.
NATIVE_TYPES: Dict[type, Tuple[str, ...]] = {
    list: ("__len__", "__iter__", "__contains__", "__getitem__", "__setitem__", "__delitem__"),
    tuple: ("__len__", "__iter__", "__contains__", "__getitem__"),
    dict: ("__len__", "__iter__", "__contains__", "__getitem__", "__setitem__", "__delitem__"),
    set: ("__len__", "__iter__", "__contains__"),
    frozenset: ("__len__", "__iter__", "__contains__"),
    str: ("__len__", "__iter__", "__contains__", "__getitem__"),
    bytes: ("__len__", "__iter__", "__contains__", "__getitem__"),
}


@dataclass
class MemberSource:
    """
    How to reach the template's implementation of one member.

    ``binds_self`` is True for plain methods looked up on a class: calling
    them with a foreign receiver means passing it as ``self``.
    """
    name: str
    target: Optional[Any] = None
    binds_self: bool = False
    unbound: Optional[Any] = None


@dataclass
class TemplateMembers:
    """Result of introspecting a template."""
    template_class: Optional[type] = None
    methods: Dict[str, MemberSource] = field(default_factory=dict)
    attributes: Dict[str, Any] = field(default_factory=dict)
    protocol_methods: Dict[str, MemberSource] = field(default_factory=dict)


def is_scalar(value: Any) -> bool:
    return isinstance(value, SCALAR_TYPES)


def is_mapping_template(template: Any) -> bool:
    """True for real mappings; a mock of a dict reports dict as its class but is not one."""
    return issubclass(type(template), Mapping)


def protocol_methods_for(template_class: Optional[type]) -> Tuple[str, ...]:
    if template_class is None:
        return ()
    for native_type, methods in NATIVE_TYPES.items():
        if issubclass(template_class, native_type):
            return methods
    return ()


def inspect_template(template: Any = None, members: Iterable[str] | None = None) -> TemplateMembers:
    """Enumerate the members of *template* plus any explicitly named *members*."""
    if template is None:
        result = TemplateMembers()
    elif is_mapping_template(template):
        result = _inspect_mapping(template)
    elif inspect.isclass(template):
        result = _inspect_class(template)
    else:
        result = _inspect_instance(template)

    for name in members or ():
        result.methods.setdefault(name, MemberSource(name))
    for name in protocol_methods_for(result.template_class):
        if name not in result.methods:
            result.protocol_methods[name] = _protocol_source(template, name)
    return result


def _public_names(obj: Any) -> list[str]:
    return [name for name in dir(obj) if not name.startswith("_")]


def _computes_value(static: Any) -> bool:
    """True for descriptors such as properties whose lookup would run template code."""
    if static is None or inspect.isclass(static):
        return False
    return hasattr(type(static), "__get__") and not isinstance(static, _PLAIN_DESCRIPTORS)


def _is_data_descriptor(static: Any) -> bool:
    return hasattr(type(static), "__set__") or hasattr(type(static), "__delete__")


def _instance_dict(obj: Any) -> Dict[str, Any]:
    try:
        return vars(obj)
    except TypeError:
        return {}


def _binds_self(static: Any) -> bool:
    """True for methods that take the receiver as their first argument."""
    if static is None or inspect.isclass(static):
        return False
    if isinstance(static, (staticmethod, classmethod)):
        return False
    return inspect.isfunction(static) or inspect.ismethoddescriptor(static)


def _source(name: str, target: Any, static: Any) -> MemberSource:
    binds_self = _binds_self(static)
    return MemberSource(name, target, binds_self=binds_self, unbound=static if binds_self else None)


def _protocol_source(template: Any, name: str) -> MemberSource:
    if template is None or is_mapping_template(template):
        return MemberSource(name)
    owner = template if inspect.isclass(template) else type(template)
    return _source(name, getattr(template, name, None), inspect.getattr_static(owner, name, None))


def _inspect_mapping(template: Mapping[str, Any]) -> TemplateMembers:
    result = TemplateMembers()
    for name, value in template.items():
        if callable(value):
            result.methods[name] = MemberSource(name, value)
        else:
            result.attributes[name] = value
    return result


def _inspect_class(cls: type) -> TemplateMembers:
    result = TemplateMembers(template_class=cls)
    for name in _public_names(cls):
        static = inspect.getattr_static(cls, name, None)
        if _computes_value(static):
            continue
        value = getattr(cls, name)
        if callable(value):
            result.methods[name] = _source(name, value, static)
        else:
            result.attributes[name] = value
    return result


def _inspect_instance(obj: Any) -> TemplateMembers:
    cls = obj.__class__
    result = TemplateMembers(template_class=cls)
    instance_dict = _instance_dict(obj)
    for name in _public_names(obj):
        static_on_class = inspect.getattr_static(type(obj), name, None)
        if _computes_value(static_on_class) and (
            _is_data_descriptor(static_on_class) or name not in instance_dict
        ):
            continue
        value = getattr(obj, name, _MISSING)
        if value is _MISSING:
            continue
        if callable(value):
            result.methods[name] = _source(name, value, static_on_class)
        else:
            result.attributes[name] = value
    return result
