"""
Callback inspection.

Works out how many arguments a caller-supplied function wants
(value / value+index / value+key / value+key+index) and checks any
annotations it carries against the container being walked and the
signature the operation needs.
"""

from __future__ import annotations

import inspect
import typing
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable

from .errors import ArityMismatch, NotCallable, ParameterTypeMismatch, ReturnTypeMismatch
from .logger import logger
from .values import DynamicValue, accepts_all

_ORDINALS = ("1st", "2nd", "3rd")

_POSITIONAL = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


class Arity(str, Enum):
    VALUE = "value"
    VALUE_INDEX = "value_index"
    VALUE_KEY = "value_key"
    VALUE_KEY_INDEX = "value_key_index"


@dataclass(frozen=True)
class CallbackDescriptor:
    """What a callback accepts and what it declares to return."""

    func: Callable[..., Any]
    arg_count: int
    params: tuple[Any, ...] = ()
    returns: Any = inspect.Signature.empty
    arity: Arity = Arity.VALUE

    def param(self, position: int) -> Any:
        if position < len(self.params):
            return self.params[position]
        return None

    @property
    def declares_return(self) -> bool:
        return self.returns is not inspect.Signature.empty


def _resolved_hints(func: Callable[..., Any]) -> dict[str, Any]:
    target = func
    if not (inspect.isfunction(func) or inspect.ismethod(func)):
        target = getattr(type(func), "__call__", func)
    try:
        return typing.get_type_hints(target)
    except (NameError, TypeError, AttributeError):
        return {}


def _annotation(raw: Any, resolved: Any) -> Any:
    ann = resolved if resolved is not None else raw
    if ann is inspect.Parameter.empty or isinstance(ann, str):
        return None
    if ann is None:
        return type(None)
    return ann


def inspect_callback(func: Any, label: str = "callback") -> CallbackDescriptor:
    """
    Describe ``func``.

    The argument count is the number of required positional parameters
    (at least one). Defaulted parameters are left to their defaults.

    Raises:
        NotCallable: ``func`` is not callable.
        ArityMismatch: ``func`` cannot take a positional argument.
    """
    if func is None or not callable(func):
        raise NotCallable(f"{label} should be function")

    try:
        signature = inspect.signature(func)
    except (TypeError, ValueError):
        # builtins without introspectable signatures take the value only
        return CallbackDescriptor(func=func, arg_count=1)

    hints = _resolved_hints(func)
    positional = [p for p in signature.parameters.values() if p.kind in _POSITIONAL]
    variadic = any(
        p.kind is inspect.Parameter.VAR_POSITIONAL for p in signature.parameters.values()
    )

    if not positional and not variadic:
        raise ArityMismatch(f"{label} must take at least one parameter")

    required = sum(1 for p in positional if p.default is inspect.Parameter.empty)
    arg_count = max(required, 1)

    params = tuple(_annotation(p.annotation, hints.get(p.name)) for p in positional)
    returns = signature.return_annotation
    if "return" in hints:
        returns = hints["return"]
    if returns is None:
        returns = type(None)
    elif isinstance(returns, str):
        returns = inspect.Signature.empty

    return CallbackDescriptor(func=func, arg_count=arg_count, params=params, returns=returns)


def _check_param(desc: CallbackDescriptor, position: int, actual: tuple[type, ...], what: str) -> None:
    declared = desc.param(position)
    # every concrete type in the container must fit, so [1, 2.5] satisfies float
    if declared is not None and not accepts_all(declared, actual):
        logger.debug("callback parameter %d rejects %r", position, actual)
        raise ParameterTypeMismatch(
            f"callback {_ORDINALS[position]} parameter's data type should be same with {what}"
        )


def for_sequence(desc: CallbackDescriptor, value: DynamicValue) -> CallbackDescriptor:
    """Validate ``desc`` for a sequence walk: (value) or (value, index)."""
    if desc.arg_count > 2:
        raise ArityMismatch("callback must only have one or two parameters")

    _check_param(desc, 0, value.element_types, "slice element data type")
    arity = Arity.VALUE
    if desc.arg_count == 2:
        _check_param(desc, 1, (int,), "int")
        arity = Arity.VALUE_INDEX
    return _with_arity(desc, arity)


def for_map(desc: CallbackDescriptor, value: DynamicValue) -> CallbackDescriptor:
    """Validate ``desc`` for a map walk: (value), (value, key) or (value, key, index)."""
    if desc.arg_count > 3:
        raise ArityMismatch("callback must only have one, two or three parameters")

    _check_param(desc, 0, value.element_types, "map value data type")
    arity = Arity.VALUE
    if desc.arg_count >= 2:
        _check_param(desc, 1, value.key_types, "map key data type")
        arity = Arity.VALUE_KEY
    if desc.arg_count == 3:
        _check_param(desc, 2, (int,), "int")
        arity = Arity.VALUE_KEY_INDEX
    return _with_arity(desc, arity)


def for_container(desc: CallbackDescriptor, value: DynamicValue) -> CallbackDescriptor:
    if value.is_map:
        return for_map(desc, value)
    return for_sequence(desc, value)


def for_key_only(desc: CallbackDescriptor, value: DynamicValue) -> CallbackDescriptor:
    """Validate a value-only callback, as ordering key functions are."""
    if desc.arg_count != 1:
        raise ArityMismatch("callback must only have one parameter")
    _check_param(desc, 0, value.element_types, "slice element data type")
    return desc


def _with_arity(desc: CallbackDescriptor, arity: Arity) -> CallbackDescriptor:
    return CallbackDescriptor(
        func=desc.func,
        arg_count=desc.arg_count,
        params=desc.params,
        returns=desc.returns,
        arity=arity,
    )


def expect_predicate(desc: CallbackDescriptor) -> CallbackDescriptor:
    """Predicates must return one ``bool`` when they say what they return."""
    if desc.declares_return and desc.returns is not bool:
        raise ReturnTypeMismatch("callback return value should be one variable with bool type")
    return desc


def expect_transform(desc: CallbackDescriptor) -> CallbackDescriptor:
    """Transforms must return exactly one value of any type."""
    if desc.declares_return and desc.returns is type(None):
        raise ReturnTypeMismatch("callback return value should be one variable")
    return desc


def expect_side_effect(desc: CallbackDescriptor) -> CallbackDescriptor:
    """Side-effect callbacks return nothing, or a ``bool`` continuation flag."""
    if desc.declares_return and desc.returns not in (bool, type(None)):
        raise ReturnTypeMismatch("callback return value should be none or one variable with bool type")
    return desc


def invoke(desc: CallbackDescriptor, value: Any, key_or_index: Any = None, index: int = 0) -> Any:
    """Call ``desc.func`` with as many arguments as its arity takes."""
    if desc.arg_count == 1:
        return desc.func(value)
    if desc.arg_count == 2:
        return desc.func(value, key_or_index)
    return desc.func(value, key_or_index, index)


__all__ = [
    "Arity",
    "CallbackDescriptor",
    "inspect_callback",
    "for_sequence",
    "for_map",
    "for_container",
    "for_key_only",
    "expect_predicate",
    "expect_transform",
    "expect_side_effect",
    "invoke",
]
