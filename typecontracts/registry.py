"""Type Constructor Registry

Maps DSL names to predicate constructors. A constructor is registered
either from a ``Type`` subclass (called with the builder's arguments) or
from a factory function composing other registered constructors.

Factories receive the registry's ``TypeNamespace`` as their first argument,
so derived constructors are written in terms of other names and follow any
override made in an extended registry:

    registry = default_registry.copy()

    @registry.constructor("percentage")
    def _percentage(t):
        return t.numeric(minimum=0, maximum=100)

    t = registry.namespace
    t.percentage().check(42)

Registration is a setup-phase, single-writer operation. Call ``freeze()``
once setup is complete; the table is read-only afterwards and the
constructors it hands out are safe to call from any thread.
"""
from __future__ import annotations

import keyword
import numbers
from dataclasses import dataclass
from decimal import Decimal
from functools import partial
from typing import Any, Callable, Iterator

from typecontracts.config import Settings, get_settings
from typecontracts.errors import (
    ConfigurationError,
    duplicate_registration,
    invalid_registration,
    registry_frozen,
)
from typecontracts.logging import registry_logger
from typecontracts.types import (
    AnyType,
    ArrayType,
    ClassType,
    HasType,
    IsNotType,
    IsType,
    MaximumType,
    MinimumType,
    PatternType,
    SatisfiesType,
    Type,
    UnionType,
    ValueType,
    VoidType,
)

Factory = Callable[..., Type]


@dataclass(frozen=True, slots=True)
class Registration:
    """One registered constructor."""
    name: str
    build: Callable[..., Type]
    type_: type[Type] | None = None

    @property
    def kind(self) -> str:
        return "type" if self.type_ is not None else "factory"


def _instantiate(type_: type[Type], namespace: TypeNamespace, *args, **kwargs) -> Type:
    return type_(*args, **kwargs)


class TypeNamespace:
    """Attribute/item access to a registry's constructors.

    Keyword names are reachable with a trailing underscore: ``t.is_(...)``
    resolves the ``is`` constructor.
    """
    __slots__ = ("_registry",)

    RESERVED = frozenset({"registry", "settings"})

    def __init__(self, registry: TypeRegistry):
        self._registry = registry

    @property
    def registry(self) -> TypeRegistry:
        return self._registry

    @property
    def settings(self) -> Settings:
        return self._registry.settings

    def __getattr__(self, name: str) -> Callable[..., Type]:
        if name.startswith("__"):
            raise AttributeError(name)
        lookup = name[:-1] if name.endswith("_") and keyword.iskeyword(name[:-1]) else name
        try:
            return self._registry.get(lookup)
        except KeyError as e:
            raise AttributeError(e.args[0]) from None

    def __getitem__(self, name: str) -> Callable[..., Type]:
        return self._registry.get(name)

    def __contains__(self, name: str) -> bool:
        return name in self._registry

    def __dir__(self) -> list[str]:
        return [f"{n}_" if keyword.iskeyword(n) else n for n in self._registry.names()]


class TypeRegistry:
    """Explicit name -> constructor table."""

    def __init__(self, settings: Settings | None = None):
        self.settings = settings if settings is not None else get_settings()
        self._registrations: dict[str, Registration] = {}
        self._frozen = False
        self.namespace = TypeNamespace(self)

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def register(
        self,
        name: str,
        type_: type[Type] | None = None,
        factory: Factory | None = None,
        *,
        replace: bool = False,
    ) -> Registration:
        """Register a constructor from exactly one of ``type_`` or ``factory``.

        Raises:
            ConfigurationError: on both/neither source, a non-Type class, a bad
                or duplicate name, or a frozen registry.
        """
        log = registry_logger()
        try:
            registration = self._add(name, type_, factory, replace=replace)
        except ConfigurationError as exc:
            log.error("registration_rejected", name=name, code=exc.code.name, reason=exc.error.message)
            raise
        log.debug("constructor_registered", name=name, kind=registration.kind)
        return registration

    def constructor(self, name: str | None = None, *, replace: bool = False) -> Callable[[Factory], Factory]:
        """Decorator form of ``register(name, factory=fn)``."""
        def decorator(fn: Factory) -> Factory:
            self.register(name or fn.__name__, factory=fn, replace=replace)
            return fn
        return decorator

    def _add(self, name: str, type_: type[Type] | None, factory: Factory | None, *, replace: bool = False) -> Registration:
        if self._frozen:
            raise ConfigurationError(registry_frozen(name))
        if not isinstance(name, str) or not name.isidentifier() or name.startswith("_"):
            raise ConfigurationError(invalid_registration(str(name), "name must be a public identifier"))
        if name in TypeNamespace.RESERVED:
            raise ConfigurationError(invalid_registration(name, "name is reserved by the namespace"))
        if type_ is not None and factory is not None:
            raise ConfigurationError(invalid_registration(name, "cannot specify both type and factory"))
        if type_ is None and factory is None:
            raise ConfigurationError(invalid_registration(name, "missing type or factory"))
        if name in self._registrations and not replace:
            raise ConfigurationError(duplicate_registration(name))

        if type_ is not None:
            if not (isinstance(type_, type) and issubclass(type_, Type)):
                raise ConfigurationError(invalid_registration(name, f"{type_!r} should be a subclass of Type"))
            registration = Registration(name, partial(_instantiate, type_), type_)
        else:
            if not callable(factory):
                raise ConfigurationError(invalid_registration(name, f"factory {factory!r} is not callable"))
            registration = Registration(name, factory)

        self._registrations[name] = registration
        return registration

    def freeze(self) -> TypeRegistry:
        """Make the table read-only. Returns self for chaining."""
        self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    def copy(self) -> TypeRegistry:
        """Unfrozen copy sharing settings and registrations, for extension."""
        clone = TypeRegistry(self.settings)
        clone._registrations = dict(self._registrations)
        return clone

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def construct(self, name: str, /, *args: Any, **kwargs: Any) -> Type:
        """Build the predicate registered under ``name``."""
        registration = self._lookup(name)
        built = registration.build(self.namespace, *args, **kwargs)
        if not isinstance(built, Type):
            raise ConfigurationError(invalid_registration(name, f"factory returned {type(built).__name__}, not a Type"))
        return built

    def get(self, name: str) -> Callable[..., Type]:
        """Constructor callable for ``name``."""
        self._lookup(name)
        return partial(self.construct, name)

    def _lookup(self, name: str) -> Registration:
        if name not in self._registrations:
            available = ", ".join(sorted(self._registrations)) or "none"
            raise KeyError(f"Type constructor '{name}' not registered. Available: {available}")
        return self._registrations[name]

    def names(self) -> list[str]:
        return list(self._registrations)

    def __contains__(self, name: object) -> bool:
        return name in self._registrations

    def __iter__(self) -> Iterator[str]:
        return iter(self._registrations)

    def __len__(self) -> int:
        return len(self._registrations)


# ============================================================================
# Built-in Constructors
# ============================================================================

def _one_of(t: TypeNamespace, *values: Any) -> Type:
    return UnionType(tuple(t.value(v) for v in values))


def _in_range(t: TypeNamespace, minimum: Any = None, maximum: Any = None) -> Type:
    strict = t.settings.STRICT_COMPARISONS
    result = t.any()
    if minimum is not None:
        result = result & t.minimum(minimum, strict=strict)
    if maximum is not None:
        result = result & t.maximum(maximum, strict=strict)
    return result


def _string(t: TypeNamespace, regex: Any = None) -> Type:
    return t.of_class(str) & (t.pattern(regex) if regex is not None else t.any())


def _integer(t: TypeNamespace, minimum: Any = None, maximum: Any = None) -> Type:
    return t.of_class(int, exclude=bool) & t.in_range(minimum=minimum, maximum=maximum)


def _numeric(t: TypeNamespace, minimum: Any = None, maximum: Any = None) -> Type:
    return t.of_class(numbers.Real, Decimal, exclude=bool) & t.in_range(minimum=minimum, maximum=maximum)


def _odd(t: TypeNamespace) -> Type:
    return t.integer() & t.satisfies(lambda n: n % 2 == 1, name="odd")


def _even(t: TypeNamespace) -> Type:
    return t.integer() & t.satisfies(lambda n: n % 2 == 0, name="even")


def _empty(t: TypeNamespace) -> Type:
    return t.has("__len__") & t.satisfies(lambda v: len(v) == 0, name="empty")


def _non_empty(t: TypeNamespace) -> Type:
    return t.has("__len__") & t.satisfies(lambda v: len(v) > 0, name="non-empty")


def _maybe(t: TypeNamespace, inner: Type) -> Type:
    return t.value(None) | inner


BUILTIN_TYPES: dict[str, type[Type]] = {
    "any": AnyType,
    "void": VoidType,
    "is": IsType,
    "is_not": IsNotType,
    "has": HasType,
    "of_class": ClassType,
    "value": ValueType,
    "array": ArrayType,
    "minimum": MinimumType,
    "maximum": MaximumType,
    "pattern": PatternType,
    "satisfies": SatisfiesType,
}

BUILTIN_FACTORIES: dict[str, Factory] = {
    "one_of": _one_of,
    "in_range": _in_range,
    "string": _string,
    "integer": _integer,
    "numeric": _numeric,
    "odd": _odd,
    "even": _even,
    "empty": _empty,
    "non_empty": _non_empty,
    "maybe": _maybe,
}


def register_builtins(registry: TypeRegistry) -> TypeRegistry:
    """Install the built-in constructors into ``registry``."""
    for name, type_ in BUILTIN_TYPES.items():
        registry._add(name, type_, None)
    for name, factory in BUILTIN_FACTORIES.items():
        registry._add(name, None, factory)
    return registry


def build_default_registry(settings: Settings | None = None) -> TypeRegistry:
    """Fresh, unfrozen registry holding the built-ins."""
    return register_builtins(TypeRegistry(settings))


default_registry = build_default_registry().freeze()
