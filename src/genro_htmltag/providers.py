# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Default attribute sources and their resolution.

This module provides everything that contributes attributes to a tag
besides the caller's explicit fluent calls:

    - **DefaultsRegistry**: process-wide baseline keyed by tag type.
    - **DefaultsProvider**: pluggable object contributing default attributes.
    - **ThemeProvider**: pluggable object contributing attributes for a
      named theme (e.g. 'muted').
    - **DefaultsResolver**: merges every layer, in ascending precedence:

        global defaults < constructor attributes < default providers
        < theme providers < explicit attributes

Provider references attached to a tag can be an instance, a class
(instantiated without arguments) or an import string such as
'mypackage.themes:BootstrapTheme'. References are resolved at render time;
a reference that cannot be used raises UnresolvableProvider.

Example:
    >>> registry = DefaultsRegistry()
    >>> registry.set('app.Button', {'class': 'btn'})
    >>> resolver = DefaultsResolver(registry)
    >>> dict(resolver.resolve('app.Button', {}, [], [], {'id': 'ok'}))
    {'class': 'btn', 'id': 'ok'}
"""

from __future__ import annotations

import importlib
from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator, Mapping
from contextlib import contextmanager
from typing import Any

from genro_toolbox import smartsplit
from genro_tytx import from_tytx, to_tytx

from .attribute_store import AttributeStore
from .exceptions import UnresolvableProvider

# --- Provider interfaces ---


class DefaultsProvider(ABC):
    """Contributes default attributes to a tag at render time."""

    @abstractmethod
    def get_defaults(self, tag: Any) -> Mapping[str, Any] | None:
        """Return the attributes to apply to tag (None means nothing)."""


class ThemeProvider(ABC):
    """Contributes attributes to a tag for a named theme."""

    @abstractmethod
    def apply(self, tag: Any, theme: str) -> Mapping[str, Any] | None:
        """Return the attributes of theme for tag (None means nothing)."""


class StaticDefaultsProvider(DefaultsProvider):
    """DefaultsProvider returning the same attributes for every tag."""

    def __init__(self, attributes: Mapping[str, Any]) -> None:
        self.attributes = dict(attributes)

    def get_defaults(self, tag: Any) -> Mapping[str, Any]:
        return self.attributes


class StaticThemeProvider(ThemeProvider):
    """ThemeProvider backed by a {theme: attributes} mapping.

    Unknown themes contribute nothing.
    """

    def __init__(self, themes: Mapping[str, Mapping[str, Any]]) -> None:
        self.themes = {name: dict(attrs) for name, attrs in themes.items()}

    def apply(self, tag: Any, theme: str) -> Mapping[str, Any]:
        return self.themes.get(theme, {})


# --- Global registry ---


class DefaultsRegistry:
    """Global per-type default attributes.

    The registry is shared, mutable state: every tag of a registered type
    observes its baseline at render time. Callers must reset it between
    independent uses (tests reset it with clear_all()).

    Internal structure:
        _defaults: maps type_id -> attribute dict
    """

    def __init__(self) -> None:
        self._defaults: dict[str, dict[str, Any]] = {}

    def __contains__(self, type_id: str) -> bool:
        return type_id in self._defaults

    def __iter__(self) -> Iterator[str]:
        return iter(self._defaults)

    def __len__(self) -> int:
        return len(self._defaults)

    def set(self, type_id: str, attributes: Mapping[str, Any] | None) -> None:
        """Replace the baseline of type_id. An empty mapping clears it."""
        if not attributes:
            self.clear(type_id)
            return
        self._defaults[type_id] = dict(attributes)

    def clear(self, type_id: str) -> None:
        """Remove the baseline of type_id."""
        self._defaults.pop(type_id, None)

    def clear_all(self) -> None:
        """Remove every baseline."""
        self._defaults.clear()

    def get(self, type_id: str) -> dict[str, Any]:
        """Return a copy of the baseline of type_id ({} if none)."""
        return dict(self._defaults.get(type_id, {}))

    def snapshot(self) -> dict[str, dict[str, Any]]:
        """Return a deep copy of the whole registry."""
        return {type_id: dict(attrs) for type_id, attrs in self._defaults.items()}

    def restore(self, snapshot: Mapping[str, Mapping[str, Any]]) -> None:
        """Replace the whole registry with snapshot."""
        self._defaults = {type_id: dict(attrs) for type_id, attrs in snapshot.items() if attrs}

    @contextmanager
    def scoped(self, type_id: str, attributes: Mapping[str, Any]) -> Iterator[DefaultsRegistry]:
        """Apply a baseline for type_id inside a with-block, then restore the previous one.

        Example:
            >>> with registry.scoped('app.Button', {'class': 'btn'}):
            ...     html = Button.create().render()
        """
        previous = self._defaults.get(type_id)
        self.set(type_id, attributes)
        try:
            yield self
        finally:
            if previous is None:
                self.clear(type_id)
            else:
                self._defaults[type_id] = previous

    def to_tytx(self) -> str:
        """Serialize the registry with genro-tytx (typed JSON).

        Values must be scalars or containers of scalars; lazy callables
        cannot be serialized.
        """
        return to_tytx({"defaults": self.snapshot()})  # type: ignore[no-any-return]

    def load_tytx(self, data: str) -> None:
        """Replace the registry with the content serialized by to_tytx()."""
        parsed = from_tytx(data)
        self.restore(parsed.get("defaults") or {})


defaults_registry = DefaultsRegistry()


# --- Provider resolution ---


def _import_reference(reference: str) -> Any:
    """Import 'package.module:Name' or 'package.module.Name'."""
    if ":" in reference:
        parts = [p for p in smartsplit(reference, ":") if p]
        if len(parts) != 2:
            raise UnresolvableProvider(reference, "expected 'module:Name'")
        module_name, attr_name = parts
    else:
        module_name, _, attr_name = reference.rpartition(".")
        if not module_name:
            raise UnresolvableProvider(reference, "expected 'module:Name' or 'module.Name'")
    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise UnresolvableProvider(reference, f"cannot import module '{module_name}'") from e
    try:
        return getattr(module, attr_name)
    except AttributeError as e:
        raise UnresolvableProvider(
            reference, f"module '{module_name}' has no attribute '{attr_name}'"
        ) from e


def resolve_provider(reference: Any, method: str) -> Any:
    """Turn a provider reference into a live provider exposing method.

    Args:
        reference: Provider instance, provider class or import string.
        method: Required capability ('get_defaults' or 'apply').

    Returns:
        The provider instance.

    Raises:
        UnresolvableProvider: If the reference cannot be imported,
            instantiated, or does not expose method.
    """
    target = _import_reference(reference) if isinstance(reference, str) else reference
    if isinstance(target, type):
        try:
            target = target()
        except TypeError as e:
            raise UnresolvableProvider(reference, f"cannot instantiate: {e}") from e
    if not callable(getattr(target, method, None)):
        raise UnresolvableProvider(reference, f"provider has no '{method}' method")
    return target


def _contribution(reference: Any, result: Any) -> Mapping[str, Any]:
    if result is None:
        return {}
    if not isinstance(result, Mapping):
        raise UnresolvableProvider(
            reference, f"expected a mapping of attributes, got {type(result).__name__}"
        )
    return result


# --- Resolver ---


class DefaultsResolver:
    """Merges every attribute layer of a tag into the final AttributeStore."""

    def __init__(self, registry: DefaultsRegistry | None = None) -> None:
        self.registry = registry if registry is not None else defaults_registry

    def resolve(
        self,
        type_id: str,
        constructor_attributes: Mapping[str, Any] | None,
        default_providers: Iterable[Any],
        theme_providers: Iterable[tuple[str, Any]],
        explicit_attributes: Mapping[str, Any] | None,
        tag: Any = None,
    ) -> AttributeStore:
        """Compute the final attributes of a tag.

        Args:
            type_id: Registry key of the tag type.
            constructor_attributes: Attributes given to create().
            default_providers: Provider references, queried in order.
            theme_providers: (theme, provider reference) pairs, queried in order.
            explicit_attributes: Attributes set by fluent calls.
            tag: The tag being rendered, passed to providers as context.

        Returns:
            The merged AttributeStore.

        Raises:
            UnresolvableProvider: If a provider reference cannot be used.
        """
        store = AttributeStore(self.registry.get(type_id))
        store = store.merge(constructor_attributes)

        for reference in default_providers:
            provider = resolve_provider(reference, "get_defaults")
            store = store.merge(_contribution(reference, provider.get_defaults(tag)))

        for theme, reference in theme_providers:
            provider = resolve_provider(reference, "apply")
            store = store.merge(_contribution(reference, provider.apply(tag, theme)))

        return store.merge(explicit_attributes)
