# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""BaseTag - immutable HTML element with fluent API.

Every fluent call validates its input, then returns a new instance; the
receiver is never modified. Attributes are resolved when the tag is
rendered, merging in ascending precedence:

    global defaults < create() attributes < default providers
    < theme providers < explicit fluent calls

Concrete elements are declared by composing capability traits (see the
``traits`` package) with VoidTag, InlineTag or BlockTag and naming the
element:

    class Button(CanBeDisabled, HasName, HasButtonType, InlineTag):
        tag_name = 'button'

Traits declare validation rules on their setters with the ``@attribute``
marker decorator. The decorator only tags the method; BaseTag collects the
rules of the whole MRO in __init_subclass__, so ``set_attribute('type', x)``
is validated exactly like ``type(x)``.

Example:
    >>> Div.create({'id': 'main'}).class_('box').content('<hi>').render()
    '<div id="main" class="box">\\n&lt;hi&gt;\\n</div>'
"""

from __future__ import annotations

import copy
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, ClassVar

from genro_toolbox import smartsplit

from .attribute_store import AttributeStore, canonical_name, canonical_value
from .content import ContentModel
from .providers import DefaultsRegistry, DefaultsResolver, defaults_registry
from .renderer import BLOCK, INLINE, VOID, begin_tag, create_tag, end_tag, render
from .traits.global_attributes import GlobalAttributes
from .validations import Range, Regex, check_constraint, check_one_of
from .values import (
    BARE_ENUMERATED_ATTRIBUTES,
    BOOLEAN_TOKENS,
    CONSTRAINED_ATTRIBUTES,
    ENUMERATED_ATTRIBUTES,
)

if TYPE_CHECKING:
    from typing import Self


@dataclass(frozen=True)
class AttributeRule:
    """Validation rule of one attribute: allowed values and/or a constraint.

    Booleans are accepted when the rule says how: ``tokens`` maps True/False
    to a (true, false) pair of values, ``bare`` keeps them as is (True
    renders the bare attribute, False omits it).
    """

    name: str
    values: Any = None
    constraint: Range | Regex | None = None
    tokens: tuple[str, str] | None = None
    bare: bool = False

    def check(self, value: Any) -> Any:
        """Return the normalized value, raising if the rule rejects it.

        None and lazy callables are not checked.
        """
        if value is None or (callable(value) and not isinstance(value, Enum)):
            return value
        if isinstance(value, bool):
            if self.bare:
                return value
            if self.tokens is not None:
                value = self.tokens[0] if value else self.tokens[1]
        if self.values is not None:
            value = check_one_of(value, self.values, self.name)
        if self.constraint is not None:
            value = check_constraint(value, self.constraint, self.name)
        return canonical_value(value)


def attribute(
    name: str | Enum | None = None,
    *,
    values: Any = None,
    constraint: Range | Regex | None = None,
) -> Callable:
    """Decorator to mark a trait method as setter of a validated attribute.

    The decorator is a simple marker. Rules are collected by
    BaseTag.__init_subclass__ and applied by set_attribute().

    Args:
        name: Attribute name. If None, the method name is used
            (a trailing underscore is stripped).
        values: Allowed values (Enum class, Literal or iterable).
        constraint: Range or Regex constraint.

    Example:
        >>> class HasWrap:
        ...     @attribute(values=Wrap)
        ...     def wrap(self, value):
        ...         return self.set_attribute('wrap', value)
    """

    def decorator(func: Callable) -> Callable:
        rule_name = canonical_name(name if name is not None else func.__name__)
        func._attribute_rule = AttributeRule(rule_name, values, constraint)  # type: ignore[attr-defined]
        return func

    return decorator


_GLOBAL_RULES: dict[str, AttributeRule] = {
    **{
        name: AttributeRule(
            name,
            values=enum,
            tokens=BOOLEAN_TOKENS.get(name),
            bare=name in BARE_ENUMERATED_ATTRIBUTES,
        )
        for name, enum in ENUMERATED_ATTRIBUTES.items()
    },
    **{name: AttributeRule(name, constraint=rule) for name, rule in CONSTRAINED_ATTRIBUTES.items()},
}


def _collect_rules(cls: type) -> dict[str, AttributeRule]:
    """Return global rules overridden by the @attribute rules of cls's MRO."""
    rules = dict(_GLOBAL_RULES)
    for klass in reversed(cls.__mro__):
        for obj in vars(klass).values():
            rule = getattr(obj, "_attribute_rule", None)
            if isinstance(rule, AttributeRule):
                rules[rule.name] = rule
    return rules


def split_tokens(value: Any) -> list[str]:
    """Split a space separated token list ('btn  btn-lg') into tokens."""
    if value is None or value is True or value is False:
        return []
    if isinstance(value, (list, tuple)):
        return [str(v) for v in value if v]
    return [t for t in smartsplit(str(value), " ") if t]


def join_tokens(*values: Any) -> str:
    """Join token lists removing duplicates, first occurrence wins."""
    tokens: list[str] = []
    for value in values:
        for token in split_tokens(value):
            if token not in tokens:
                tokens.append(token)
    return " ".join(tokens)


class BaseTag(GlobalAttributes):
    """Immutable HTML element.

    Class attributes:
        tag_name: Element name (e.g. 'button').
        layout: 'void', 'inline' or 'block', fixed by VoidTag, InlineTag
            and BlockTag.
        registry: DefaultsRegistry holding the global defaults.

    Internal Attributes:
        _constructor: AttributeStore of attributes given to create().
        _attributes: AttributeStore of explicit fluent calls.
        _content: ContentModel of the body.
        _default_providers: Tuple of default provider references.
        _theme_providers: Tuple of (theme, provider reference) pairs.
        _prefix: (html, wrapping tag or None) rendered before the element.
        _suffix: (html, wrapping tag or None) rendered after the element.
        _options: Dict of trait options, replaced (never mutated) on change.
    """

    tag_name: ClassVar[str] = ""
    layout: ClassVar[str] = BLOCK
    registry: ClassVar[DefaultsRegistry] = defaults_registry
    _attribute_rules: ClassVar[dict[str, AttributeRule]]

    def __init_subclass__(cls, **kwargs: Any) -> None:
        """Collect the @attribute rules of the class MRO."""
        super().__init_subclass__(**kwargs)
        cls._attribute_rules = _collect_rules(cls)

    def __init__(self, attributes: Mapping[Any, Any] | None = None) -> None:
        self._constructor = AttributeStore()
        self._attributes = AttributeStore()
        self._content = ContentModel()
        self._default_providers: tuple[Any, ...] = ()
        self._theme_providers: tuple[tuple[str, Any], ...] = ()
        self._prefix: tuple[str, str | None] = ("", None)
        self._suffix: tuple[str, str | None] = ("", None)
        self._options: dict[str, Any] = {}
        if attributes:
            self._constructor = self._validated(self._constructor, attributes)

    @classmethod
    def create(cls, attributes: Mapping[Any, Any] | None = None) -> Self:
        """Create a tag. attributes are applied at the constructor precedence level.

        Raises:
            ValueNotInAllowedSet: If an enumerated attribute is invalid.
            AttributeInvalidValue: If a constrained attribute is invalid.
        """
        return cls(attributes)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"<{type(self).__name__} '{self._get_tag_name()}'>"

    # -------------------------------------------------------------------------
    # Copy-on-write helpers
    # -------------------------------------------------------------------------

    def _replace(self, **changes: Any) -> Self:
        """Return a shallow copy with the given internal attributes replaced."""
        new = copy.copy(self)
        for key, value in changes.items():
            setattr(new, key, value)
        return new

    def _with_option(self, key: str, value: Any) -> Self:
        return self._replace(_options={**self._options, key: value})

    def _option(self, key: str, default: Any = None) -> Any:
        return self._options.get(key, default)

    def _validate(self, name: str | Enum, value: Any) -> Any:
        rule = self._attribute_rules.get(canonical_name(name))
        if rule is None:
            return canonical_value(value)
        return rule.check(value)

    def _validated(self, store: AttributeStore, attributes: Mapping[Any, Any]) -> AttributeStore:
        for name, value in attributes.items():
            store = store.set(name, self._validate(name, value))
        return store

    # -------------------------------------------------------------------------
    # Attributes
    # -------------------------------------------------------------------------

    def set_attribute(self, name: str | Enum, value: Any) -> Self:
        """Set an attribute. None removes it, True renders it bare, False omits it.

        None removes the value given to create() as well, like remove_attribute().

        Raises:
            ValueNotInAllowedSet: If the attribute is enumerated and value is unknown.
            AttributeInvalidValue: If the attribute is constrained and value violates it.
        """
        value = self._validate(name, value)
        if value is None:
            return self.remove_attribute(name)
        return self._replace(_attributes=self._attributes.set(name, value))

    def add_attribute(self, name: str | Enum, value: Any) -> Self:
        """Add value to an attribute, accumulating space separated tokens.

        If the attribute already holds tokens (a string or a list), value
        tokens are appended, duplicates dropped. Otherwise this behaves like
        set_attribute().
        None leaves the tag unchanged.
        """
        if value is None:
            return self._replace()
        value = self._validate(name, value)
        current = self.get_attribute(name)
        if current and isinstance(current, (str, list, tuple)) and isinstance(value, (str, list, tuple)):
            value = join_tokens(current, value)
        return self._replace(_attributes=self._attributes.set(name, value))

    def remove_attribute(self, name: str | Enum) -> Self:
        """Remove an attribute set by create() or by fluent calls."""
        return self._replace(
            _constructor=self._constructor.remove(name),
            _attributes=self._attributes.remove(name),
        )

    def attributes(self, values: Mapping[Any, Any]) -> Self:
        """Set several attributes at once (validated like set_attribute)."""
        constructor = self._constructor
        for name, value in values.items():
            if value is None:
                constructor = constructor.remove(name)
        return self._replace(
            _constructor=constructor,
            _attributes=self._validated(self._attributes, values),
        )

    def get_attribute(self, name: str | Enum, default: Any = None) -> Any:
        """Return an attribute set by create() or fluent calls, or default."""
        return self._constructor.merge(self._attributes).get(name, default)

    def get_attributes(self) -> dict[str, Any]:
        """Return the attributes set by create() and fluent calls.

        Defaults coming from the registry or from providers are not
        included: see resolved_attributes().
        """
        return self._constructor.merge(self._attributes).to_dict()

    # -------------------------------------------------------------------------
    # Defaults
    # -------------------------------------------------------------------------

    def add_default_provider(self, provider: Any) -> Self:
        """Register a DefaultsProvider (instance, class or import string)."""
        return self._replace(_default_providers=self._default_providers + (provider,))

    def add_theme_provider(self, theme: str, provider: Any) -> Self:
        """Register a ThemeProvider applied with the given theme name."""
        return self._replace(_theme_providers=self._theme_providers + ((theme, provider),))

    @classmethod
    def type_id(cls) -> str:
        """Return the registry key of this tag type."""
        return f"{cls.__module__}.{cls.__qualname__}"

    @classmethod
    def set_global_defaults(cls, attributes: Mapping[Any, Any] | None) -> None:
        """Set the default attributes of every tag of this exact type.

        The baseline is read at render time. An empty mapping clears it.
        """
        cls.registry.set(cls.type_id(), attributes)

    @classmethod
    def clear_global_defaults(cls) -> None:
        """Remove the default attributes of this tag type."""
        cls.registry.clear(cls.type_id())

    def resolved_attributes(self) -> AttributeStore:
        """Return the final attributes, merging every precedence layer.

        Raises:
            UnresolvableProvider: If a provider reference cannot be used.
        """
        resolver = DefaultsResolver(type(self).registry)
        store = resolver.resolve(
            self.type_id(),
            self._constructor,
            self._default_providers,
            self._theme_providers,
            self._attributes,
            tag=self,
        )
        return self._finalize_attributes(store)

    def _finalize_attributes(self, store: AttributeStore) -> AttributeStore:
        """Hook for traits that derive attributes from the resolved set."""
        return store

    # -------------------------------------------------------------------------
    # Content
    # -------------------------------------------------------------------------

    def content(self, *values: Any) -> Self:
        """Set the text content, HTML-escaped at render time.

        Replaces any previous content() or html() value.
        """
        return self._replace(_content=self._content.set_encoded("".join(str(v) for v in values)))

    def html(self, *values: Any) -> Self:
        """Set trusted HTML content, inserted without escaping.

        Replaces any previous content() or html() value.
        """
        return self._replace(_content=self._content.set_raw("".join(str(v) for v in values)))

    def append_child(self, fragment: Any) -> Self:
        """Append a rendered fragment or a nested tag, rendered on its own line."""
        return self._replace(_content=self._content.append_child(fragment))

    def get_content(self) -> str:
        """Return the rendered body."""
        return self._content.render()

    def prefix(self, value: str, tag: str | None = None) -> Self:
        """Set HTML rendered on the line before the element, optionally wrapped in tag."""
        return self._replace(_prefix=(value, tag))

    def suffix(self, value: str, tag: str | None = None) -> Self:
        """Set HTML rendered on the line after the element, optionally wrapped in tag."""
        return self._replace(_suffix=(value, tag))

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------

    def _get_tag_name(self) -> str:
        return type(self).tag_name

    def _get_layout(self) -> str:
        return type(self).layout

    def _render_element(self, attributes: AttributeStore) -> str:
        """Render the element itself. Traits extend it with companion markup."""
        return render(self._get_tag_name(), self._get_layout(), attributes, self._content.render())

    def render(self) -> str:
        """Render the element (with prefix and suffix) to HTML."""
        element = self._render_element(self.resolved_attributes())
        parts = [_render_affix(*self._prefix), element, _render_affix(*self._suffix)]
        return "\n".join(part for part in parts if part)

    def begin(self) -> str:
        """Render the opening tag of a block element, for streamed bodies.

        Raises:
            InvalidTagError: If the element is inline or void.
        """
        return begin_tag(self._get_tag_name(), self.resolved_attributes()) + "\n"

    @classmethod
    def end(cls) -> str:
        """Render the closing tag matching begin().

        Raises:
            InvalidTagError: If the element is inline or void.
        """
        return "\n" + end_tag(cls.tag_name)


def _render_affix(value: str, tag: str | None) -> str:
    if not value or tag is None:
        return value
    return create_tag(tag, value)


BaseTag._attribute_rules = _collect_rules(BaseTag)


class VoidTag(BaseTag):
    """Element without body or closing tag (``<input>``, ``<img>``)."""

    layout = VOID


class InlineTag(BaseTag):
    """Element rendered on one line (``<button>label</button>``)."""

    layout = INLINE


class BlockTag(BaseTag):
    """Element whose body sits on its own lines (``<div>\\nbody\\n</div>``)."""

    layout = BLOCK
