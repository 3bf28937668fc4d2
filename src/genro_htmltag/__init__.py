# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""genro-htmltag: immutable, composable HTML tags.

Every fluent call returns a new tag; the receiver is never modified.
Attributes are merged at render time from, in ascending precedence:

    global defaults < create() attributes < default providers
    < theme providers < explicit fluent calls

Main components:
    - **BaseTag** (VoidTag, InlineTag, BlockTag): fluent element API
    - **elements**: element catalog (Div, Button, Input, Ol...)
    - **DefaultsRegistry**: per-type global defaults (``defaults_registry``)
    - **DefaultsProvider** / **ThemeProvider**: pluggable attribute sources
    - **create_tag**, **begin_tag**, **end_tag**: functional generator

Example:
    >>> from genro_htmltag import Button, Target, A
    >>> Button.create({'id': 'save'}).type('submit').content('Save').render()
    '<button id="save" type="submit">Save</button>'
    >>> A.create().href('/').target(Target.BLANK).content('Home').render()
    '<a href="/" target="_blank">Home</a>'
"""

from genro_htmltag.attribute_store import AttributeStore
from genro_htmltag.base import BaseTag, BlockTag, InlineTag, VoidTag, attribute
from genro_htmltag.content import ContentModel
from genro_htmltag.elements import (
    H1,
    H2,
    H3,
    H4,
    H5,
    H6,
    A,
    Article,
    Aside,
    Base,
    Body,
    Button,
    Dd,
    Div,
    Dl,
    Dt,
    Footer,
    Form,
    Head,
    Header,
    Hr,
    Html,
    I,
    Img,
    Input,
    InputCheckbox,
    InputEmail,
    InputHidden,
    InputNumber,
    InputPassword,
    InputRadio,
    InputSubmit,
    InputText,
    Label,
    Li,
    Link,
    Main,
    Meta,
    Nav,
    NoScript,
    Ol,
    P,
    Script,
    Section,
    Span,
    Style,
    Tag,
    Template,
    TextArea,
    Title,
    Ul,
)
from genro_htmltag.exceptions import (
    AttributeInvalidValue,
    HtmlTagError,
    InvalidAttributeName,
    InvalidTagError,
    UnresolvableProvider,
    ValueNotInAllowedSet,
)
from genro_htmltag.providers import (
    DefaultsProvider,
    DefaultsRegistry,
    DefaultsResolver,
    StaticDefaultsProvider,
    StaticThemeProvider,
    ThemeProvider,
    defaults_registry,
)
from genro_htmltag.renderer import begin_tag, create_tag, end_tag, render_attributes
from genro_htmltag.validations import Range, Regex
from genro_htmltag.values import Aria, GlobalAttribute, Target

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # core
    "AttributeStore",
    "BaseTag",
    "BlockTag",
    "ContentModel",
    "InlineTag",
    "VoidTag",
    "attribute",
    "Range",
    "Regex",
    # defaults
    "DefaultsProvider",
    "DefaultsRegistry",
    "DefaultsResolver",
    "StaticDefaultsProvider",
    "StaticThemeProvider",
    "ThemeProvider",
    "defaults_registry",
    # functional generator
    "begin_tag",
    "create_tag",
    "end_tag",
    "render_attributes",
    # errors
    "AttributeInvalidValue",
    "HtmlTagError",
    "InvalidAttributeName",
    "InvalidTagError",
    "UnresolvableProvider",
    "ValueNotInAllowedSet",
    # values
    "Aria",
    "GlobalAttribute",
    "Target",
    # elements
    "A",
    "Article",
    "Aside",
    "Base",
    "Body",
    "Button",
    "Dd",
    "Div",
    "Dl",
    "Dt",
    "Footer",
    "Form",
    "H1",
    "H2",
    "H3",
    "H4",
    "H5",
    "H6",
    "Head",
    "Header",
    "Hr",
    "Html",
    "I",
    "Img",
    "Input",
    "InputCheckbox",
    "InputEmail",
    "InputHidden",
    "InputNumber",
    "InputPassword",
    "InputRadio",
    "InputSubmit",
    "InputText",
    "Label",
    "Li",
    "Link",
    "Main",
    "Meta",
    "Nav",
    "NoScript",
    "Ol",
    "P",
    "Script",
    "Section",
    "Span",
    "Style",
    "Tag",
    "Template",
    "TextArea",
    "Title",
    "Ul",
]
