# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Element catalog.

Each element is a thin declaration: capability traits + a layout base
class + the element name. All the behavior lives in BaseTag and traits.
"""

from .document import Body, Head, Html
from .flow import H1, H2, H3, H4, H5, H6, Article, Aside, Div, Footer, Header, Hr, Main, Nav, P, Section
from .form import (
    Button,
    Form,
    Input,
    InputCheckbox,
    InputEmail,
    InputHidden,
    InputNumber,
    InputPassword,
    InputRadio,
    InputSubmit,
    InputText,
    TextArea,
)
from .generic import Tag
from .lists import Dd, Dl, Dt, Li, Ol, Ul
from .metadata import Base, Link, Meta, NoScript, Script, Style, Template, Title
from .phrasing import A, I, Img, Label, Span

__all__ = [
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
