# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Flow content: grouping, sectioning and heading elements."""

from __future__ import annotations

from ..base import BlockTag, VoidTag


class Div(BlockTag):
    tag_name = "div"


class P(BlockTag):
    tag_name = "p"


class Hr(VoidTag):
    """Thematic break."""

    tag_name = "hr"


class Main(BlockTag):
    tag_name = "main"


class Header(BlockTag):
    tag_name = "header"


class Footer(BlockTag):
    tag_name = "footer"


class Nav(BlockTag):
    tag_name = "nav"


class Section(BlockTag):
    tag_name = "section"


class Article(BlockTag):
    tag_name = "article"


class Aside(BlockTag):
    tag_name = "aside"


class H1(BlockTag):
    tag_name = "h1"


class H2(BlockTag):
    tag_name = "h2"


class H3(BlockTag):
    tag_name = "h3"


class H4(BlockTag):
    tag_name = "h4"


class H5(BlockTag):
    tag_name = "h5"


class H6(BlockTag):
    tag_name = "h6"
