# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Document structure: html, head, body."""

from __future__ import annotations

from ..base import BlockTag


class Html(BlockTag):
    """Root element. Set ``lang`` for accessible documents."""

    tag_name = "html"


class Head(BlockTag):
    tag_name = "head"


class Body(BlockTag):
    tag_name = "body"
