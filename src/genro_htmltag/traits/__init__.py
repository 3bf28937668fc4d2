# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Capability traits: small mixins contributing fluent attribute setters.

Traits are combined with a tag base class to declare an element:

    class A(HasHref, HasTarget, HasRel, InlineTag):
        tag_name = 'a'

Modules:
    global_attributes: attributes valid on every element (BaseTag mixes them in)
    link: href, target, rel, crossorigin, referrerpolicy...
    embedded: src, alt, width, height, loading...
    form: form controls (disabled, name, value, type, aria-describedby...)
    lists: ordered list attributes
    metadata: meta, link, script and template attributes

Trait methods rely on the BaseTag API (set_attribute, get_attribute,
_with_option...) and must be listed before the tag base class.
"""
