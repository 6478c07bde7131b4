"""Facade for building CSS selectors.

Example::

    from cssbuilder import css_selector_builder as css

    css.combine(
        css.element("div").id("main").class_("container"),
        "+",
        css.combine(css.element("table").id("data"), "~", css.element("tr")),
    ).stringify()
    # 'div#main.container + table#data ~ tr'
"""

from __future__ import annotations

import logging

from cssbuilder.selector import CombinedSelector, SelectorNode, SimpleSelector

logger = logging.getLogger(__name__)


class CssSelectorBuilder:
    """Entry point that starts new selector nodes.

    Each fragment method returns a fresh ``SimpleSelector`` seeded with one
    fragment; the builder itself holds no state.
    """

    def element(self, value: str) -> SimpleSelector:
        return SimpleSelector().element(value)

    def id(self, value: str) -> SimpleSelector:
        return SimpleSelector().id(value)

    def class_(self, value: str) -> SimpleSelector:
        return SimpleSelector().class_(value)

    def attr(self, value: str) -> SimpleSelector:
        return SimpleSelector().attr(value)

    def pseudo_class(self, value: str) -> SimpleSelector:
        return SimpleSelector().pseudo_class(value)

    def pseudo_element(self, value: str) -> SimpleSelector:
        return SimpleSelector().pseudo_element(value)

    def combine(
        self, left: SelectorNode, combinator: str, right: SelectorNode
    ) -> CombinedSelector:
        """Join *left* and *right* with *combinator* (``' '``, ``'>'``, ``'+'``, ``'~'``)."""
        logger.debug("Combining selectors with %r", combinator)
        return CombinedSelector(left=left, combinator=combinator, right=right)


# ``class`` is a keyword, so the spelling ``getattr(builder, "class")`` is an alias.
setattr(CssSelectorBuilder, "class", CssSelectorBuilder.class_)

css_selector_builder = CssSelectorBuilder()
