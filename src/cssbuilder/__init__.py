"""Programmatic CSS selector builder."""

from cssbuilder.builder import CssSelectorBuilder, css_selector_builder
from cssbuilder.errors import DuplicateFragmentError, OrderViolationError, SelectorError
from cssbuilder.json_io import from_json, get_json
from cssbuilder.kinds import Combinator, FragmentKind, NodeKind
from cssbuilder.selector import CombinedSelector, SelectorNode, SimpleSelector
from cssbuilder.shapes import Rectangle

__all__ = [
    # builder
    "CssSelectorBuilder",
    "css_selector_builder",
    # selector nodes
    "SimpleSelector",
    "CombinedSelector",
    "SelectorNode",
    # kinds
    "FragmentKind",
    "NodeKind",
    "Combinator",
    # errors
    "SelectorError",
    "DuplicateFragmentError",
    "OrderViolationError",
    # helpers
    "Rectangle",
    "get_json",
    "from_json",
]
