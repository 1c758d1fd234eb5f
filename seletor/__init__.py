"""Seletor - construtor fluente de seletores CSS e utilitários de objetos."""
from .application import CssSelectorBuilder, css_selector_builder, from_json, to_json
from .domain import (
    Circle,
    CombinedSelectorError,
    DuplicateKindError,
    MalformedJSONError,
    OrderError,
    Rectangle,
    SelectorBuilder,
    SelectorError,
    SelectorKind,
    UnknownSelectorKindError,
)

__all__ = [
    "SelectorBuilder",
    "SelectorKind",
    "CssSelectorBuilder",
    "css_selector_builder",
    "Rectangle",
    "Circle",
    "to_json",
    "from_json",
    "SelectorError",
    "DuplicateKindError",
    "OrderError",
    "CombinedSelectorError",
    "UnknownSelectorKindError",
    "MalformedJSONError",
]
