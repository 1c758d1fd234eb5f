"""Entidades de domínio para montagem de seletores e valores simples."""
from .rectangle import Circle, Rectangle
from .selector_builder import SelectorBuilder
from .selector_kind import SelectorKind

__all__ = ["SelectorBuilder", "SelectorKind", "Rectangle", "Circle"]
