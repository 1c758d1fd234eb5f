"""API pública do domínio do Seletor.

Centraliza entidades e erros para que possam ser importados diretamente de
``seletor.domain``.
"""

from .entities import Circle, Rectangle, SelectorBuilder, SelectorKind
from .errors import (
    CombinedSelectorError,
    DuplicateKindError,
    MalformedJSONError,
    OrderError,
    SelectorError,
    UnknownSelectorKindError,
)

__all__ = [
    "SelectorBuilder",
    "SelectorKind",
    "Rectangle",
    "Circle",
    "SelectorError",
    "DuplicateKindError",
    "OrderError",
    "CombinedSelectorError",
    "UnknownSelectorKindError",
    "MalformedJSONError",
]
