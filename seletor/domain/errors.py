"""Erros de domínio levantados durante a montagem de seletores."""
from __future__ import annotations

DUPLICATE_KIND_MESSAGE = (
    "Element, id and pseudo-element should not occur more then one time inside the selector"
)
ORDER_MESSAGE = (
    "Selector parts should be arranged in the following order: "
    "element, id, class, attribute, pseudo-class, pseudo-element"
)


class SelectorError(ValueError):
    """Base para violações das regras estruturais de um seletor CSS."""


class DuplicateKindError(SelectorError):
    """Element, id ou pseudo-element repetido no mesmo seletor."""

    def __init__(self, kind: str) -> None:
        super().__init__(DUPLICATE_KIND_MESSAGE)
        #: Nome do tipo de fragmento que já estava presente.
        self.kind = kind


class OrderError(SelectorError):
    """Fragmento adicionado depois de outro de ordem superior."""

    def __init__(self, kind: str, previous: str) -> None:
        super().__init__(ORDER_MESSAGE)
        #: Tipo do fragmento rejeitado.
        self.kind = kind
        #: Tipo do último fragmento já presente no seletor.
        self.previous = previous


class CombinedSelectorError(SelectorError):
    """Operação estrutural aplicada a um seletor já combinado."""


class UnknownSelectorKindError(SelectorError):
    """Nome de tipo de fragmento que não corresponde a nenhum ``SelectorKind``."""


class MalformedJSONError(ValueError):
    """Texto JSON inválido ou com formato inesperado para reconstrução."""


__all__ = [
    "CombinedSelectorError",
    "DuplicateKindError",
    "MalformedJSONError",
    "OrderError",
    "SelectorError",
    "UnknownSelectorKindError",
]
