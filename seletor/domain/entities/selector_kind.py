"""Tipos de fragmento que compõem um seletor CSS e sua ordem canônica."""
from __future__ import annotations

from enum import IntEnum

from seletor.domain.errors import UnknownSelectorKindError


class SelectorKind(IntEnum):
    """Categoria estrutural de um fragmento; o valor inteiro é a ordem exigida.

    Um seletor composto precisa ler da esquerda para a direita em ordem não
    decrescente::

        element#id.class[attr]:pseudo-class::pseudo-element
    """

    ELEMENT = 0
    ID = 1
    CLASS = 2
    ATTRIBUTE = 3
    PSEUDO_CLASS = 4
    PSEUDO_ELEMENT = 5

    @property
    def is_singleton(self) -> bool:
        """Indica se o tipo pode aparecer no máximo uma vez por seletor."""

        return self in _SINGLETONS

    @property
    def label(self) -> str:
        return self.name.lower().replace("_", "-")

    def render(self, value: str) -> str:
        """Envolve o corpo do fragmento com a pontuação CSS do tipo."""

        prefix, suffix = _AFFIXES[self]
        return f"{prefix}{value}{suffix}"

    @classmethod
    def from_name(cls, name: str | SelectorKind) -> SelectorKind:
        """Resolve nomes como ``"class"``, ``"pseudo-class"`` ou ``"pseudoClass"``."""

        if isinstance(name, SelectorKind):
            return name
        kind = _ALIASES.get(_fold(str(name)))
        if kind is None:
            raise UnknownSelectorKindError(f"Unknown selector kind: {name!r}")
        return kind


_SINGLETONS = frozenset(
    {SelectorKind.ELEMENT, SelectorKind.ID, SelectorKind.PSEUDO_ELEMENT}
)

_AFFIXES = {
    SelectorKind.ELEMENT: ("", ""),
    SelectorKind.ID: ("#", ""),
    SelectorKind.CLASS: (".", ""),
    SelectorKind.ATTRIBUTE: ("[", "]"),
    SelectorKind.PSEUDO_CLASS: (":", ""),
    SelectorKind.PSEUDO_ELEMENT: ("::", ""),
}


def _fold(name: str) -> str:
    # "pseudo-class", "pseudo_class", "PseudoClass" -> "pseudoclass"
    return name.strip().replace("-", "").replace("_", "").lower()


_ALIASES = {_fold(kind.name): kind for kind in SelectorKind}
_ALIASES["attr"] = SelectorKind.ATTRIBUTE


__all__ = ["SelectorKind"]
