"""Construtor fluente de seletores CSS com validação de ordem e cardinalidade."""
from __future__ import annotations

from seletor.domain.errors import CombinedSelectorError, DuplicateKindError, OrderError

from .selector_kind import SelectorKind


class SelectorBuilder:
    """Acumula fragmentos de um seletor CSS na ordem das chamadas.

    Cada método estrutural devolve a própria instância para encadeamento::

        SelectorBuilder().element("a").attr('href$=".png"').pseudo_class("focus")

    Um builder produzido por :meth:`combine` é terminal: aceita apenas
    :meth:`stringify`.
    """

    def __init__(self) -> None:
        self._fragments: list[str] = []
        self._kinds: list[SelectorKind] = []
        self._combined = False

    @property
    def fragments(self) -> tuple[str, ...]:
        return tuple(self._fragments)

    @property
    def kinds(self) -> tuple[SelectorKind, ...]:
        """Sequência de tipos paralela a ``fragments``; vazia quando combinado."""

        return tuple(self._kinds)

    @property
    def seen_element(self) -> bool:
        return SelectorKind.ELEMENT in self._kinds

    @property
    def seen_id(self) -> bool:
        return SelectorKind.ID in self._kinds

    @property
    def seen_pseudo_element(self) -> bool:
        return SelectorKind.PSEUDO_ELEMENT in self._kinds

    @property
    def is_combined(self) -> bool:
        return self._combined

    def element(self, value: str) -> SelectorBuilder:
        return self.add(SelectorKind.ELEMENT, value)

    def id(self, value: str) -> SelectorBuilder:
        return self.add(SelectorKind.ID, value)

    def class_(self, value: str) -> SelectorBuilder:
        return self.add(SelectorKind.CLASS, value)

    def attr(self, value: str) -> SelectorBuilder:
        return self.add(SelectorKind.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> SelectorBuilder:
        return self.add(SelectorKind.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> SelectorBuilder:
        return self.add(SelectorKind.PSEUDO_ELEMENT, value)

    def add(self, kind: SelectorKind | str, value: str) -> SelectorBuilder:
        """Valida e anexa um fragmento do tipo informado.

        Args:
            kind: ``SelectorKind`` ou nome aceito por ``SelectorKind.from_name``.
            value: Corpo do fragmento, usado literalmente.

        Raises:
            CombinedSelectorError: Quando o builder já é uma combinação.
            DuplicateKindError: Ao repetir element, id ou pseudo-element.
            OrderError: Quando o último fragmento tem ordem superior a ``kind``.
        """

        kind = SelectorKind.from_name(kind)
        if self._combined:
            raise CombinedSelectorError(
                f"Cannot append {kind.label} to a combined selector"
            )
        if kind.is_singleton and kind in self._kinds:
            raise DuplicateKindError(kind.label)
        if self._kinds and self._kinds[-1] > kind:
            raise OrderError(kind.label, self._kinds[-1].label)

        self._fragments.append(kind.render(value))
        self._kinds.append(kind)
        return self

    def combine(
        self, left: SelectorBuilder, combinator: str, right: SelectorBuilder
    ) -> SelectorBuilder:
        """Transforma este builder vazio em ``left <combinator> right``.

        Os dois seletores de entrada são apenas lidos. O combinador é usado
        literalmente, cercado por um espaço de cada lado.

        Raises:
            CombinedSelectorError: Quando este builder já possui fragmentos.
        """

        if self._fragments:
            raise CombinedSelectorError("combine requires an empty selector builder")

        self._fragments = [left.stringify(), " ", combinator, " ", right.stringify()]
        self._kinds = []
        self._combined = True
        return self

    def copy(self) -> SelectorBuilder:
        """Cria um builder independente com o mesmo estado."""

        clone = SelectorBuilder()
        clone._fragments = list(self._fragments)
        clone._kinds = list(self._kinds)
        clone._combined = self._combined
        return clone

    def stringify(self) -> str:
        return "".join(self._fragments)

    def __str__(self) -> str:
        return self.stringify()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.stringify()!r})"


__all__ = ["SelectorBuilder"]
