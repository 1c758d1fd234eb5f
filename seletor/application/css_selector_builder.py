"""Fachada sem estado para criar seletores CSS a partir do primeiro fragmento."""
from __future__ import annotations

import logging

from seletor.domain import SelectorBuilder, SelectorKind

_log = logging.getLogger("seletor.builder")


class CssSelectorBuilder:
    """Pontos de entrada que sempre devolvem um ``SelectorBuilder`` novo.

    Nenhuma chamada compartilha estado com outra, então a mesma instância pode
    ser reutilizada livremente::

        builder = CssSelectorBuilder()
        builder.id("main").class_("container").stringify()  # '#main.container'
    """

    def element(self, value: str) -> SelectorBuilder:
        return self._start(SelectorKind.ELEMENT, value)

    def id(self, value: str) -> SelectorBuilder:
        return self._start(SelectorKind.ID, value)

    def class_(self, value: str) -> SelectorBuilder:
        return self._start(SelectorKind.CLASS, value)

    def attr(self, value: str) -> SelectorBuilder:
        return self._start(SelectorKind.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> SelectorBuilder:
        return self._start(SelectorKind.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> SelectorBuilder:
        return self._start(SelectorKind.PSEUDO_ELEMENT, value)

    def combine(
        self, left: SelectorBuilder, combinator: str, right: SelectorBuilder
    ) -> SelectorBuilder:
        """Cria um seletor terminal ``left <combinator> right``."""

        _log.debug("combine %r %r %r", left, combinator, right)
        return SelectorBuilder().combine(left, combinator, right)

    @staticmethod
    def _start(kind: SelectorKind, value: str) -> SelectorBuilder:
        _log.debug("novo seletor iniciado por %s=%r", kind.label, value)
        return SelectorBuilder().add(kind, value)


css_selector_builder = CssSelectorBuilder()


__all__ = ["CssSelectorBuilder", "css_selector_builder"]
