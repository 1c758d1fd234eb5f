"""Modelos Pydantic para descrever seletores CSS em JSON."""
from __future__ import annotations

from typing import Any, Literal, Mapping, Union

from pydantic import BaseModel, Field, TypeAdapter

from seletor.application import css_selector_builder
from seletor.domain import SelectorBuilder

KindName = Literal["element", "id", "class", "attribute", "pseudo_class", "pseudo_element"]
Combinator = Literal[" ", "+", "~", ">"]


class SelectorPartPayload(BaseModel):
    """Um fragmento do seletor: tipo e corpo literal."""

    #: Tipo estrutural do fragmento.
    kind: KindName
    #: Corpo do fragmento, sem a pontuação CSS do tipo.
    value: str


class CompoundSelectorPayload(BaseModel):
    """Seletor composto, como ``a#x.c1[href]:focus``."""

    #: Fragmentos na ordem em que devem ser anexados.
    parts: list[SelectorPartPayload] = Field(min_length=1)

    def to_domain(self) -> SelectorBuilder:
        """Reaplica os fragmentos em ordem, sujeitos às regras do builder."""

        builder = SelectorBuilder()
        for part in self.parts:
            builder.add(part.kind, part.value)
        return builder


class CombinedSelectorPayload(BaseModel):
    """Dois seletores unidos por um combinador CSS."""

    left: SelectorNodePayload
    combinator: Combinator
    right: SelectorNodePayload

    def to_domain(self) -> SelectorBuilder:
        return css_selector_builder.combine(
            self.left.to_domain(), self.combinator, self.right.to_domain()
        )


SelectorNodePayload = Union[CompoundSelectorPayload, CombinedSelectorPayload]

CombinedSelectorPayload.model_rebuild()


class SelectorResponse(BaseModel):
    """Representação do seletor renderizado devolvida pela API."""

    selector: str


_NODE_ADAPTER: TypeAdapter[SelectorNodePayload] = TypeAdapter(SelectorNodePayload)


def parse_selector_payload(data: Mapping[str, Any]) -> SelectorNodePayload:
    """Valida um mapeamento bruto como seletor composto ou combinado.

    Raises:
        pydantic.ValidationError: Quando ``data`` não corresponde a nenhum dos
            formatos.
    """

    return _NODE_ADAPTER.validate_python(data)


__all__ = [
    "CombinedSelectorPayload",
    "CompoundSelectorPayload",
    "SelectorNodePayload",
    "SelectorPartPayload",
    "SelectorResponse",
    "parse_selector_payload",
]
