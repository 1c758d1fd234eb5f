"""Esquemas Pydantic para entrada e saída de seletores."""
from .selector_payload import (
    CombinedSelectorPayload,
    CompoundSelectorPayload,
    SelectorNodePayload,
    SelectorPartPayload,
    SelectorResponse,
    parse_selector_payload,
)

__all__ = [
    "CombinedSelectorPayload",
    "CompoundSelectorPayload",
    "SelectorNodePayload",
    "SelectorPartPayload",
    "SelectorResponse",
    "parse_selector_payload",
]
