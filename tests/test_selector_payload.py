import pytest
from pydantic import ValidationError

from seletor.domain import OrderError
from seletor.schemas import (
    CombinedSelectorPayload,
    CompoundSelectorPayload,
    SelectorPartPayload,
    parse_selector_payload,
)


def test_compound_payload_replays_parts_in_order() -> None:
    payload = CompoundSelectorPayload(
        parts=[
            SelectorPartPayload(kind="element", value="a"),
            SelectorPartPayload(kind="attribute", value="target=_blank"),
            SelectorPartPayload(kind="pseudo_class", value="visited"),
        ]
    )

    assert payload.to_domain().stringify() == "a[target=_blank]:visited"


def test_compound_payload_applies_ordering_rules() -> None:
    payload = CompoundSelectorPayload(
        parts=[
            SelectorPartPayload(kind="class", value="item"),
            SelectorPartPayload(kind="element", value="li"),
        ]
    )

    with pytest.raises(OrderError):
        payload.to_domain()


def test_parse_selector_payload_builds_nested_combinations() -> None:
    payload = parse_selector_payload(
        {
            "left": {"parts": [{"kind": "element", "value": "nav"}]},
            "combinator": ">",
            "right": {
                "left": {"parts": [{"kind": "element", "value": "ul"}]},
                "combinator": " ",
                "right": {
                    "parts": [
                        {"kind": "element", "value": "a"},
                        {"kind": "class", "value": "active"},
                    ]
                },
            },
        }
    )

    assert isinstance(payload, CombinedSelectorPayload)
    assert isinstance(payload.right, CombinedSelectorPayload)
    assert payload.to_domain().stringify() == "nav > ul   a.active"


def test_parse_selector_payload_returns_compound_for_parts() -> None:
    payload = parse_selector_payload({"parts": [{"kind": "id", "value": "main"}]})

    assert isinstance(payload, CompoundSelectorPayload)


def test_unknown_combinator_is_rejected() -> None:
    with pytest.raises(ValidationError):
        parse_selector_payload(
            {
                "left": {"parts": [{"kind": "element", "value": "a"}]},
                "combinator": "|",
                "right": {"parts": [{"kind": "element", "value": "b"}]},
            }
        )


def test_empty_parts_are_rejected() -> None:
    with pytest.raises(ValidationError):
        CompoundSelectorPayload(parts=[])


def test_unknown_kind_is_rejected() -> None:
    with pytest.raises(ValidationError):
        SelectorPartPayload(kind="combinator", value="+")
