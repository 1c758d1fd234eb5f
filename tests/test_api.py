from fastapi.testclient import TestClient

from seletor.api import create_app


def _client() -> TestClient:
    return TestClient(create_app())


def test_health() -> None:
    response = _client().get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_stringify_compound_selector() -> None:
    response = _client().post(
        "/selectors/stringify",
        json={
            "parts": [
                {"kind": "element", "value": "a"},
                {"kind": "id", "value": "x"},
                {"kind": "class", "value": "c1"},
                {"kind": "class", "value": "c2"},
                {"kind": "attribute", "value": 'href$=".png"'},
                {"kind": "pseudo_class", "value": "focus"},
                {"kind": "pseudo_element", "value": "before"},
            ]
        },
    )

    assert response.status_code == 200
    assert response.json() == {"selector": 'a#x.c1.c2[href$=".png"]:focus::before'}


def test_stringify_combined_selector() -> None:
    response = _client().post(
        "/selectors/stringify",
        json={
            "left": {
                "parts": [
                    {"kind": "element", "value": "div"},
                    {"kind": "id", "value": "main"},
                ]
            },
            "combinator": "+",
            "right": {
                "parts": [
                    {"kind": "element", "value": "table"},
                    {"kind": "id", "value": "data"},
                ]
            },
        },
    )

    assert response.status_code == 200
    assert response.json()["selector"] == "div#main + table#data"


def test_rule_violation_returns_422_with_message() -> None:
    response = _client().post(
        "/selectors/stringify",
        json={
            "parts": [
                {"kind": "pseudo_element", "value": "after"},
                {"kind": "pseudo_element", "value": "before"},
            ]
        },
    )

    assert response.status_code == 422
    assert "should not occur more then one time" in response.json()["detail"]


def test_malformed_payload_returns_422() -> None:
    response = _client().post("/selectors/stringify", json={"selector": "div"})

    assert response.status_code == 422
