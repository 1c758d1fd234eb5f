"""Serialização JSON e reconstrução posicional de objetos."""
from __future__ import annotations

import json
from dataclasses import asdict, is_dataclass
from typing import Any, Callable, Mapping, TypeVar

from seletor.domain.errors import MalformedJSONError

T = TypeVar("T")


def _default(value: Any) -> Any:
    if is_dataclass(value) and not isinstance(value, type):
        return asdict(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def to_json(value: Any) -> str:
    """Serializa ``value`` em JSON compacto mantendo a ordem das chaves.

    Dataclasses são convertidas com ``dataclasses.asdict``; métodos não fazem
    parte da saída. ``NaN`` e infinitos não são JSON válido e levantam
    ``ValueError``.

    Examples:
        >>> to_json([1, 2, 3])
        '[1,2,3]'
        >>> to_json({"height": 10, "width": 20})
        '{"height":10,"width":20}'
    """

    return json.dumps(
        value,
        ensure_ascii=False,
        allow_nan=False,
        separators=(",", ":"),
        default=_default,
    )


def from_json(cls: Callable[..., T], text: str | bytes) -> T:
    """Reconstrói um objeto chamando ``cls`` com os valores do JSON em ordem.

    Os valores de um objeto JSON são passados posicionalmente na ordem de
    inserção das chaves; os nomes das chaves são ignorados. A ordem precisa
    coincidir com a dos parâmetros de ``cls``: ``'{"height":10,"width":20}'``
    reconstruído como ``Rectangle`` resulta em ``width=10``.

    Raises:
        MalformedJSONError: Quando ``text`` não é JSON válido ou não contém um
            objeto ou lista no nível superior.
    """

    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise MalformedJSONError(f"Invalid JSON for {_name_of(cls)}: {exc.msg}") from exc
    except UnicodeDecodeError as exc:
        raise MalformedJSONError(
            f"Undecodable JSON bytes for {_name_of(cls)}: {exc.reason}"
        ) from exc

    if isinstance(data, Mapping):
        values = list(data.values())
    elif isinstance(data, list):
        values = data
    else:
        raise MalformedJSONError(
            f"Expected a JSON object or array for {_name_of(cls)}, got {type(data).__name__}"
        )
    return cls(*values)


def _name_of(cls: Callable[..., Any]) -> str:
    return getattr(cls, "__name__", repr(cls))


__all__ = ["from_json", "to_json"]
