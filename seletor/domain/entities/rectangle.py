"""Valores geométricos simples usados pelos utilitários de JSON."""
from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Rectangle:
    """Retângulo descrito por largura e altura."""

    width: float
    height: float

    def area(self) -> float:
        return self.width * self.height


@dataclass(frozen=True)
class Circle:
    """Círculo descrito pelo raio."""

    radius: float

    def area(self) -> float:
        return math.pi * self.radius**2


__all__ = ["Circle", "Rectangle"]
