# chanquant/quantization/levels.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Union

from chanquant.config import OPTIMAL_SENTINEL, UNIFORM_SENTINEL

@dataclass(frozen=True)
class Optimal:
    """Per-channel centers solved from the image histogram."""

@dataclass(frozen=True)
class Uniform:
    """Equal-width bins over [0, 255]."""

@dataclass(frozen=True)
class Logarithmic:
    """Exponentially spaced centers; larger bias packs more levels near 0."""
    bias: int

QuantMode = Union[Optimal, Uniform, Logarithmic]

def resolve_mode(selector: Union[int, QuantMode]) -> QuantMode:
    """
    Turn the integer mode selector into a tagged mode.
    OPTIMAL_SENTINEL -> Optimal, UNIFORM_SENTINEL -> Uniform, anything else is a log bias.
    Already-resolved modes pass straight through.
    """
    if isinstance(selector, (Optimal, Uniform, Logarithmic)):
        return selector
    selector = int(selector)
    if selector == OPTIMAL_SENTINEL:
        return Optimal()
    if selector == UNIFORM_SENTINEL:
        return Uniform()
    return Logarithmic(bias=selector)

def resolve_levels(quality: int) -> Optional[int]:
    """
    Level count K = 2 ** (quality // 3), or None when the request is a pass-through
    (quality <= 0 or fewer than 3 quality points).
    """
    quality = int(quality)
    if quality <= 0:
        return None
    bits = quality // 3
    if bits <= 0:
        return None
    return 1 << bits
