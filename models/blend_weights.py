from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class BlendWeights:
    """
    Value-object for weighted addition:
    dst = alpha * src1 + beta * src2 + gamma
    """
    alpha: float = 0.6
    beta:  float = 0.4
    gamma: float = 0.0
