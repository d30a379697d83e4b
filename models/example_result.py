from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class ExampleResult:
    """
    Data object describing one finished example run.
    """
    name: str
    outputs: list[Path] = field(default_factory=list) # Written files, in order.
