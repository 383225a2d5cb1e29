from __future__ import annotations
from dataclasses import dataclass
from typing import Optional


@dataclass
class GenerationParams:
    size: int = 20
    seed: Optional[int] = None
    max_attempts: int = 50
    scramble: bool = True
