from dataclasses import dataclass, field
from typing import Any, List, Tuple

@dataclass(slots=True)
class MatchRecord:
    """One reported MATCH event.

    sequence orders records across MatchRecord and RefillRequest entities.
    cascade is True for single-cell matches predicted by the cascade probe.
    """
    sequence: int
    matched: Any
    positions: List[Tuple[int, int]] = field(default_factory=list)
    cascade: bool = False
