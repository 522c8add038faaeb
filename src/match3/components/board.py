from dataclasses import dataclass

@dataclass(slots=True)
class BoardInfo:
    """Dimensions of the board the world is tracking."""
    rows: int
    cols: int
