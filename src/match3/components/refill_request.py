from dataclasses import dataclass

@dataclass(slots=True)
class RefillRequest:
    """Marker for a REFILL notification awaiting an external refill."""
    sequence: int
