from dataclasses import dataclass
from typing import Any, Dict


@dataclass
class Player:
    id: str
    x: int
    y: int
    score: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'x': self.x,
            'y': self.y,
            'score': self.score,
        }


@dataclass(frozen=True)
class Collectible:
    """The single coin on the board. A new instance replaces it on every pickup."""
    id: int
    x: int
    y: int
    value: int = 1

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'x': self.x,
            'y': self.y,
            'value': self.value,
        }
