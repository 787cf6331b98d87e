import math
import random
from dataclasses import dataclass
from typing import Any, Optional, Tuple


@dataclass(frozen=True)
class WorldSettings:
    """Round rules and the rectangle that players and coins spawn inside."""
    min_x: int = 50
    max_x: int = 549
    min_y: int = 50
    max_y: int = 349
    coin_value: int = 1
    win_score: int = 10

    @classmethod
    def from_config(cls, config) -> 'WorldSettings':
        return cls(
            min_x=int(config.get('SPAWN_MIN_X', 50)),
            max_x=int(config.get('SPAWN_MAX_X', 549)),
            min_y=int(config.get('SPAWN_MIN_Y', 50)),
            max_y=int(config.get('SPAWN_MAX_Y', 349)),
            coin_value=int(config.get('COIN_VALUE', 1)),
            win_score=int(config.get('WIN_SCORE', 10)),
        )

    def random_position(self, rng: random.Random) -> Tuple[int, int]:
        return rng.randint(self.min_x, self.max_x), rng.randint(self.min_y, self.max_y)


def coerce_int(value: Any) -> Optional[int]:
    """Return value as an int if it is numeric, else None.

    Accepts ints, finite floats and numeric strings. Booleans are not
    numbers here even though Python treats them as ints.
    """
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            value = float(value.strip())
        except ValueError:
            return None
    if isinstance(value, float):
        if not math.isfinite(value):
            return None
        return int(value)
    return None
