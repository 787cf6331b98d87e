import random
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple

from coin_arena.models import Player
from .world import WorldSettings, coerce_int


DeltaPolicy = Callable[[Player, Mapping[str, Any]], Player]

_MUTABLE_FIELDS = ('x', 'y', 'score')


def apply_trusted_delta(player: Player, delta: Mapping[str, Any]) -> Player:
    """Merge client-submitted position/score over the stored player.

    Values are accepted as submitted, without bounds or plausibility
    checks. Only non-numeric fields are skipped. The id is never read
    from the delta.
    """
    for field_name in _MUTABLE_FIELDS:
        if field_name not in delta:
            continue
        value = coerce_int(delta[field_name])
        if value is None:
            continue
        setattr(player, field_name, value)
    return player


class SessionRegistry:
    """Connected players keyed by connection id, in join order."""

    def __init__(
        self,
        settings: Optional[WorldSettings] = None,
        rng: Optional[random.Random] = None,
        delta_policy: DeltaPolicy = apply_trusted_delta,
    ):
        self.settings = settings or WorldSettings()
        self.rng = rng or random.Random()
        self.delta_policy = delta_policy
        self._players: Dict[str, Player] = {}

    def __len__(self) -> int:
        return len(self._players)

    def __contains__(self, connection_id) -> bool:
        return connection_id in self._players

    def get(self, connection_id) -> Optional[Player]:
        return self._players.get(connection_id)

    def players(self) -> List[Player]:
        return list(self._players.values())

    def register(self, connection_id: str, requested_init: Optional[Mapping[str, Any]] = None) -> Tuple[Player, bool]:
        """Return the player for this connection, creating it on first call.

        The second element is True only when a new record was created.
        Re-registering never resets position or score.
        """
        existing = self._players.get(connection_id)
        if existing is not None:
            return existing, False

        requested_init = requested_init or {}
        x = coerce_int(requested_init.get('x'))
        y = coerce_int(requested_init.get('y'))
        if x is None or y is None:
            rand_x, rand_y = self.settings.random_position(self.rng)
            x = rand_x if x is None else x
            y = rand_y if y is None else y
        score = coerce_int(requested_init.get('score'))

        player = Player(id=connection_id, x=x, y=y, score=score if score is not None else 0)
        self._players[connection_id] = player
        return player, True

    def apply_move(self, connection_id: str, proposed: Mapping[str, Any]) -> Optional[Player]:
        player = self._players.get(connection_id)
        if player is None:
            return None
        self.delta_policy(player, proposed)
        # The policy may be swapped out; the stored id stays server-assigned either way.
        player.id = connection_id
        return player

    def remove(self, connection_id: str) -> Optional[Player]:
        return self._players.pop(connection_id, None)

    def leaderboard(self) -> List[Player]:
        # sorted() is stable, so equal scores keep join order
        return sorted(self._players.values(), key=lambda p: p.score, reverse=True)

    def rank_of(self, player_id: str) -> Tuple[int, int]:
        board = self.leaderboard()
        for idx, player in enumerate(board, start=1):
            if player.id == player_id:
                return idx, len(board)
        return 0, len(board)
