import itertools
import random
import threading
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

from coin_arena.models import Collectible, Player
from .registry import DeltaPolicy, SessionRegistry, apply_trusted_delta
from .world import WorldSettings


STATUS_ACTIVE = 'active'
STATUS_FINISHED = 'finished'


class ClaimOutcome(Enum):
    IGNORED = 'ignored'
    STALE = 'stale'
    AWARDED = 'awarded'
    AWARDED_AND_RESPAWNED = 'awarded_and_respawned'


@dataclass
class ClaimResult:
    outcome: ClaimOutcome
    player: Optional[Player] = None
    new_score: Optional[int] = None
    collectible: Optional[Collectible] = None

    @property
    def awarded(self) -> bool:
        return self.outcome in (ClaimOutcome.AWARDED, ClaimOutcome.AWARDED_AND_RESPAWNED)


class GameCoordinator:
    """Owns the player registry, the live coin and the round status.

    All methods are synchronous and in-memory. Callers that dispatch
    events from several threads must hold ``lock`` around a mutation and
    the broadcasts that follow it, so that events apply one at a time.
    """

    def __init__(
        self,
        settings: Optional[WorldSettings] = None,
        rng: Optional[random.Random] = None,
        delta_policy: DeltaPolicy = apply_trusted_delta,
    ):
        self.settings = settings or WorldSettings()
        self.rng = rng or random.Random()
        self.registry = SessionRegistry(self.settings, self.rng, delta_policy)
        self.lock = threading.RLock()
        self.status = STATUS_ACTIVE
        self.winner_id: Optional[str] = None
        self._coin_ids = itertools.count(1)
        self._collectible = self._spawn_collectible()

    @property
    def is_finished(self) -> bool:
        return self.status == STATUS_FINISHED

    def _spawn_collectible(self) -> Collectible:
        x, y = self.settings.random_position(self.rng)
        return Collectible(id=next(self._coin_ids), x=x, y=y, value=self.settings.coin_value)

    def current_collectible(self) -> Collectible:
        return self._collectible

    def snapshot(self, connection_id: Optional[str] = None) -> Dict[str, Any]:
        """Full world state as sent to a freshly joined client."""
        return {
            'id': connection_id,
            'players': [p.to_dict() for p in self.registry.players()],
            'collectible': self._collectible.to_dict(),
        }

    def state(self) -> Dict[str, Any]:
        return {
            'status': self.status,
            'winner_id': self.winner_id,
            'players': [p.to_dict() for p in self.registry.players()],
            'collectible': self._collectible.to_dict(),
        }

    def claim(self, player_id, collectible_id) -> ClaimResult:
        """Arbitrate a pickup claim against the live coin.

        Only a claim naming the current coin id can score. A successful
        claim replaces the coin (or ends the round), so any later claim
        for the same coin is stale and there is never a double award.
        """
        # Player ids are connection sids; anything else is a malformed claim
        if not isinstance(player_id, str) or collectible_id is None or isinstance(collectible_id, bool):
            return ClaimResult(ClaimOutcome.IGNORED)
        if self.is_finished:
            return ClaimResult(ClaimOutcome.IGNORED)
        player = self.registry.get(player_id)
        if player is None:
            return ClaimResult(ClaimOutcome.IGNORED)
        if collectible_id != self._collectible.id:
            return ClaimResult(ClaimOutcome.STALE, player=player)

        player.score += self._collectible.value
        if player.score >= self.settings.win_score:
            self.status = STATUS_FINISHED
            self.winner_id = player.id
            return ClaimResult(ClaimOutcome.AWARDED, player=player, new_score=player.score)

        self._collectible = self._spawn_collectible()
        return ClaimResult(
            ClaimOutcome.AWARDED_AND_RESPAWNED,
            player=player,
            new_score=player.score,
            collectible=self._collectible,
        )
