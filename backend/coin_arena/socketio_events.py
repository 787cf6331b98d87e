from flask import current_app, request
from flask_socketio import emit
from coin_arena import socketio, GAME_EXTENSION
from coin_arena.services.game import ClaimOutcome, GameCoordinator
from typing import Any, Dict


def _game() -> GameCoordinator:
    return current_app.extensions[GAME_EXTENSION]


def _get_sid() -> str:
    # type: ignore: request.sid exists in Socket.IO context
    return request.sid  # type: ignore


def _payload(data) -> Dict[str, Any]:
    # Anything that is not an object is treated as an empty payload
    return data if isinstance(data, dict) else {}


def handle_connect(auth=None):
    current_app.logger.info(f"[connect] sid={_get_sid()}")


def handle_disconnect(reason=None):
    sid = _get_sid()
    game = _game()
    with game.lock:
        removed = game.registry.remove(sid)
        if removed is None:
            current_app.logger.info(f"[disconnect] sid={sid} never joined")
            return
        emit('player-removed', {'id': sid}, broadcast=True, include_self=False)
        current_app.logger.info(f"[leave] sid={sid} players={len(game.registry)}")


def handle_init_player(data=None):
    sid = _get_sid()
    game = _game()
    with game.lock:
        player, created = game.registry.register(sid, _payload(data))
        emit('init', game.snapshot(sid))
        if created:
            emit('new-player', player.to_dict(), broadcast=True, include_self=False)
            current_app.logger.info(
                f"[join] sid={sid} x={player.x} y={player.y} players={len(game.registry)}"
            )
        else:
            current_app.logger.debug(f"[join-resync] sid={sid}")


def handle_move(data=None):
    sid = _get_sid()
    game = _game()
    with game.lock:
        player = game.registry.apply_move(sid, _payload(data))
        if player is None:
            current_app.logger.debug(f"[move-discard] sid={sid} not registered")
            return
        emit('player-updated', player.to_dict(), broadcast=True, include_self=False)


def handle_claim(data=None):
    sid = _get_sid()
    payload = _payload(data)
    player_id = payload.get('playerId')
    collectible_id = payload.get('collectibleId')
    if player_id is not None and player_id != sid:
        current_app.logger.debug(f"[claim-discard] sid={sid} claimed for player={player_id}")
        return

    game = _game()
    with game.lock:
        result = game.claim(player_id, collectible_id)
        if result.outcome is ClaimOutcome.AWARDED:
            emit('game-over', {'winnerId': game.winner_id}, broadcast=True)
            current_app.logger.info(f"[game-over] winner={game.winner_id} score={result.new_score}")
        elif result.outcome is ClaimOutcome.AWARDED_AND_RESPAWNED:
            emit('new-collectible', {
                'collectible': result.collectible.to_dict(),
                'playerId': result.player.id,
                'players': [p.to_dict() for p in game.registry.players()],
            }, broadcast=True)
            current_app.logger.info(
                f"[claim] player={result.player.id} score={result.new_score} next_coin={result.collectible.id}"
            )
        else:
            current_app.logger.debug(
                f"[claim-{result.outcome.value}] sid={sid} coin={collectible_id}"
            )


def register_socketio_handlers(namespace: str = '/') -> None:
    """Register Socket.IO event handlers on the game namespace."""
    socketio.on_event('connect', handle_connect, namespace=namespace)
    socketio.on_event('disconnect', handle_disconnect, namespace=namespace)
    socketio.on_event('init-player', handle_init_player, namespace=namespace)
    socketio.on_event('move', handle_move, namespace=namespace)
    socketio.on_event('claim', handle_claim, namespace=namespace)
