import random

from coin_arena.services.game import ClaimOutcome, GameCoordinator, WorldSettings


def _game(**settings):
    return GameCoordinator(WorldSettings(**settings), rng=random.Random(3))


def test_initial_coin_is_inside_spawn_rectangle():
    settings = WorldSettings()
    game = _game()
    coin = game.current_collectible()
    assert settings.min_x <= coin.x <= settings.max_x
    assert settings.min_y <= coin.y <= settings.max_y
    assert coin.value == 1
    assert not game.is_finished


def test_snapshot_contains_every_player_and_live_coin():
    game = _game()
    game.registry.register('A', {'x': 1, 'y': 2})
    game.registry.register('B', {'x': 3, 'y': 4})
    snapshot = game.snapshot('B')
    assert snapshot['id'] == 'B'
    assert [p['id'] for p in snapshot['players']] == ['A', 'B']
    assert snapshot['collectible'] == game.current_collectible().to_dict()


def test_claim_matching_coin_respawns():
    game = _game()
    game.registry.register('A', {})
    old = game.current_collectible()

    result = game.claim('A', old.id)
    assert result.outcome is ClaimOutcome.AWARDED_AND_RESPAWNED
    assert result.awarded
    assert result.new_score == 1
    assert result.collectible is game.current_collectible()
    assert result.collectible.id > old.id


def test_second_claim_for_same_coin_is_stale():
    game = _game()
    game.registry.register('A', {})
    game.registry.register('B', {})
    coin_id = game.current_collectible().id

    assert game.claim('A', coin_id).awarded
    result = game.claim('B', coin_id)
    assert result.outcome is ClaimOutcome.STALE
    assert game.registry.get('A').score == 1
    assert game.registry.get('B').score == 0

    # Replaying the winning message does not score again either
    assert game.claim('A', coin_id).outcome is ClaimOutcome.STALE
    assert game.registry.get('A').score == 1


def test_claim_uses_coin_value():
    game = _game(coin_value=3)
    game.registry.register('A', {})
    result = game.claim('A', game.current_collectible().id)
    assert result.new_score == 3


def test_malformed_or_unknown_claims_are_ignored():
    game = _game()
    game.registry.register('A', {})
    coin_id = game.current_collectible().id
    assert game.claim(None, coin_id).outcome is ClaimOutcome.IGNORED
    assert game.claim('A', None).outcome is ClaimOutcome.IGNORED
    assert game.claim('A', True).outcome is ClaimOutcome.IGNORED
    assert game.claim('ghost', coin_id).outcome is ClaimOutcome.IGNORED
    assert game.claim(['A'], coin_id).outcome is ClaimOutcome.IGNORED
    assert game.claim({'id': 'A'}, coin_id).outcome is ClaimOutcome.IGNORED
    assert game.current_collectible().id == coin_id


def test_reaching_win_score_finishes_round():
    game = _game()
    game.registry.register('A', {'score': 9})
    coin = game.current_collectible()

    result = game.claim('A', coin.id)
    assert result.outcome is ClaimOutcome.AWARDED
    assert result.new_score == 10
    assert result.collectible is None
    assert game.is_finished
    assert game.winner_id == 'A'
    assert game.current_collectible() is coin
    assert game.state()['status'] == 'finished'


def test_claims_after_finish_are_ignored():
    game = _game(win_score=1)
    game.registry.register('A', {})
    game.registry.register('B', {})
    coin_id = game.current_collectible().id
    assert game.claim('A', coin_id).outcome is ClaimOutcome.AWARDED

    assert game.claim('B', coin_id).outcome is ClaimOutcome.IGNORED
    assert game.registry.get('B').score == 0
    assert game.winner_id == 'A'


def test_coin_ids_are_strictly_increasing():
    game = _game(win_score=1000)
    game.registry.register('A', {})
    seen = [game.current_collectible().id]
    for _ in range(20):
        game.claim('A', game.current_collectible().id)
        seen.append(game.current_collectible().id)
    assert seen == sorted(set(seen))
