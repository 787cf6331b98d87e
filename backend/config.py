import os

class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'you-will-never-guess'
    # Round rules
    WIN_SCORE = int(os.environ.get('WIN_SCORE', '10'))
    COIN_VALUE = int(os.environ.get('COIN_VALUE', '1'))
    # Spawn rectangle for players and coins (inclusive bounds)
    SPAWN_MIN_X = int(os.environ.get('SPAWN_MIN_X', '50'))
    SPAWN_MAX_X = int(os.environ.get('SPAWN_MAX_X', '549'))
    SPAWN_MIN_Y = int(os.environ.get('SPAWN_MIN_Y', '50'))
    SPAWN_MAX_Y = int(os.environ.get('SPAWN_MAX_Y', '349'))
    # Optional: fixed RNG seed for reproducible spawns. Unset means random.
    GAME_SEED = os.environ.get('GAME_SEED')
    SOCKETIO_NAMESPACE = os.environ.get('SOCKETIO_NAMESPACE', '/')
    CORS_ORIGINS = os.environ.get('CORS_ORIGINS', '*')
    POWERED_BY = os.environ.get('POWERED_BY', 'PHP 7.4.3')
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
