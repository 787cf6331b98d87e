import random

from flask import Flask
from flask_cors import CORS
from flask_socketio import SocketIO
from config import Config
from coin_arena.headers import HeaderPolicyMiddleware

socketio = SocketIO(async_mode=None)

GAME_EXTENSION = 'coin_arena.game'


def create_game(config) -> 'GameCoordinator':
    """Build a fresh coordinator from the app config."""
    from coin_arena.services.game import GameCoordinator, WorldSettings

    seed = config.get('GAME_SEED')
    rng = random.Random(int(seed)) if seed not in (None, '') else random.Random()
    return GameCoordinator(WorldSettings.from_config(config), rng=rng)


def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)
    flask_app.logger.setLevel(flask_app.config.get('LOG_LEVEL', 'INFO'))

    origins = flask_app.config.get('CORS_ORIGINS', '*')
    CORS(flask_app, origins=origins)

    # Initialize Socket.IO after app is created
    socketio.init_app(flask_app, cors_allowed_origins=origins)
    # wsgi_app is now the Socket.IO middleware; wrap it so engine.io responses get the policy too
    flask_app.wsgi_app = HeaderPolicyMiddleware(
        flask_app.wsgi_app, flask_app.config.get('POWERED_BY', 'PHP 7.4.3')
    )

    # One coordinator per application; handlers look it up via current_app
    flask_app.extensions[GAME_EXTENSION] = create_game(flask_app.config)

    from coin_arena.main import main
    flask_app.register_blueprint(main)

    from coin_arena.api.game import game_api
    flask_app.register_blueprint(game_api, url_prefix='/api/game')

    from coin_arena.socketio_events import register_socketio_handlers
    register_socketio_handlers(namespace=flask_app.config.get('SOCKETIO_NAMESPACE', '/'))

    return flask_app
