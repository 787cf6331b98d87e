import os

from flask import Blueprint, current_app, send_from_directory

main = Blueprint('main', __name__)


def _static_dir(name: str) -> str:
    return os.path.join(current_app.root_path, name)


@main.route('/')
def index():
    return send_from_directory(_static_dir('views'), 'index.html', etag=False)


@main.route('/public/<path:filename>')
def public_file(filename):
    return send_from_directory(_static_dir('public'), filename, etag=False)


@main.route('/assets/<path:filename>')
def asset_file(filename):
    return send_from_directory(_static_dir('assets'), filename, etag=False)
