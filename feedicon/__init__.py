'''
Feedicon - find and retrieve the icon of a website or feed
'''
__version__ = (0, 1, 0, '')

import flask
from flask.cli import FlaskGroup
import click
from .config import Config, TestingConfig  # noqa
from .icons import bp as icons_blueprint
import feedicon.commands as commands

try:
    import tomllib as toml  # Python 3.11+
except ImportError:
    import tomli as toml


def create_app(config_class=None):
    app = flask.Flask(__name__, instance_relative_config=True)
    app.config.from_object(Config)

    if config_class:
        app.config.from_object(config_class)
    else:
        if app.config.from_file("config.toml", load=toml.load, text=False, silent=True):
            app.logger.info(f"Using config.toml file found in {app.instance_path}")
        else:
            # Attempt to load settings from env. vars
            app.config.from_prefixed_env(prefix="FEEDICON")

    app.logger.setLevel('DEBUG' if app.debug else app.config['LOG_LEVEL'])

    # Register icon routes
    app.register_blueprint(icons_blueprint)

    # Add CLI support
    commands.add_commands(app)

    return app


@click.group(cls=FlaskGroup, create_app=create_app)
def cli():
    """Management script for the Feedicon application."""
