from flask import Flask

from .controllers.cli import bp as cli_bp


def create_app(config=None):
    app = Flask(__name__)
    app.config.from_mapping(LOG_LEVEL="WARNING")
    if config:
        app.config.update(config)

    # app.logger is the "fuel_station" logger; first access installs Flask's stderr handler
    app.logger.setLevel(app.config["LOG_LEVEL"])
    app.register_blueprint(cli_bp)

    return app
