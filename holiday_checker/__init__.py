# holiday_checker/__init__.py

import logging
from flask import Flask
from flask_cors import CORS
from .config import Config
from .api.routes import api_bp
from .main.routes import main_bp
from .core.countries import country_choices
from .services.calendarific import CalendarificClient


def create_app(config_overrides=None):
    app = Flask(__name__, instance_relative_config=True)
    app.config.from_object(Config)
    app.config.from_pyfile('config.py', silent=True)
    if config_overrides:
        app.config.update(config_overrides)

    logging.basicConfig(
        level=app.config.get('LOG_LEVEL', 'INFO'),
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )
    app.logger.setLevel(app.config.get('LOG_LEVEL', 'INFO'))

    CORS(app, resources={r'/api/*': {'origins': '*'}})

    app.extensions['calendarific'] = CalendarificClient.from_config(app.config)
    if not app.config.get('CALENDARIFIC_API_KEY'):
        app.logger.warning("CALENDARIFIC_API_KEY is not set; holiday requests will fail")

    app.register_blueprint(api_bp)
    app.register_blueprint(main_bp)

    @app.context_processor
    def inject_countries():
        """Injects the country selector list into every template."""
        return dict(countries=country_choices(app.config.get('COUNTRIES')))

    return app
