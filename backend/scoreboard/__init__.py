from flask import Flask, request
from flask_sqlalchemy import SQLAlchemy
from flask_bcrypt import Bcrypt
from flask_login import LoginManager
from flask_cors import CORS
from flask_migrate import Migrate
import click
from config import Config

db = SQLAlchemy()
bcrypt = Bcrypt()
login_manager = LoginManager()
migrate = Migrate()


def _parse_origins(value):
    if not value or value.strip() == '*':
        return '*'
    return [origin.strip() for origin in value.split(',') if origin.strip()]


def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)
    flask_app.logger.setLevel(flask_app.config.get('LOG_LEVEL', 'INFO'))

    db.init_app(flask_app)
    bcrypt.init_app(flask_app)
    login_manager.init_app(flask_app)
    migrate.init_app(flask_app, db)
    CORS(
        flask_app,
        origins=_parse_origins(flask_app.config.get('CORS_ORIGINS')),
        methods=['GET', 'POST', 'PUT', 'DELETE', 'OPTIONS'],
        allow_headers=['Content-Type', 'Authorization'],
    )

    # Bearer-token guard for @login_required routes
    from scoreboard import auth  # noqa: F401

    from scoreboard.errors import register_error_handlers
    register_error_handlers(flask_app)

    from scoreboard.api.players import players
    from scoreboard.api.admin import admin
    from scoreboard.api.settings import settings
    # Mount under /api to match the frontend API client
    flask_app.register_blueprint(players, url_prefix='/api')
    flask_app.register_blueprint(admin, url_prefix='/api')
    flask_app.register_blueprint(settings, url_prefix='/api')

    @flask_app.before_request
    def log_request():
        flask_app.logger.info(f"[request] {request.method} {request.path}")

    @flask_app.route('/favicon.ico')
    def favicon():
        return '', 204

    @click.command('db-reset')
    def db_reset_command():
        """Drops and recreates the database (the admin must be initialized again)."""
        import scoreboard.models  # noqa: F401
        with flask_app.app_context():
            db.drop_all()
            db.create_all()
            click.echo('Database has been reset!')

    flask_app.cli.add_command(db_reset_command)

    return flask_app
