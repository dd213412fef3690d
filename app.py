from flask import Flask
from dotenv import load_dotenv
import logging

load_dotenv()

from config import Config  # noqa: E402  (load_dotenv needs to run first)
from extensions import db, login_manager  # noqa: E402  (load_dotenv needs to run first)


def configure_logging(app: Flask) -> None:
    level = logging.getLevelName(str(app.config.get("LOG_LEVEL", "INFO")).upper())
    if not isinstance(level, int):
        level = logging.INFO
    app.logger.setLevel(level)


def create_app(test_config: dict | None = None) -> Flask:
    """Application factory for the task tracker."""

    app = Flask(__name__)
    app.config.from_object(Config)
    if test_config:
        app.config.update(test_config)
    app.json.sort_keys = app.config.get("JSON_SORT_KEYS", False)

    configure_logging(app)

    # init extensions
    db.init_app(app)
    login_manager.init_app(app)

    from errors import register_error_handlers
    register_error_handlers(app)

    # blueprints
    from modules.auth import bp as auth_bp
    from modules.tasks import bp as tasks_bp
    from modules.weekly_notes import bp as weekly_notes_bp
    from modules.users import bp as users_bp
    from modules.reports import bp as reports_bp

    app.register_blueprint(auth_bp)
    app.register_blueprint(tasks_bp)
    app.register_blueprint(weekly_notes_bp)
    app.register_blueprint(users_bp)
    app.register_blueprint(reports_bp)

    from ui_routes import ui
    app.register_blueprint(ui)

    # DB
    with app.app_context():
        # models must be imported before create_all()
        import models  # noqa: F401
        from modules.tasks import models as task_models  # noqa: F401
        from modules.weekly_notes import models as weekly_note_models  # noqa: F401

        db.create_all()

    return app

if __name__ == "__main__":
    app = create_app()
    app.run(debug=True)
