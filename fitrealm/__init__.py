# fitrealm/__init__.py

from flask import Flask, jsonify
from flask_cors import CORS
from flask_sqlalchemy import SQLAlchemy
from flask_jwt_extended import JWTManager
from sqlalchemy import event

from config import Config

db = SQLAlchemy()
jwt = JWTManager()


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    # SQLite ignores ON DELETE CASCADE unless this is set per connection
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_app(config_object=Config):
    app = Flask(__name__)
    app.config.from_object(config_object)
    app.logger.setLevel(app.config.get("LOG_LEVEL", "INFO"))

    # Init extensions
    db.init_app(app)
    jwt.init_app(app)

    CORS(
        app,
        resources={r"/api/*": {"origins": app.config.get("CORS_ORIGINS", "*")}},
        supports_credentials=True,
    )

    # -----------------------------
    # JWT error handlers
    # -----------------------------
    @jwt.unauthorized_loader
    def unauthorized_callback(reason):
        return (
            jsonify(
                {
                    "message": "Authentication required",
                    "error": "Unauthenticated",
                }
            ),
            401,
        )

    @jwt.invalid_token_loader
    def invalid_token_callback(reason):
        app.logger.info(f"[auth] rejected token: {reason}")
        return (
            jsonify(
                {
                    "message": "Invalid session",
                    "error": "Unauthenticated",
                }
            ),
            401,
        )

    @jwt.expired_token_loader
    def expired_token_callback(jwt_header, jwt_payload):
        return jsonify({"message": "Session has expired", "error": "Unauthenticated"}), 401

    from .errors import register_error_handlers

    register_error_handlers(app)

    # -----------------------------
    # IMPORT BLUEPRINTS (all routes)
    # -----------------------------
    from .routes.auth_routes import auth_bp
    from .routes.user_routes import user_bp
    from .routes.character_routes import character_bp
    from .routes.fitness_routes import fitness_bp
    from .routes.quest_routes import quests_bp
    from .routes.battle_routes import battles_bp
    from .routes.leaderboard_routes import leaderboard_bp
    from .routes.story_routes import story_bp
    from .routes.rewards_routes import rewards_bp
    from .routes.dashboard_routes import dashboard_bp

    # -----------------------------
    # REGISTER BLUEPRINTS
    # -----------------------------
    app.register_blueprint(auth_bp, url_prefix="/api/auth")
    app.register_blueprint(user_bp, url_prefix="/api/user")
    app.register_blueprint(character_bp, url_prefix="/api/character")
    app.register_blueprint(fitness_bp, url_prefix="/api/fitness")
    app.register_blueprint(quests_bp, url_prefix="/api/quests")
    app.register_blueprint(battles_bp, url_prefix="/api/battles")
    app.register_blueprint(leaderboard_bp, url_prefix="/api/leaderboard")
    app.register_blueprint(story_bp, url_prefix="/api/story")
    app.register_blueprint(rewards_bp, url_prefix="/api")
    app.register_blueprint(dashboard_bp, url_prefix="/api/dashboard")

    @app.route("/api/health")
    def health():
        return {"status": "ok"}

    # -----------------------------
    # DB init
    # -----------------------------
    with app.app_context():
        if db.engine.dialect.name == "sqlite":
            event.listen(db.engine, "connect", _enable_sqlite_foreign_keys)

        from .models import (  # noqa: F401
            user,
            character,
            fitness_entry,
            quest,
            battle,
            story_progress,
            achievement,
        )

        db.create_all()

    return app
