import os
from dotenv import load_dotenv
load_dotenv()
from flask import Flask, jsonify
from flask_cors import CORS
from flask_migrate import Migrate
from werkzeug.exceptions import HTTPException
from config import config_dict
from models import db
from routes.authentication import auth_bp
from routes.quizzes import quiz_bp
from routes.questions import question_bp
from utils.errors import AppError, Internal
from utils.logger import logger

migrate = Migrate()


def register_error_handlers(app):
    @app.errorhandler(AppError)
    def handle_app_error(error):
        return jsonify(error.to_dict()), error.status_code

    @app.errorhandler(HTTPException)
    def handle_http_error(error):
        return jsonify({"error": error.description}), error.code

    @app.errorhandler(Exception)
    def handle_unexpected_error(error):
        db.session.rollback()
        logger.error("Unhandled error", exc_info=error)
        internal = Internal()
        return jsonify(internal.to_dict()), internal.status_code


def create_app(config_name=None):
    config_name = (config_name or os.environ.get("FLASK_ENV", "production")).lower()

    app = Flask(__name__)
    app.config.from_object(config_dict.get(config_name, config_dict["production"]))
    logger.setLevel(app.config["LOG_LEVEL"])

    CORS(app, resources={r"/api/*": {"origins": app.config["CORS_ORIGINS"]}}, supports_credentials=True)

    db.init_app(app)
    migrate.init_app(app, db)

    app.register_blueprint(auth_bp, url_prefix='/api/auth')
    app.register_blueprint(quiz_bp, url_prefix='/api/quizzes')
    app.register_blueprint(question_bp, url_prefix='/api/questions')
    register_error_handlers(app)

    @app.route('/health')
    def health():
        return jsonify({"status": "healthy"}), 200

    @app.cli.command("init-db")
    def init_db():
        """Create all tables without running migrations."""
        db.create_all()
        logger.info("Database tables created")

    logger.info("App created", extra={"environment": config_name})
    return app


if __name__ == '__main__':
    app = create_app()
    app.run(debug=app.config.get('DEBUG', False))
