import logging

from flask import Flask
from pymysql import connect
from sqlalchemy.engine import make_url

from config import Config
from .extensions import cors, db, migrate
from . import models  # noqa: F401  register models with SQLAlchemy metadata
from .routes.candidate_process_routes import candidate_process_bp
from app.database.seed.seed_all import seed_all

logger = logging.getLogger(__name__)


def create_app(config_class=Config):
    app = Flask(__name__)
    app.config.from_object(config_class)

    logging.basicConfig(
        level=app.config.get("LOG_LEVEL", "INFO"),
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
    )

    # Allow CORS from the frontend
    cors.init_app(app, resources={r"/api/*": {"origins": app.config["CORS_ORIGINS"]}})

    if app.config["SQLALCHEMY_DATABASE_URI"].startswith("mysql"):
        create_database_if_not_exists(app.config["SQLALCHEMY_DATABASE_URI"])

    # extensions initialization
    db.init_app(app)
    migrate.init_app(app, db)

    app.register_blueprint(candidate_process_bp, url_prefix="/api/candidate_process")

    app.cli.add_command(seed_all)

    return app

def create_database_if_not_exists(database_uri):
    url = make_url(database_uri)
    host = url.host or "localhost"
    port = url.port or 3306

    logger.info(f"🔧 Ensuring database '{url.database}' exists...")
    logger.info(f"Connecting to DB server at {host}:{port} with user '{url.username}'")

    conn = connect(
        host=host,
        port=port,
        user=url.username,
        password=url.password or ""
    )
    try:
        with conn.cursor() as cursor:
            cursor.execute(f"CREATE DATABASE IF NOT EXISTS `{url.database}`")
        conn.commit()
    finally:
        conn.close()
