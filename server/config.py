import os
from dotenv import load_dotenv
from pathlib import Path


env_path = Path(".") / ".env"
load_dotenv(dotenv_path=env_path)


class Config:
    SECRET_KEY = os.environ.get("SECRET_KEY", "secret_key")

    # Prefix of the X-<app>-alert / X-<app>-error response headers
    APP_NAME = os.environ.get("APP_NAME", "blogApp")

    POSTGRES_USERNAME = os.environ.get("POSTGRES_USER")
    POSTGRES_PASSWORD = os.environ.get("POSTGRES_PASSWORD")
    POSTGRES_HOST = os.environ.get("POSTGRES_HOST", "localhost")
    POSTGRES_PORT = os.environ.get("POSTGRES_PORT", "5432")
    POSTGRES_DBNAME = os.environ.get("POSTGRES_DB_NAME")

    SQLALCHEMY_DATABASE_URI = os.environ.get("DATABASE_URL")
    if not SQLALCHEMY_DATABASE_URI:
        if POSTGRES_USERNAME and POSTGRES_HOST and POSTGRES_DBNAME:
            SQLALCHEMY_DATABASE_URI = (
                f"postgresql+psycopg2://{POSTGRES_USERNAME}:{POSTGRES_PASSWORD or ''}@{POSTGRES_HOST}:{POSTGRES_PORT}/{POSTGRES_DBNAME}"
            )
        else:
            SQLALCHEMY_DATABASE_URI = "sqlite:///blog.db"
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Run db.create_all() on startup (Alembic migrations are preferred in production)
    AUTO_CREATE_SCHEMA = os.environ.get("AUTO_CREATE_SCHEMA", "False").lower() == "true"

    TOKEN_VALIDITY_SEC = int(os.environ.get("TOKEN_VALIDITY_SEC", 86400))  # 1 day
    TOKEN_VALIDITY_REMEMBER_ME_SEC = int(os.environ.get("TOKEN_VALIDITY_REMEMBER_ME_SEC", 2592000))  # 30 days

    PAGINATION_DEFAULT_SIZE = int(os.environ.get("PAGINATION_DEFAULT_SIZE", 20))
    PAGINATION_MAX_SIZE = int(os.environ.get("PAGINATION_MAX_SIZE", 2000))

    # Elasticsearch Configuration
    ELASTICSEARCH_ENABLED = os.environ.get("ELASTICSEARCH_ENABLED", "True").lower() == "true"
    ELASTICSEARCH_URL = os.environ.get("ELASTICSEARCH_URL", "http://localhost:9200")
    ELASTICSEARCH_API_KEY = os.environ.get("ELASTICSEARCH_API_KEY")
    ELASTICSEARCH_USERNAME = os.environ.get("ELASTICSEARCH_USERNAME")
    ELASTICSEARCH_PASSWORD = os.environ.get("ELASTICSEARCH_PASSWORD")
    ELASTICSEARCH_VERIFY_CERTS = os.environ.get("ELASTICSEARCH_VERIFY_CERTS", "True").lower() == "true"
    ELASTICSEARCH_ENTRY_INDEX = os.environ.get("ELASTICSEARCH_ENTRY_INDEX", "entries")
    ELASTICSEARCH_TIMEOUT = int(os.environ.get("ELASTICSEARCH_TIMEOUT", 30))
    ELASTICSEARCH_MAX_RETRIES = int(os.environ.get("ELASTICSEARCH_MAX_RETRIES", 3))

    # Logging
    LOG_TO_FILE = os.environ.get("LOG_TO_FILE", "True").lower() == "true"
    LOG_DIR = os.environ.get("LOG_DIR", "logs")


