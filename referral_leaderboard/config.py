import os
from dotenv import load_dotenv

load_dotenv()


def _flag(name, default="false"):
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


def build_database_uri():
    url = os.getenv("DATABASE_URL", "sqlite:///leaderboard.db")
    sslrootcert = os.getenv("DB_SSLROOTCERT")
    if sslrootcert and not url.startswith("sqlite"):
        sep = "&" if "?" in url else "?"
        url = f"{url}{sep}sslmode=verify-full&sslrootcert={sslrootcert}"
    return url


def engine_options(uri, timeout):
    """Bound every store round-trip by ``timeout`` seconds."""
    if uri.startswith("sqlite"):
        # sqlite3 busy timeout; lock waits past it raise OperationalError
        return {"connect_args": {"timeout": timeout}}
    return {
        "pool_pre_ping": True,
        "pool_timeout": timeout,
        "connect_args": {
            "connect_timeout": int(timeout),
            "options": f"-c statement_timeout={int(timeout * 1000)}",
        },
    }


class Config:
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-leaderboard-secret")

    SQLALCHEMY_DATABASE_URI = build_database_uri()
    STORE_TIMEOUT = float(os.getenv("STORE_TIMEOUT", 10))
    SQLALCHEMY_ENGINE_OPTIONS = engine_options(SQLALCHEMY_DATABASE_URI, STORE_TIMEOUT)

    # read-modify-write from the snapshot unless explicitly switched
    ATOMIC_INCREMENT = _flag("ATOMIC_INCREMENT")

    CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*")
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")


class DevelopmentConfig(Config):
    DEBUG = True
    LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")


class ProductionConfig(Config):
    DEBUG = False


class TestingConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"
    SQLALCHEMY_ENGINE_OPTIONS = engine_options("sqlite://", 1)
    ATOMIC_INCREMENT = False
    LOG_LEVEL = "DEBUG"


CONFIGS = {
    "development": DevelopmentConfig,
    "production": ProductionConfig,
    "testing": TestingConfig,
}
