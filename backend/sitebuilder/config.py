import os
from dotenv import load_dotenv

load_dotenv()


def _prefixes(name, default):
    raw = os.getenv(name)
    if not raw:
        return default
    return tuple(p.strip() for p in raw.split(",") if p.strip())


class BaseConfig:
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret")
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # JWT sessions (header for API clients, cookie for browsers)
    JWT_SECRET_KEY = os.getenv("JWT_SECRET_KEY", SECRET_KEY)
    JWT_TOKEN_LOCATION = ["headers", "cookies"]
    JWT_COOKIE_CSRF_PROTECT = os.getenv("JWT_COOKIE_CSRF_PROTECT", "true").lower() == "true"
    JWT_COOKIE_SECURE = False

    # Public addressing of sites: <protocol>://<subdomain>.<root domain>
    ROOT_DOMAIN = os.getenv("ROOT_DOMAIN", "localhost:5000")
    SITE_PROTOCOL = os.getenv("SITE_PROTOCOL", "http")

    # Route access policy
    PROTECTED_ROUTE_PREFIXES = _prefixes("PROTECTED_ROUTE_PREFIXES", ("/admin", "/dashboard"))
    AUTH_ROUTE_PREFIXES = _prefixes("AUTH_ROUTE_PREFIXES", ("/login", "/signup"))
    LOGIN_PATH = "/login"
    DASHBOARD_PATH = "/admin"


class DevelopmentConfig(BaseConfig):
    DEBUG = True
    SQLALCHEMY_DATABASE_URI = os.getenv("DEV_DATABASE_URI", "sqlite:///sitebuilder-dev.db")


class ProductionConfig(BaseConfig):
    DEBUG = False
    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URI")
    SITE_PROTOCOL = os.getenv("SITE_PROTOCOL", "https")
    JWT_COOKIE_SECURE = True


class TestingConfig(BaseConfig):
    TESTING = True
    SECRET_KEY = "test-secret"
    JWT_SECRET_KEY = "test-jwt-secret-with-enough-length-for-hs256"
    JWT_COOKIE_CSRF_PROTECT = False
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    ROOT_DOMAIN = "builder.test"


config_by_name = {
    "development": DevelopmentConfig,
    "production": ProductionConfig,
    "testing": TestingConfig,
}
