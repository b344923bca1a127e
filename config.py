import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file)
else:
    data = dict()


class ApplicationConfig:
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./accounts.db")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    APP_NAME = data.get("APP_NAME", "Linkea")
    FRONTEND_URL = data.get("FRONTEND_URL", "http://localhost:5173")
    CORS_ORIGINS = data.get("CORS_ORIGINS", [FRONTEND_URL])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    JWT_SECRET = data.get("JWT_SECRET", "dev-secret-key-change-in-production")
    JWT_ALGORITHM = data.get("JWT_ALGORITHM", "HS256")
    JWT_EXPIRE_DAYS = int(data.get("JWT_EXPIRE_DAYS", 180))
    PASSWORD_HASH_ROUNDS = int(data.get("PASSWORD_HASH_ROUNDS", 12))
    SMTP_HOST = data.get("SMTP_HOST", "localhost")
    SMTP_PORT = int(data.get("SMTP_PORT", 587))
    SMTP_USER = data.get("SMTP_USER", "")
    SMTP_PASSWORD = data.get("SMTP_PASSWORD", "")
    SMTP_USE_TLS = bool(data.get("SMTP_USE_TLS", True))
    EMAIL_FROM = data.get("EMAIL_FROM", "no-reply@linkea.local")
    HIDE_ACCOUNT_EXISTENCE = bool(data.get("HIDE_ACCOUNT_EXISTENCE", False))
