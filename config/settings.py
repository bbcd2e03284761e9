"""
Application settings loaded from environment variables.
"""

from pydantic_settings import BaseSettings

DEFAULT_JWT_SECRET = "change-me-jwt-secret-key"


class Settings(BaseSettings):
    # ── Security Secrets ──────────────────────────────────────────────────
    jwt_secret: str = DEFAULT_JWT_SECRET    # HMAC secret for auth tokens (demo default)
    jwt_algorithm: str = "HS256"
    jwt_expiry_seconds: int = 3600          # 1 hour
    bcrypt_rounds: int = 12

    # ── Seed account ─────────────────────────────────────────────────────
    admin_name: str = "Admin"
    admin_email: str = "admin@example.com"
    admin_password: str = "admin123"

    # ── Server ───────────────────────────────────────────────────────────
    port: int = 3001
    host: str = "0.0.0.0"
    debug: bool = False
    cors_origins: list = ["*"]

    model_config = {
        "env_file": ".env",
        "case_sensitive": False,
    }

    @property
    def uses_default_secret(self) -> bool:
        return self.jwt_secret == DEFAULT_JWT_SECRET


config = Settings()
