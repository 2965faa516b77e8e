import os
from typing import List

from pydantic import BaseModel

DEFAULT_SECRET = "dev-secret-change-me"


def _env_bool(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


class Settings(BaseModel):
    """Runtime configuration, read once from the environment at startup."""

    database_url: str = "sqlite:///./notes.db"
    secret_key: str = DEFAULT_SECRET
    jwt_algorithm: str = "HS256"
    jwt_expires_minutes: int = 24 * 60
    cors_origins: List[str] = ["*"]
    log_level: str = "INFO"
    seed_demo_data: bool = False
    bcrypt_rounds: int = 12
    host: str = "0.0.0.0"
    port: int = 3000

    # PUBLIC_INTERFACE
    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from environment variables, falling back to defaults."""
        origins = os.getenv("CORS_ORIGINS", "*")
        return cls(
            database_url=os.getenv("DATABASE_URL", "sqlite:///./notes.db"),
            secret_key=os.getenv("SECRET_KEY", DEFAULT_SECRET),
            jwt_algorithm=os.getenv("JWT_ALGORITHM", "HS256"),
            jwt_expires_minutes=int(os.getenv("JWT_EXPIRES_MINUTES", str(24 * 60))),
            cors_origins=[o.strip() for o in origins.split(",") if o.strip()],
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            seed_demo_data=_env_bool("SEED_DEMO_DATA"),
            bcrypt_rounds=int(os.getenv("BCRYPT_ROUNDS", "12")),
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "3000")),
        )

    @property
    def uses_default_secret(self) -> bool:
        return self.secret_key == DEFAULT_SECRET
