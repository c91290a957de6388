"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
API starts without any configuration; in a real deployment you should
at least override ``SECRET_KEY``.

Values are read when a ``Settings`` instance is created, not at import
time, so tests may build their own instance with explicit arguments and
hand it to ``create_app``.
"""

import os
from dataclasses import dataclass, field
from typing import Optional


def _env_bool(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = field(default_factory=lambda: os.getenv("PROJECT_NAME", "Recipe Catalog API"))
    api_version: str = field(default_factory=lambda: os.getenv("API_VERSION", "1.0.0"))
    debug: bool = field(default_factory=lambda: _env_bool("DEBUG"))
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    log_file: Optional[str] = field(default_factory=lambda: os.getenv("LOG_FILE") or None)

    # Signing key for bearer tokens.  It is handed to the token service
    # when the application is assembled; nothing else reads it.
    secret_key: str = field(default_factory=lambda: os.getenv("SECRET_KEY", "change_me"))
    algorithm: str = field(default_factory=lambda: os.getenv("ALGORITHM", "HS256"))
    access_token_expire_minutes: int = field(
        default_factory=lambda: int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", str(60 * 24)))
    )
    password_hash_iterations: int = field(
        default_factory=lambda: int(os.getenv("PASSWORD_HASH_ITERATIONS", "100000"))
    )

    default_page_size: int = field(default_factory=lambda: int(os.getenv("DEFAULT_PAGE_SIZE", "10")))
    max_page_size: int = field(default_factory=lambda: int(os.getenv("MAX_PAGE_SIZE", "100")))

    # When enabled, deleting a recipe also removes its ratings.  Off by
    # default: orphaned ratings stay addressable by recipe id.
    cascade_rating_delete: bool = field(default_factory=lambda: _env_bool("CASCADE_RATING_DELETE"))

    # Optional administrator account created when the application starts.
    admin_username: Optional[str] = field(default_factory=lambda: os.getenv("ADMIN_USERNAME") or None)
    admin_email: Optional[str] = field(default_factory=lambda: os.getenv("ADMIN_EMAIL") or None)
    admin_password: Optional[str] = field(default_factory=lambda: os.getenv("ADMIN_PASSWORD") or None)

    host: str = field(default_factory=lambda: os.getenv("HOST", "0.0.0.0"))
    port: int = field(default_factory=lambda: int(os.getenv("PORT", "8080")))


# Default instance used by ``main.app`` and the command line helpers.
settings = Settings()
