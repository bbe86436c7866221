"""
Environment driven settings for the Users API.

The listen address, CORS origins, log level and file, and the id
assignment strategy of the user store are read from environment
variables.  A ``.env`` file in the working directory, if present, is
loaded first via ``python-dotenv``; see ``.env.example`` for the
recognised names.
"""

import os
from dataclasses import dataclass, field
from typing import List

from dotenv import load_dotenv

load_dotenv()

ID_STRATEGIES = ("length", "sequence")


def _split_origins(raw: str) -> List[str]:
    origins = [item.strip() for item in raw.split(",") if item.strip()]
    return origins or ["*"]


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Users API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # Comma‑separated list of origins allowed by the CORS middleware.
    # The default ``*`` mirrors a fully permissive policy.
    cors_origins: List[str] = field(
        default_factory=lambda: _split_origins(os.getenv("CORS_ORIGINS", "*"))
    )

    # How the store assigns ids to new users.  ``length`` reproduces the
    # historical ``len(users) + 1`` rule, which can hand out an id that
    # is still in use once a record has been deleted.  ``sequence`` uses
    # a counter that never goes backwards.
    id_strategy: str = os.getenv("ID_STRATEGY", "length")

    def __post_init__(self) -> None:
        if self.id_strategy not in ID_STRATEGIES:
            raise ValueError(
                f"ID_STRATEGY must be one of {', '.join(ID_STRATEGIES)}, got {self.id_strategy!r}"
            )

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from the current process environment.

        Class‑level defaults are evaluated once at import time; this
        constructor re-reads every variable so callers (tests in
        particular) see changes made after import.
        """
        return cls(
            project_name=os.getenv("PROJECT_NAME", "Users API"),
            api_version=os.getenv("API_VERSION", "1.0.0"),
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "3000")),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_file=os.getenv("LOG_FILE", ""),
            cors_origins=_split_origins(os.getenv("CORS_ORIGINS", "*")),
            id_strategy=os.getenv("ID_STRATEGY", "length"),
        )


# Process-wide settings; tests build their own with Settings.from_env().
settings = Settings()
