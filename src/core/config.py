"""Application settings, read once from the environment."""

import os
from dataclasses import dataclass, field

from src.core.exceptions import ConfigurationError
from src.core.shared_types import StoreKind

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}


def _parse_bool(name: str, value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUTHY:
        return True
    if lowered in _FALSY:
        return False
    raise ConfigurationError(f"{name} must be a boolean, got {value!r}.")


@dataclass(frozen=True)
class Settings:
    store: StoreKind = StoreKind.MEMORY
    database_url: str = "sqlite:///:memory:"
    seed_sample_data: bool = True
    log_level: str = "INFO"
    cors_origins: list[str] = field(default_factory=lambda: ["*"])
    host: str = "0.0.0.0"
    port: int = 8000

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> "Settings":
        """Build settings from environment variables (or a supplied mapping, handy in tests)."""
        env = os.environ if environ is None else environ

        raw_store = env.get("CATALOG_STORE", StoreKind.MEMORY)
        try:
            store = StoreKind(raw_store.strip().lower())
        except ValueError:
            raise ConfigurationError(
                f"CATALOG_STORE must be one of {[k.value for k in StoreKind]}, got {raw_store!r}."
            ) from None

        raw_port = env.get("PORT", "8000")
        try:
            port = int(raw_port)
        except ValueError:
            raise ConfigurationError(f"PORT must be an integer, got {raw_port!r}.") from None

        origins = [
            origin.strip()
            for origin in env.get("CORS_ORIGINS", "*").split(",")
            if origin.strip()
        ]

        return cls(
            store=store,
            database_url=env.get("DATABASE_URL", cls.database_url),
            seed_sample_data=_parse_bool(
                "CATALOG_SEED_SAMPLE_DATA", env.get("CATALOG_SEED_SAMPLE_DATA", "true")
            ),
            log_level=env.get("LOG_LEVEL", cls.log_level).upper(),
            cors_origins=origins or ["*"],
            host=env.get("HOST", cls.host),
            port=port,
        )
