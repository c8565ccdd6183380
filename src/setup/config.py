from __future__ import annotations

import os
from dataclasses import dataclass


def _env_str(name: str, default: str = "") -> str:
    return (os.environ.get(name) or "").strip() or default


def _env_bool(name: str, *, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    v = raw.strip().lower()
    if v in ("1", "true", "yes", "on"):
        return True
    if v in ("0", "false", "no", "off"):
        return False
    return default


def _env_int(name: str, default: int) -> int:
    raw = (os.environ.get(name) or "").strip()
    if not raw:
        return int(default)
    try:
        return int(raw)
    except ValueError:
        return int(default)


@dataclass(frozen=True)
class DatabaseSettings:
    user: str = "postgres"
    password: str = "admin"
    host: str = "localhost"
    port: int = 5432
    schema: str = "public"

    def url_for(self, db_name: str) -> str:
        return (
            f"postgresql://{self.user}:{self.password}@{self.host}:{self.port}"
            f"/{db_name}?schema={self.schema}"
        )


@dataclass(frozen=True)
class SetupSettings:
    database: DatabaseSettings
    create_next_app: str = "create-next-app@latest"
    commit_message: str = "aka-init"
    ide_command: str = "code"
    editor: str = "nano"
    autoprefixer: bool = True
    ask_custom_model: bool = True


def database_settings() -> DatabaseSettings:
    return DatabaseSettings(
        user=_env_str("NEXT_SETUP_DB_USER", "postgres"),
        password=_env_str("NEXT_SETUP_DB_PASSWORD", "admin"),
        host=_env_str("NEXT_SETUP_DB_HOST", "localhost"),
        port=_env_int("NEXT_SETUP_DB_PORT", 5432),
        schema=_env_str("NEXT_SETUP_DB_SCHEMA", "public"),
    )


def editor_command() -> str:
    # Same lookup as ${EDITOR:-nano}.
    return _env_str("EDITOR", "nano")


def load_settings() -> SetupSettings:
    """Read settings from the environment; CLI flags are applied on top."""
    return SetupSettings(
        database=database_settings(),
        create_next_app=_env_str("NEXT_SETUP_CREATE_NEXT_APP", "create-next-app@latest"),
        commit_message=_env_str("NEXT_SETUP_COMMIT_MESSAGE", "aka-init"),
        ide_command=_env_str("NEXT_SETUP_IDE", "code"),
        editor=editor_command(),
        autoprefixer=_env_bool("NEXT_SETUP_AUTOPREFIXER", default=True),
        ask_custom_model=_env_bool("NEXT_SETUP_ASK_CUSTOM_MODEL", default=True),
    )
