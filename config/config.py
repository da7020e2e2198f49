from dataclasses import dataclass, field, fields
import os
from dotenv import load_dotenv

# Load .env from project root if present
load_dotenv()


def _env(name: str, default: str):
    return field(default_factory=lambda: os.getenv(name, default))


def _env_flag(name: str, default: str = "1"):
    def _read() -> bool:
        return os.getenv(name, default).strip().lower() not in ("", "0", "false", "no", "off")

    return field(default_factory=_read)


@dataclass
class Config:
    # console handler stays quiet by default so log lines don't mix with the prompt
    LOG_LEVEL: str = _env("LOG_LEVEL", "WARNING")
    LOG_FILE_LEVEL: str = _env("LOG_FILE_LEVEL", "INFO")
    LOG_DIR: str = _env("LOG_DIR", "logs")
    LOG_TO_FILE: bool = _env_flag("LOG_TO_FILE")

    PROMPT: str = _env("PROMPT", "Counter> ")


def refresh_config() -> "Config":
    """Re-read the environment into the shared instance (e.g. after loading an env file)."""
    fresh = Config()
    for f in fields(Config):
        setattr(config, f.name, getattr(fresh, f.name))
    return config


# single shared config instance
config = Config()
