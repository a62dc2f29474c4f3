"""Runtime configuration for the better-help server."""

from dataclasses import dataclass
import os


def _env_str(name: str, default: str | None) -> str | None:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip()


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _env_float(name: str, default: float) -> float:
    value = os.getenv(name)
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        return default


@dataclass(frozen=True)
class HelpConfig:
    cwd: str
    robot_name: str
    robot_alias: str | None
    source_timeout_s: float
    catch_all_limit: int


def get_help_config() -> HelpConfig:
    """Load help config from environment variables."""
    return HelpConfig(
        cwd=_env_str("BETTER_HELP_CWD", ".") or ".",
        robot_name=_env_str("BETTER_HELP_ROBOT_NAME", "hubot") or "hubot",
        robot_alias=_env_str("BETTER_HELP_ROBOT_ALIAS", None),
        source_timeout_s=max(0.1, _env_float("BETTER_HELP_SOURCE_TIMEOUT_S", 30.0)),
        catch_all_limit=max(1, _env_int("BETTER_HELP_CATCH_ALL_LIMIT", 5)),
    )
