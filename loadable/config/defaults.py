"""Default configuration parameters for the loadable package."""

from dataclasses import dataclass


@dataclass(frozen=True)
class LoggingParams:
    """Arguments for configure_logging."""
    level: str = "INFO"
    format_json: bool = False
    include_timestamp: bool = True
    include_caller: bool = False


@dataclass(frozen=True)
class CellParams:
    """LoadableCell behaviour."""
    raise_on_stale: bool = False       # Raise instead of discarding superseded completions
    log_transitions: bool = True       # Debug-log every applied transition


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    logging: LoggingParams
    cell: CellParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        logging=LoggingParams(),
        cell=CellParams(),
    )
