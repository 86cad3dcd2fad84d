import logging
import os
import sys

ROOT_LOGGER = "onosendai"
DEFAULT_LEVEL = "WARNING"


def is_known_level(level) -> bool:
    if isinstance(level, int):
        return True
    return isinstance(logging.getLevelName(str(level).strip().upper()), int)


def resolve_level(level) -> int:
    """
    Map a level name or number to a logging level.
    Unknown names fall back to DEFAULT_LEVEL.
    """
    if isinstance(level, int):
        return level
    if not is_known_level(level):
        level = DEFAULT_LEVEL
    return logging.getLevelName(str(level).strip().upper())


def _apply_level(root: logging.Logger, level) -> None:
    root.setLevel(resolve_level(level))
    if not is_known_level(level):
        root.warning(f"Unknown log level '{level}', using {DEFAULT_LEVEL}")


def _configure_root() -> logging.Logger:
    root = logging.getLogger(ROOT_LOGGER)
    if not root.handlers:
        # stdout is reserved for command output
        handler = logging.StreamHandler(sys.stderr)
        fmt = logging.Formatter(
            "[%(asctime)s] %(levelname)s — %(name)s — %(message)s",
            "%Y-%m-%d %H:%M:%S",
        )
        handler.setFormatter(fmt)
        root.addHandler(handler)
        root.propagate = False
        _apply_level(root, os.getenv("ONOSENDAI_LOG_LEVEL", DEFAULT_LEVEL))
    return root


def get_logger(name: str = ROOT_LOGGER) -> logging.Logger:
    """Returns a standardized logger instance under the onosendai namespace."""
    root = _configure_root()
    if name == ROOT_LOGGER:
        return root
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")


def set_log_level(level) -> None:
    """Set the level shared by every onosendai logger (name or numeric level)."""
    _apply_level(_configure_root(), level)
