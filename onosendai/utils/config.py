import os

import yaml

DEFAULT_CONFIG_PATH = "onosendai.yaml"
DEFAULT_TIMEOUT = 10.0
DEFAULT_ENDPOINT = "/scan"


def get_config(path=None):
    """
    Loads YAML configuration from either:
      - explicit path argument, or
      - environment variable ONOSENDAI_CONFIG, or
      - default file ./onosendai.yaml (optional)
    """
    explicit = path or os.getenv("ONOSENDAI_CONFIG")
    path = explicit or DEFAULT_CONFIG_PATH
    if not os.path.exists(path):
        if explicit:
            raise FileNotFoundError(f"Config file not found: {path}")
        return {}
    with open(path) as f:
        return yaml.safe_load(f) or {}


def _parse_timeout(raw):
    try:
        timeout = float(raw)
    except (TypeError, ValueError):
        raise ValueError(f"Invalid timeout {raw!r}: expected a number of seconds")
    if timeout <= 0:
        raise ValueError(f"Invalid timeout {raw!r}: must be greater than zero")
    return timeout


def get_scan_config(path=None):
    """
    Get scan settings from environment variables or config file.
    Environment variables win over the `scan:` section of the file.
    """
    cfg = get_config(path)
    scan = cfg.get("scan") or {}

    return {
        "server": os.getenv("ONOSENDAI_SERVER", scan.get("server")),
        "identity_file": os.getenv("ONOSENDAI_IDENTITY_FILE", scan.get("identity_file")),
        "timeout": _parse_timeout(os.getenv("ONOSENDAI_TIMEOUT", scan.get("timeout", DEFAULT_TIMEOUT))),
        "endpoint": scan.get("endpoint", DEFAULT_ENDPOINT),
    }


def get_log_level(path=None):
    cfg = get_config(path)
    logging_cfg = cfg.get("logging") or {}
    return os.getenv("ONOSENDAI_LOG_LEVEL", logging_cfg.get("level", "WARNING")).upper()
