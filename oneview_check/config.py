import logging
import os
from dataclasses import dataclass
from typing import Any, Dict, Optional

import yaml

from .errors import ConfigError

logger = logging.getLogger(__name__)

PASSWORD_ENV = "ONEVIEW_PASSWORD"

CONFIG_KEYS = {"host", "user", "password", "password_file", "ca_file", "insecure"}

@dataclass
class CheckConfig:
    host: str
    user: str
    password: str
    ca_certificate: Optional[bytes] = None
    insecure: bool = False

def load_config_file(path: str) -> Dict[str, Any]:
    """Reads the optional YAML config file. An empty file is an empty config."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except OSError as e:
        raise ConfigError(f"Can't read config file {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Can't parse config file {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping")

    unknown = set(data) - CONFIG_KEYS
    if unknown:
        logger.warning("Ignoring unknown config keys in %s: %s", path, ", ".join(sorted(map(str, unknown))))
    return data

def read_password_file(path: str) -> str:
    try:
        with open(path, "r", encoding="utf-8") as f:
            line = f.readline()
    except OSError as e:
        raise ConfigError(f"Can't read password file {path}: {e}") from e
    return line.strip()

def read_ca_file(path: str) -> bytes:
    try:
        with open(path, "rb") as f:
            return f.read()
    except OSError as e:
        raise ConfigError(f"Can't read CA file {path}: {e}") from e

def _pick(cli_value, file_data: Dict[str, Any], key: str):
    if cli_value is not None:
        return cli_value
    return file_data.get(key)

def resolve_config(host: Optional[str] = None,
                   user: Optional[str] = None,
                   password_file: Optional[str] = None,
                   ca_file: Optional[str] = None,
                   insecure: Optional[bool] = None,
                   config_file: Optional[str] = None,
                   environ: Optional[Dict[str, str]] = None) -> CheckConfig:
    """
    Merges command line values, the YAML config file and the environment.
    Command line wins over the file; the environment is only a last resort
    for the password.
    """
    environ = os.environ if environ is None else environ
    file_data = load_config_file(config_file) if config_file else {}

    host = _pick(host, file_data, "host")
    user = _pick(user, file_data, "user")

    password = None
    password_file = _pick(password_file, file_data, "password_file")
    if password_file:
        password = read_password_file(password_file)
    elif file_data.get("password") is not None:
        password = str(file_data["password"])
    elif environ.get(PASSWORD_ENV):
        password = environ[PASSWORD_ENV]

    if not host:
        raise ConfigError("No host given")
    if not user:
        raise ConfigError("No user given")
    if not password:
        raise ConfigError(f"No password given (use a password file or {PASSWORD_ENV})")

    ca_file = _pick(ca_file, file_data, "ca_file")
    ca_certificate = read_ca_file(ca_file) if ca_file else None

    # store_true flags arrive as False when absent, so only True overrides the file
    file_insecure = file_data.get("insecure", False)
    if not isinstance(file_insecure, bool):
        raise ConfigError(f"Config key 'insecure' must be true or false, got {file_insecure!r}")
    insecure = bool(insecure) or file_insecure

    return CheckConfig(
        host=str(host),
        user=str(user),
        password=password,
        ca_certificate=ca_certificate,
        insecure=insecure,
    )
