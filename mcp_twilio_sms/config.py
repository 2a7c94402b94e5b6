"""
Configuration

Twilio credentials come from a JSON file named by TWILIO_CONFIG_FILE:

    {"accountSid": "AC...", "authToken": "...", "phoneNumber": "+15550001111"}

A missing or broken file never stops the server; it just runs without
credentials and every tool call reports that.
"""
import logging
import os
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from .core.domain import Credentials

logger = logging.getLogger(__name__)

CONFIG_FILE_ENV = "TWILIO_CONFIG_FILE"
DEFAULT_PORT = 5010
DEFAULT_HOST = "127.0.0.1"


def get_config_path() -> Optional[Path]:
    """Get credentials file path from environment"""
    path = os.environ.get(CONFIG_FILE_ENV)
    return Path(path) if path else None


def get_port() -> int:
    """Get HTTP server port from environment or use default"""
    port_str = os.environ.get("PORT", str(DEFAULT_PORT))
    try:
        return int(port_str)
    except ValueError:
        msg = f"Invalid PORT value: {port_str}"
        raise ValueError(msg) from None


def get_host() -> str:
    """Get HTTP server host from environment or use default"""
    return os.environ.get("HOST", DEFAULT_HOST)


def load_credentials(path: Optional[str | Path] = None) -> Optional[Credentials]:
    """
    Load Twilio credentials from a JSON file.

    Args:
        path: Config file path. Defaults to $TWILIO_CONFIG_FILE.

    Returns:
        Credentials, or None when no usable config was found.
    """
    config_path = Path(path) if path else get_config_path()
    if config_path is None:
        logger.warning(f"{CONFIG_FILE_ENV} is not set; Twilio tools are disabled")
        return None

    try:
        credentials = Credentials.model_validate_json(config_path.read_text(encoding="utf-8"))
    except OSError as e:
        logger.error(f"Failed to load Twilio config: {e}")
        return None
    except ValidationError as e:
        logger.error(f"Failed to load Twilio config {config_path}: {e}")
        return None

    if not credentials.can_connect:
        logger.warning("Twilio config is missing accountSid or authToken; Twilio tools are disabled")
    return credentials
