"""
Sheeter MCP Configuration

Holds the immutable API settings established once at startup and the
process-wide transport mode.
"""

import os
from dataclasses import dataclass
from typing import Optional

DEFAULT_BASE_URL = "https://sheeter-2.onrender.com"

_transport_mode = "stdio"


@dataclass(frozen=True)
class SheeterConfig:
    """
    Settings for talking to the Sheeter API.

    Attributes:
        api_key: Bearer credential sent with every request
        base_url: Root URL the request paths are appended to
        timeout: Seconds to wait on the HTTP transport, None to wait indefinitely
    """

    api_key: str
    base_url: str = DEFAULT_BASE_URL
    timeout: Optional[float] = None

    def __post_init__(self):
        object.__setattr__(self, "base_url", self.base_url.rstrip("/"))


def _parse_timeout(raw: Optional[str]) -> Optional[float]:
    if raw is None or not raw.strip():
        return None
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"SHEETER_TIMEOUT must be a number of seconds, got {raw!r}")


def load_config(
    api_key: Optional[str] = None, base_url: Optional[str] = None
) -> SheeterConfig:
    """
    Build a SheeterConfig from explicit values, falling back to the environment.

    Args:
        api_key: Overrides SHEETER_API_KEY when given
        base_url: Overrides SHEETER_BASE_URL when given

    Returns:
        SheeterConfig. The API key may be empty; the caller decides whether to warn.
    """
    return SheeterConfig(
        api_key=api_key or os.getenv("SHEETER_API_KEY", ""),
        base_url=base_url or os.getenv("SHEETER_BASE_URL") or DEFAULT_BASE_URL,
        timeout=_parse_timeout(os.getenv("SHEETER_TIMEOUT")),
    )


def get_transport_mode() -> str:
    return _transport_mode


def set_transport_mode(mode: str) -> None:
    global _transport_mode
    _transport_mode = mode
