__version__ = "0.1.0"

from .client import OvirtClient
from .config_types import ClientConfig, build_config
from .errors import (
    MissingFieldError,
    OvirtApiError,
    UnknownOptionError,
    UnsupportedActionError,
    XMLParseError,
)

__all__ = [
    "OvirtClient",
    "ClientConfig",
    "build_config",
    "OvirtApiError",
    "UnknownOptionError",
    "MissingFieldError",
    "UnsupportedActionError",
    "XMLParseError",
]
