from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Mapping

from .errors import MissingFieldError, UnknownOptionError

_TRUE_STRINGS = {"1", "true", "yes", "on"}
_FALSE_STRINGS = {"", "0", "false", "no", "off"}


@dataclass(frozen=True)
class ClientConfig:
    """Connection settings for one oVirt engine.

    Validated on construction: either ``url`` or all of
    protocol/host/port/api, always username and password, and ``ca_file``
    unless ``insecure``. ``insecure`` and ``timeout`` are normalized.
    """

    url: str | None = None
    protocol: str | None = "https"
    host: str | None = None
    port: int | None = 443
    api: str | None = "/api"
    username: str | None = None
    password: str | None = None
    timeout: float = 10
    ca_file: str | None = None
    insecure: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "insecure", coerce_bool(self.insecure))
        object.__setattr__(self, "timeout", _coerce_timeout(self.timeout))

        if not self.url:
            self._check_fields(("protocol", "host", "port", "api"))
        self._check_fields(("username", "password"))

        if not self.insecure and not self.ca_file:
            raise MissingFieldError("ca_file", "Missing ca_file!")

    def _check_fields(self, names: tuple[str, ...]) -> None:
        for name in names:
            if getattr(self, name) is None:
                raise MissingFieldError(name)

    @property
    def base_url(self) -> str:
        if self.url:
            return self.url.rstrip("/")
        return f"{self.protocol}://{self.host}:{self.port}{self.api}"


OPTION_NAMES = frozenset(f.name for f in fields(ClientConfig))


def coerce_bool(value: Any) -> bool:
    if isinstance(value, str):
        text = value.strip().lower()
        if text in _TRUE_STRINGS:
            return True
        if text in _FALSE_STRINGS:
            return False
    return bool(value)


def _coerce_timeout(value: Any) -> float:
    # an unusable timeout counts as a missing one
    if isinstance(value, bool) or value is None:
        raise MissingFieldError("timeout", "timeout must be a number of seconds")
    if isinstance(value, (int, float)):
        return value
    if isinstance(value, str):
        try:
            return float(value.strip())
        except ValueError:
            pass
    raise MissingFieldError("timeout", "timeout must be a number of seconds")


def build_config(options: Mapping[str, Any]) -> ClientConfig:
    """Validate constructor options and freeze them into a ClientConfig.

    Omitted options take the dataclass defaults. Raises UnknownOptionError
    for a key that is not a config field and MissingFieldError when a
    required value is still unset after defaulting.
    """
    for key in sorted(options, key=str):
        if key not in OPTION_NAMES:
            raise UnknownOptionError(key)
    return ClientConfig(**options)
