from __future__ import annotations

from typing import Any

from .config_types import ClientConfig, build_config
from .errors import UnsupportedActionError
from .transport import Transport


class OvirtClient:
    """Read-only client for the oVirt / RHEV REST API.

    Options are the ClientConfig fields, e.g.::

        client = OvirtClient(
            url="https://engine.example/api",
            username="admin@internal",
            password="secret",
            ca_file="/etc/pki/ovirt-engine/ca.pem",
        )
        vms = client.vms("list")
    """

    def __init__(self, **options: Any):
        self._cfg = build_config(options)
        self._t = Transport(self._cfg)

    @classmethod
    def from_config(cls, cfg: ClientConfig) -> "OvirtClient":
        self = cls.__new__(cls)
        self._cfg = cfg
        self._t = Transport(cfg)
        return self

    @property
    def cfg(self) -> ClientConfig:
        return self._cfg

    def _fetch(self, resource: str, action: str) -> dict[str, Any]:
        if action == "list":
            return self._t.get(f"/{resource}")
        raise UnsupportedActionError(action)

    # --- API methods ---
    def vms(self, action: str) -> dict[str, Any]:
        """Fetch vm information. Only the "list" action is supported."""
        return self._fetch("vms", action)
