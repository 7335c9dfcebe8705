from __future__ import annotations

import logging
import ssl
from typing import Any

import httpx

from . import __version__
from .config_types import ClientConfig
from .errors import XMLParseError
from .parsing import parse_xml

logger = logging.getLogger(__name__)


class Transport:
    def __init__(self, cfg: ClientConfig):
        self._cfg = cfg
        self._headers = {
            "User-Agent": f"ovirt-api/{__version__}",
            "Accept": "application/xml",
        }

    def _verify(self) -> ssl.SSLContext | bool:
        if self._cfg.insecure:
            return False
        return ssl.create_default_context(cafile=self._cfg.ca_file)

    def get(self, path: str) -> dict[str, Any]:
        """GET base_url + path and return the parsed XML body.

        A non-2xx status is only logged; the body is parsed regardless.
        Transport failures leave no body to parse and end in XMLParseError.
        """
        cfg = self._cfg
        url = cfg.base_url + path
        logger.debug("GET %s (insecure=%s, timeout=%s)", url, cfg.insecure, cfg.timeout)

        try:
            with httpx.Client(
                timeout=httpx.Timeout(cfg.timeout),
                auth=httpx.BasicAuth(cfg.username, cfg.password),
                headers=self._headers,
                verify=self._verify(),
                follow_redirects=True,
            ) as client:
                r = client.get(url)
        except (httpx.RequestError, OSError) as e:
            logger.warning("Failed to fetch result from REST-API: GET %s: %s", url, e)
            raise XMLParseError("Error in XML returned from REST-API.", None, str(e)) from e

        if not r.is_success:
            logger.warning(
                "Failed to fetch result from REST-API: GET %s returned %s", url, r.status_code
            )
        return parse_xml(r.content, status_code=r.status_code)
