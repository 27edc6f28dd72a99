"""Parameter access over a device's HTTP/JSON API.

Endpoints, relative to ``ConnectionConfig.base_url``:

- ``GET /parameters`` lists ``{"name", "label", "hidable"}`` objects.
- ``GET /parameters/<name>`` answers ``{"value": ...}``.
- ``GET /parameters/<name>?subparam=<n>`` answers one indexed entry.

A 404 on a value request means the parameter has no value right now.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional
from urllib.parse import quote

import httpx

from ..config import ConnectionConfig
from ..errors import AuthenticationError, DeviceConnectionError, DeviceProtocolError
from ..parameters.model import Parameter, ParameterSource, format_value

logger = logging.getLogger(__name__)


class HttpParameter(Parameter):
    """A parameter whose value is fetched from the device on every read."""

    def __init__(self, source: "HttpParameterSource", name: str, label: str, hidable: bool) -> None:
        self._source = source
        self._name = name
        self._label = label
        self._hidable = hidable

    @property
    def name(self) -> str:
        return self._name

    @property
    def label(self) -> str:
        return self._label

    @property
    def hidable(self) -> bool:
        return self._hidable

    def value(self) -> Optional[str]:
        return self._source.fetch_value(self._name)

    def value_at(self, subparam: int) -> Optional[str]:
        return self._source.fetch_value(self._name, subparam)


class HttpParameterSource(ParameterSource):
    """Reads parameters from one device.

    The parameter list is fetched once per instance; values are fetched on
    demand. Use as a context manager to close the underlying client.
    """

    def __init__(
        self,
        config: ConnectionConfig,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self.config = config
        headers = {"Accept": "application/json"}
        if config.auth_token:
            headers["Authorization"] = f"Bearer {config.auth_token}"
        self._client = httpx.Client(
            base_url=config.base_url,
            headers=headers,
            timeout=config.timeout,
            verify=config.verify_tls,
            transport=transport,
        )
        self._parameters: Optional[Dict[str, HttpParameter]] = None

    def get_parameters(self) -> List[Parameter]:
        return list(self._load().values())

    def get_parameter(self, name: str) -> Optional[Parameter]:
        return self._load().get(name)

    def fetch_value(self, name: str, subparam: Optional[int] = None) -> Optional[str]:
        params = {} if subparam is None else {"subparam": subparam}
        body = self._get_json(f"/parameters/{quote(name, safe='')}", params=params, missing_ok=True)
        if body is None:
            return None
        if not isinstance(body, dict) or "value" not in body:
            raise DeviceProtocolError(f"value reply for {name} has no 'value' field")
        return format_value(body["value"])

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "HttpParameterSource":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _load(self) -> Dict[str, HttpParameter]:
        if self._parameters is None:
            self._parameters = self._parse_listing(self._get_json("/parameters"))
            logger.debug("Device reported %d parameters", len(self._parameters))
        return self._parameters

    def _parse_listing(self, body: Any) -> Dict[str, HttpParameter]:
        if not isinstance(body, list):
            raise DeviceProtocolError("parameter listing is not a JSON list")

        parameters: Dict[str, HttpParameter] = {}
        for raw in body:
            name = raw.get("name") if isinstance(raw, dict) else None
            if not isinstance(name, str) or not name:
                raise DeviceProtocolError(f"parameter entry without a name: {raw!r}")
            if name in parameters:
                raise DeviceProtocolError(f"duplicate parameter name: {name}")
            hidable = raw.get("hidable", False)
            if not isinstance(hidable, bool):
                raise DeviceProtocolError(f"parameter {name} has a non-boolean hidable flag: {hidable!r}")
            label = raw.get("label") or name
            parameters[name] = HttpParameter(self, name, str(label), hidable)
        return parameters

    def _get_json(self, path: str, params: Optional[Dict[str, Any]] = None, missing_ok: bool = False) -> Any:
        url = f"{self.config.base_url}{path}"
        logger.debug("GET %s params=%s", url, params or {})
        try:
            response = self._client.get(path, params=params)
        except httpx.TimeoutException as exc:
            raise DeviceConnectionError(f"request to {url} timed out after {self.config.timeout}s") from exc
        except httpx.RequestError as exc:
            raise DeviceConnectionError(f"cannot reach {url}: {exc}") from exc

        if response.status_code == 404 and missing_ok:
            return None
        if response.status_code in (401, 403):
            raise AuthenticationError(url)
        if response.status_code >= 400:
            raise DeviceConnectionError(f"HTTP {response.status_code} from {url}")

        try:
            return response.json()
        except ValueError as exc:
            raise DeviceProtocolError(f"reply from {url} is not JSON") from exc


__all__ = ["HttpParameter", "HttpParameterSource"]
