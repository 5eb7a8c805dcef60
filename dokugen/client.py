"""HTTP client for the remote README generation service."""

from __future__ import annotations

import json
from typing import Any, Callable, Dict, Optional
from urllib.error import HTTPError, URLError
from urllib.request import Request, urlopen

from .config import DEFAULT_ENDPOINT, DEFAULT_REQUEST_TIMEOUT, APIConfig
from .errors import GenerationError
from .logging import get_logger
from .models import GenerationRequest

Transport = Callable[[str, Dict[str, object], float], Dict[str, Any]]


def _http_transport(endpoint: str, payload: Dict[str, object], timeout: float) -> Dict[str, Any]:
    data = json.dumps(payload).encode("utf-8")
    headers = {"Content-Type": "application/json", "Accept": "application/json"}
    http_request = Request(endpoint, data=data, headers=headers, method="POST")

    try:
        with urlopen(http_request, timeout=timeout) as response:  # type: ignore[arg-type]
            raw = response.read()
    except HTTPError as exc:
        detail = exc.read().decode("utf-8", errors="ignore") if hasattr(exc, "read") else ""
        message = detail.strip() or exc.reason
        raise GenerationError(f"README service failed with status {exc.code}: {message}") from exc
    except URLError as exc:
        raise GenerationError(f"README service unreachable: {exc.reason}") from exc
    except TimeoutError as exc:
        raise GenerationError(f"README service timed out after {timeout:g}s") from exc

    try:
        decoded = json.loads(raw.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise GenerationError("README service returned invalid JSON") from exc
    if not isinstance(decoded, dict):
        raise GenerationError("README service returned an unexpected payload")
    return decoded


class GenerationClient:
    """Sends introspection results to the README generator and returns the document."""

    def __init__(
        self,
        endpoint: str = DEFAULT_ENDPOINT,
        *,
        request_timeout: float = DEFAULT_REQUEST_TIMEOUT,
        transport: Optional[Transport] = None,
    ) -> None:
        self.endpoint = endpoint
        self.request_timeout = request_timeout
        self._transport = transport or _http_transport
        self.logger = get_logger("client")

    @classmethod
    def from_config(cls, api: APIConfig, *, transport: Optional[Transport] = None) -> "GenerationClient":
        return cls(api.endpoint, request_timeout=api.request_timeout, transport=transport)

    def generate(self, request: GenerationRequest) -> str:
        """Return the generated README text, raising GenerationError on failure."""
        self.logger.debug(
            "Posting %d files and %d snippet characters to %s",
            len(request.project_files),
            len(request.full_code),
            self.endpoint,
        )
        payload = self._transport(self.endpoint, request.to_wire(), self.request_timeout)
        readme = payload.get("readme")
        if not isinstance(readme, str) or not readme.strip():
            raise GenerationError("API did not return a README.")
        self.logger.debug("README service responded with %d characters", len(readme))
        return readme


__all__ = ["GenerationClient", "Transport"]
