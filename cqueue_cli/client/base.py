"""Base HTTP Client for the cqueue API"""

from typing import Any

import httpx
from rich.console import Console

console = Console()


class CQueueError(Exception):
    """Base exception for cqueue API errors"""

    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message)


class APIClient:
    """HTTP client for the cqueue API"""

    def __init__(
        self,
        base_url: str = "http://localhost:3000",
        timeout: int = 30,
        headers: dict[str, str] | None = None,
        client: httpx.Client | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.default_headers = headers or {}
        self.client = client or httpx.Client(
            base_url=self.base_url, timeout=timeout, headers=self.default_headers
        )

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.client.close()

    def _handle_response(self, response: httpx.Response) -> dict[str, Any]:
        """Handle API response and extract data"""
        try:
            data = response.json()
        except ValueError:
            raise CQueueError(
                f"Invalid JSON response: {response.status_code}",
                status_code=response.status_code,
            ) from None

        if response.status_code >= 400:
            error = data.get("error") or {}
            error_msg = error.get("message") or data.get("detail") or "Unknown error"
            raise CQueueError(
                f"API Error {response.status_code}: {error_msg}",
                status_code=response.status_code,
            )

        # Envelope format (health check)
        if "ok" in data:
            return data.get("data", {})

        return data

    def request(
        self, method: str, path: str, json: dict[str, Any] | None = None
    ) -> dict[str, Any]:
        """Send a request and return the decoded body"""
        try:
            response = self.client.request(method, path, json=json)
        except httpx.RequestError as e:
            console.print(f"[red]Connection error: {e}[/red]")
            raise CQueueError(f"Connection failed: {e}") from None
        return self._handle_response(response)

    def get(self, path: str) -> dict[str, Any]:
        """Make GET request"""
        return self.request("GET", path)

    def post(self, path: str, json: dict[str, Any] | None = None) -> dict[str, Any]:
        """Make POST request"""
        return self.request("POST", path, json=json)

    def put(self, path: str, json: dict[str, Any] | None = None) -> dict[str, Any]:
        """Make PUT request"""
        return self.request("PUT", path, json=json)
