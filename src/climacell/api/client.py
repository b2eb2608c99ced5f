"""
Base API client for the ClimaCell weather API.

Handles HTTP requests, session management, and error handling.
"""

import logging
from typing import Dict, Any, Optional

import requests  # type: ignore
from requests.adapters import HTTPAdapter  # type: ignore
from urllib3.util.retry import Retry  # type: ignore

from ..core import constants
from ..exceptions import DecodeError, RemoteError
from ..models.weather import load_json


class APIClient:
    """Base client for interacting with the ClimaCell API."""

    def __init__(
        self,
        api_key: str,
        base_url: str = constants.DEFAULT_BASE_URL,
        timelines_url: str = constants.DEFAULT_TIMELINES_URL,
        timeout: int = constants.DEFAULT_TIMEOUT,
        max_retries: int = constants.DEFAULT_MAX_RETRIES,
        session: Optional[requests.Session] = None,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize API client.

        Args:
            api_key: ClimaCell API key, sent with every request
            base_url: Base URL of the v3 weather endpoints
            timelines_url: Base URL of the v4 timelines endpoint
            timeout: Request timeout in seconds
            max_retries: Transport-level retry attempts (0 disables retries)
            session: Pre-configured session to use instead of creating one
            logger: Logger instance
        """
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timelines_url = timelines_url.rstrip("/")
        self.timeout = timeout
        self.logger = logger or logging.getLogger(__name__)

        if session is not None:
            self.session = session
        else:
            self.session = requests.Session()
            retry_strategy = Retry(
                total=max_retries,
                backoff_factor=1,
                status_forcelist=[429, 500, 502, 503, 504],
                allowed_methods=["GET"],
                raise_on_status=False
            )
            adapter = HTTPAdapter(max_retries=retry_strategy)
            self.session.mount("http://", adapter)
            self.session.mount("https://", adapter)

    def _headers(self) -> Dict[str, str]:
        return {
            "Accept": "application/json",
            constants.API_KEY_HEADER: self.api_key,
        }

    def _make_request(
        self,
        method: str,
        url: str,
        **kwargs
    ) -> requests.Response:
        """
        Make HTTP request to API.

        Args:
            method: HTTP method
            url: Absolute URL
            **kwargs: Additional arguments for requests

        Returns:
            Response object with a 2xx status

        Raises:
            requests.exceptions.RequestException: On transport failure
            RemoteError: On a non-2xx response
        """
        self.logger.debug(f"{method} {url} params={kwargs.get('params')}")

        try:
            response = self.session.request(
                method=method,
                url=url,
                headers=self._headers(),
                timeout=self.timeout,
                **kwargs
            )
        except requests.exceptions.RequestException as e:
            self.logger.error(f"API request failed: {method} {url} - {e}")
            raise

        if not 200 <= response.status_code < 300:
            error = self._remote_error(response)
            self.logger.error(f"API returned an error: {method} {url} - {error}")
            raise error

        return response

    @staticmethod
    def _remote_error(response: requests.Response) -> RemoteError:
        """Build a RemoteError from an error response, parsing its body if possible."""
        message = response.reason or "request failed"
        error_code = None
        body: Any = None

        try:
            body = load_json(response.content)
        except DecodeError:
            body = response.text or None

        if isinstance(body, dict):
            message = body.get("message") or message
            code = body.get("errorCode") or body.get("type") or body.get("code")
            if code is not None:
                error_code = str(code)

        return RemoteError(response.status_code, message, error_code=error_code, body=body)

    def get(
        self,
        endpoint: str,
        params: Optional[Dict[str, str]] = None,
        base_url: Optional[str] = None
    ) -> Any:
        """
        Make GET request.

        Args:
            endpoint: API endpoint (without base URL)
            params: Query parameters
            base_url: Base URL override (defaults to the weather base URL)

        Returns:
            Decoded JSON body

        Raises:
            DecodeError: If the body is not valid JSON
        """
        url = f"{(base_url or self.base_url)}/{endpoint.lstrip('/')}"
        response = self._make_request("GET", url, params=params)

        try:
            return load_json(response.content)
        except DecodeError as e:
            self.logger.error(f"Invalid JSON from {endpoint}: {e}")
            raise e.with_endpoint(endpoint)

    def close(self) -> None:
        """Close the session."""
        self.session.close()

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
