"""
Base API client for the OGC EDR API.

Handles HTTP requests, session management, and error handling.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from concurrent.futures import TimeoutError as FutureTimeoutError
from typing import Dict, Any, Optional

import requests  # type: ignore
from requests.adapters import HTTPAdapter  # type: ignore
from urllib3.util.retry import Retry  # type: ignore

from ..core.exceptions import FetchError, MalformedResponseError


class APIClient:
    """Base client for interacting with an EDR API."""

    def __init__(
        self,
        base_url: str,
        timeout_ms: Optional[int] = None,
        max_retries: int = 0,
        verify_ssl: bool = True,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize API client.

        Args:
            base_url: Base URL for the API
            timeout_ms: Default request timeout in milliseconds (None waits indefinitely)
            max_retries: Retry attempts on 429/5xx responses (0 disables retries)
            verify_ssl: Whether to verify SSL certificates
            logger: Logger instance
        """
        self.base_url = base_url.rstrip("/")
        self.timeout_ms = timeout_ms
        self.logger = logger or logging.getLogger(__name__)
        self.verify_ssl = verify_ssl

        if not verify_ssl:
            import urllib3
            urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)

        self.session = requests.Session()
        if max_retries > 0:
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

        self.session.headers.update({
            "Accept": "application/json"
        })

    @staticmethod
    def _timeout_seconds(timeout_ms: Optional[int]) -> Optional[float]:
        if timeout_ms is None:
            return None
        return timeout_ms / 1000.0

    def _send(self, method: str, url: str, timeout: Optional[float], **kwargs) -> requests.Response:
        response = self.session.request(method=method, url=url, timeout=timeout, **kwargs)
        response.content  # read the whole body before returning
        return response

    def _send_with_deadline(self, method: str, url: str, timeout: float, **kwargs) -> requests.Response:
        """
        Send a request that must complete, body included, within `timeout` seconds.

        The send runs on a worker thread and is abandoned once the deadline
        passes; the requests timeout still bounds each socket read of the
        abandoned thread.

        Raises:
            requests.exceptions.Timeout: If the deadline passes first
        """
        executor = ThreadPoolExecutor(max_workers=1)
        future = executor.submit(self._send, method, url, timeout, **kwargs)
        try:
            return future.result(timeout=timeout)
        except FutureTimeoutError as e:
            raise requests.exceptions.Timeout(f"No complete response within {timeout:.3f}s") from e
        finally:
            executor.shutdown(wait=False)

    def _make_request(
        self,
        method: str,
        endpoint: str,
        timeout_ms: Optional[int] = None,
        **kwargs
    ) -> requests.Response:
        """
        Make HTTP request to API.

        Args:
            method: HTTP method
            endpoint: API endpoint (without base URL)
            timeout_ms: Per-call timeout in milliseconds, overrides the client default
            **kwargs: Additional arguments for requests

        Returns:
            Response object

        Raises:
            FetchError: On non-2xx status, network failure or timeout
        """
        url = f"{self.base_url}/{endpoint.lstrip('/')}"
        kwargs.setdefault("verify", self.verify_ssl)
        effective_timeout = timeout_ms if timeout_ms is not None else self.timeout_ms
        timeout = self._timeout_seconds(effective_timeout)

        self.logger.debug(f"{method} {url} params={kwargs.get('params')}")

        try:
            if timeout is None:
                response = self._send(method, url, None, **kwargs)
            else:
                response = self._send_with_deadline(method, url, timeout, **kwargs)
            response.raise_for_status()
            return response

        except requests.exceptions.Timeout as e:
            self.logger.error(f"API request timed out after {effective_timeout} ms: {method} {url}")
            raise FetchError(
                f"Request timed out after {effective_timeout} ms: {url}", url=url
            ) from e

        except requests.exceptions.HTTPError as e:
            status = e.response.status_code if e.response is not None else None
            reason = e.response.reason if e.response is not None else ""
            self.logger.error(f"API request failed: {method} {url} - {status} {reason}")
            raise FetchError(
                f"Request failed with status {status} {reason}: {url}",
                url=url,
                status_code=status
            ) from e

        except requests.exceptions.RequestException as e:
            self.logger.error(f"API request failed: {method} {url} - {e}")
            raise FetchError(f"Request failed: {url} - {e}", url=url) from e

    def get(
        self,
        endpoint: str,
        params: Optional[Dict[str, Any]] = None,
        timeout_ms: Optional[int] = None
    ) -> Any:
        """
        Make GET request.

        Args:
            endpoint: API endpoint
            params: Query parameters
            timeout_ms: Per-call timeout in milliseconds

        Returns:
            Parsed JSON body

        Raises:
            FetchError: On request failure
            MalformedResponseError: If the body is not JSON
        """
        response = self._make_request("GET", endpoint, params=params, timeout_ms=timeout_ms)
        try:
            return response.json()
        except ValueError as e:
            raise MalformedResponseError(f"Response from {response.url} is not valid JSON") from e

    def close(self) -> None:
        """Close the session."""
        self.session.close()

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
