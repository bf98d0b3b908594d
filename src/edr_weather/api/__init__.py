"""
API layer for the OGC EDR API (FMI Open Data).

Provides the low-level client for collection metadata and data queries.
"""

import logging
from typing import Optional

from .client import APIClient
from .catalog import CatalogAPI
from .queries import QueriesAPI
from . import helpers


class EdrAPI(APIClient, CatalogAPI, QueriesAPI):
    """
    Unified API client for an EDR endpoint.

    Combines collection metadata and position/area/location queries.
    """

    def __init__(
        self,
        base_url: str,
        timeout_ms: Optional[int] = None,
        max_retries: int = 0,
        verify_ssl: bool = True,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize unified API client.

        Args:
            base_url: Base URL for the API
            timeout_ms: Default request timeout in milliseconds
            max_retries: Maximum number of retry attempts
            verify_ssl: Whether to verify SSL certificates
            logger: Logger instance
        """
        super().__init__(
            base_url=base_url,
            timeout_ms=timeout_ms,
            max_retries=max_retries,
            verify_ssl=verify_ssl,
            logger=logger
        )


__all__ = [
    "APIClient",
    "CatalogAPI",
    "QueriesAPI",
    "EdrAPI",
    "helpers",
]
