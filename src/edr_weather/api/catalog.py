"""
Collection metadata operations for the EDR API.

Handles listing collections and fetching a single collection's metadata.
"""

import logging
from typing import List, Dict, Any, Optional

from ..core import constants
from ..core.exceptions import MalformedResponseError
from ..models import Collection


class CatalogAPI:
    """Mixin for collection metadata operations."""

    # Type hints for attributes provided by APIClient base class
    logger: logging.Logger

    def get(
        self,
        endpoint: str,
        params: Optional[Dict[str, Any]] = None,
        timeout_ms: Optional[int] = None
    ) -> Any:
        """Method provided by APIClient base class."""
        ...

    def get_collections(self) -> Dict[str, Any]:
        """
        Fetch all available collections.

        Returns:
            Raw collections response: {"collections": [...], "links": [...]}

        Raises:
            MalformedResponseError: If the body is not a JSON object
        """
        self.logger.info("Fetching collections")
        result = self.get("/collections")
        if not isinstance(result, dict):
            raise MalformedResponseError("Collections listing is not a JSON object")
        return result

    def list_collections(self) -> List[Collection]:
        """Fetch all collections as Collection models."""
        response = self.get_collections()
        return [
            Collection.from_dict(item)
            for item in response.get("collections", [])
            if isinstance(item, dict)
        ]

    def get_collection(self, collection_id: str = constants.DEFAULT_COLLECTION) -> Collection:
        """
        Fetch metadata for a specific collection.

        Args:
            collection_id: Collection ID (default: pal_skandinavia)

        Returns:
            Collection model

        Raises:
            MalformedResponseError: If the body is not a JSON object
        """
        self.logger.debug(f"Fetching collection {collection_id}")
        result = self.get(f"/collections/{collection_id}")
        if not isinstance(result, dict):
            raise MalformedResponseError(f"Metadata for collection {collection_id} is not a JSON object")
        return Collection.from_dict(result)
