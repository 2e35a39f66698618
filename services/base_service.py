"""
Base service class for the Slack draft webhook

Provides common read/write operations and error handling for store-backed services.
"""
import logging
from typing import Optional, Type, TypeVar, Generic, Dict, Any, List

from pydantic import ValidationError

from api.client import StoreClient
from models.base import DraftBaseModel
from exceptions import APIException

logger = logging.getLogger(f'{__name__}.BaseService')

T = TypeVar('T', bound=DraftBaseModel)


class BaseService(Generic[T]):
    """
    Base service class providing common store operations for draft models.

    Features:
    - Generic type support for any DraftBaseModel subclass
    - Automatic model validation and conversion
    - Standardized error handling
    - Firebase collection format handling (array or keyed object)
    """

    def __init__(self,
                 model_class: Type[T],
                 client: StoreClient,
                 root_path: str = ""):
        """
        Initialize base service.

        Args:
            model_class: Pydantic model class for this service
            client: Store client used for every request
            root_path: Database path prefix (e.g. 'draftData')
        """
        self.model_class = model_class
        self.client = client
        self.root_path = root_path.strip('/')

        logger.debug(f"Initialized {self.__class__.__name__} for {model_class.__name__} at '{self.root_path}'")

    def _path(self, *parts: str) -> str:
        """Join path parts under the service root."""
        return '/'.join(p.strip('/') for p in (self.root_path, *parts) if p)

    @staticmethod
    def _extract_items(data: Any) -> List[Any]:
        """
        Normalize a stored collection into a list.

        Firebase returns arrays as JSON arrays, but as objects keyed by index
        when the array is sparse. Both keep their stored order.
        """
        if not data:
            return []
        if isinstance(data, list):
            return data
        if isinstance(data, dict):
            return list(data.values())
        logger.warning(f"Unexpected collection format: {type(data).__name__}")
        return []

    async def get_collection(self, *parts: str) -> List[T]:
        """
        Get every valid item stored in a collection.

        Null holes and entries that fail model validation are skipped.

        Args:
            *parts: Path parts under the service root

        Returns:
            List of model instances in stored order

        Raises:
            APIException: For store errors
        """
        path = self._path(*parts)
        try:
            data = await self.client.get(path)
        except APIException:
            logger.error(f"API error retrieving {self.model_class.__name__} list at '{path}'")
            raise

        models = []
        for index, item in enumerate(self._extract_items(data)):
            if not isinstance(item, dict):
                continue
            try:
                models.append(self.model_class.from_api_data(item))
            except (ValidationError, ValueError) as e:
                logger.debug(f"Skipping invalid {self.model_class.__name__} at {path}[{index}]: {e}")

        logger.debug(f"Retrieved {len(models)} {self.model_class.__name__} objects from '{path}'")
        return models

    async def put_value(self, data: Any, *parts: str) -> Optional[Dict[str, Any]]:
        """
        Overwrite the value at a path under the service root.

        Args:
            data: JSON-serializable value
            *parts: Path parts under the service root

        Returns:
            Store response

        Raises:
            APIException: For store errors
        """
        path = self._path(*parts)
        try:
            return await self.client.put(path, data)
        except APIException:
            logger.error(f"API error writing '{path}'")
            raise
