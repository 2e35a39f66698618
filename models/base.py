"""
Base model for all draft webhook entities

Provides common functionality for data validation and serialization.
"""
from pydantic import BaseModel, ConfigDict
from typing import Dict, Any


class DraftBaseModel(BaseModel):
    """Base model for all draft webhook entities with common functionality."""

    model_config = ConfigDict(
        validate_assignment=True,
        use_enum_values=True,
        populate_by_name=True,
    )

    def __repr__(self):
        fields = ', '.join(f'{k}={v}' for k, v in self.model_dump(exclude_none=True).items())
        return f"{self.__class__.__name__}({fields})"

    @classmethod
    def from_api_data(cls, data: Dict[str, Any]):
        """Create model instance from API response data."""
        if not data:
            raise ValueError(f"Cannot create {cls.__name__} from empty data")
        return cls(**data)
