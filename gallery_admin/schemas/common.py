from datetime import datetime, timezone
from math import ceil
from typing import Any, Dict, Generic, List, Optional
from ..utils.constants import ResponseMessages
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import TypeVar

T = TypeVar("T")


class CamelModel(BaseModel):
    """Domain model exchanged as camelCase JSON, used as snake_case in Python"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_json_dict(self) -> Dict[str, Any]:
        """JSON-ready dict in the stored/wire (camelCase) shape"""
        return self.model_dump(mode="json", by_alias=True)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class BaseResponse(BaseModel, Generic[T]):
    """Base response model for all API responses"""

    success: bool = True
    message: str
    timestamp: datetime = Field(default_factory=_utcnow)
    data: Optional[T] = None


class SuccessResponse(BaseResponse[T]):
    """Standard success response with typed data"""

    success: bool = True


class PaginationInfo(BaseModel):
    """Pagination information"""

    current_page: int
    page_size: int
    total_items: int
    total_pages: int
    has_next: bool
    has_previous: bool

    @classmethod
    def build(cls, page: int, page_size: int, total_items: int) -> "PaginationInfo":
        total_pages = ceil(total_items / page_size) if page_size else 0
        return cls(
            current_page=page,
            page_size=page_size,
            total_items=total_items,
            total_pages=total_pages,
            has_next=page < total_pages,
            has_previous=page > 1,
        )


class PaginatedResponse(BaseResponse[List[T]]):
    """Paginated response with typed data"""

    pagination: PaginationInfo


class ResponseFactory:
    """Factory for creating consistent API responses"""

    @staticmethod
    def success(
        data: T = None, message: str = ResponseMessages.SUCCESS
    ) -> SuccessResponse[T]:
        return SuccessResponse(data=data, message=message)

    @staticmethod
    def created(
        data: T = None, message: str = ResponseMessages.CREATED
    ) -> SuccessResponse[T]:
        return SuccessResponse(data=data, message=message)

    @staticmethod
    def paginated(
        data: List[T],
        pagination: PaginationInfo,
        message: str = ResponseMessages.SUCCESS,
    ) -> PaginatedResponse[T]:
        return PaginatedResponse(data=data, pagination=pagination, message=message)
