from typing import Generic, List, Optional, TypeVar
from pydantic import BaseModel, Field

T = TypeVar('T')

class ApiResponse(BaseModel, Generic[T]):
    status: str = Field(..., description="'success' or 'error'")
    message: str = Field(..., description="Human readable outcome")
    data: Optional[T] = Field(None, description="Payload of the response")

    @classmethod
    def success(cls, message: str, data: Optional[T] = None) -> "ApiResponse[T]":
        return cls(status="success", message=message, data=data)

class PageResponse(BaseModel, Generic[T]):
    content: List[T] = Field(default_factory=list, description="Items of the current page")
    currentPage: int = Field(..., ge=0, description="Zero-based index of the current page")
    totalItems: int = Field(..., ge=0, description="Number of items across all pages")
    totalPages: int = Field(..., ge=0, description="Number of pages at the requested size")
