from pydantic import BaseModel, Field
from typing import Optional

class ErrorResponseModel(BaseModel):
    """HTTP error body"""
    error: str = Field(..., description="Error kind")
    detail: str = Field(..., description="Human readable message")
    field: Optional[str] = Field(None, description="Offending input field, for validation errors")
