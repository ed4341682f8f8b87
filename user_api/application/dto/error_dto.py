from typing import List

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """DTO for every error body returned by the API"""
    error: str  # HTTP reason phrase, e.g. "Not Found"
    message: str
    code: int


class ErrorExampleResponse(BaseModel):
    """DTO for one entry of the error examples catalog"""
    code: str
    name: str
    endpoint: str
    description: str


class ErrorExampleCatalogResponse(BaseModel):
    """DTO for the error examples catalog"""
    available_examples: List[ErrorExampleResponse]
    message: str
