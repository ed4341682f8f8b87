from pydantic import BaseModel


class UserCreateRequest(BaseModel):
    """DTO for user creation request"""
    name: str = ""  # Missing name is rejected by the use case, not by parsing


class UserResponse(BaseModel):
    """DTO for user response"""
    id: str
    name: str
