"""
Pydantic models for the user service API.
"""

from typing import Optional

from pydantic import BaseModel, Field

from .domain.entities import User


class UserPayload(BaseModel):
    """Create-or-update request body. A missing or non-positive id creates."""

    id: int = Field(default=0, description="Existing user id; omit or 0 to create")
    name: str = ""
    age: int = 0
    city: str = ""

    def to_user(self) -> User:
        return User(id=self.id, name=self.name, age=self.age, city=self.city)


class UserResponse(BaseModel):
    """Single user response model."""

    id: int
    name: str
    age: int
    city: str

    @classmethod
    def from_user(cls, user: User) -> "UserResponse":
        return cls(id=user.id, name=user.name, age=user.age, city=user.city)


class UserListItem(BaseModel):
    """User entry in the list response; keys are capitalised."""

    ID: int
    Name: str
    Age: int
    City: str

    @classmethod
    def from_user(cls, user: User) -> "UserListItem":
        return cls(ID=user.id, Name=user.name, Age=user.age, City=user.city)


class MessageResponse(BaseModel):
    """Generic message response."""

    message: str


class ErrorResponse(BaseModel):
    """Error response body."""

    error: str


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    service: str
    version: str
    redis: Optional[str] = None
