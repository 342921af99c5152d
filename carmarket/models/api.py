"""
API models - the response envelope and request payloads of the marketplace API.
"""
from typing import Any, Literal, Optional

from pydantic import BaseModel, Field


class ApiResponse(BaseModel):
    """Envelope returned for every API call: {success, data?, error?}."""
    success: bool
    data: Optional[Any] = None
    message: Optional[str] = None
    error: Optional[str] = None
    status_code: Optional[int] = Field(default=None, description="HTTP status, None on transport failure")

    @classmethod
    def failure(cls, error: str, status_code: Optional[int] = None) -> "ApiResponse":
        return cls(success=False, error=error, status_code=status_code)


class LoginCredentials(BaseModel):
    email: str
    password: str


class RegisterData(BaseModel):
    first_name: str
    last_name: str
    email: str
    phone: str
    password: str
    role: Literal["buyer", "dealer"] = "buyer"

    def to_payload(self) -> dict[str, Any]:
        return {
            "firstName": self.first_name,
            "lastName": self.last_name,
            "email": self.email,
            "phone": self.phone,
            "password": self.password,
            "role": self.role,
        }


class SearchFilters(BaseModel):
    """Listing search filters, sent as query parameters."""
    query: Optional[str] = None
    make: Optional[str] = None
    model: Optional[str] = None
    min_price: Optional[float] = None
    max_price: Optional[float] = None
    min_year: Optional[int] = None
    max_year: Optional[int] = None
    body_type: Optional[str] = None
    fuel_type: Optional[str] = None
    transmission: Optional[str] = None
    location: Optional[str] = None
    page: Optional[int] = Field(default=None, ge=1)
    limit: Optional[int] = Field(default=None, ge=1, le=100)

    def to_params(self) -> dict[str, str]:
        """Non-empty filters keyed by their camelCase API names."""
        params = {}
        for name, value in self.model_dump(exclude_none=True).items():
            head, *rest = name.split("_")
            key = head + "".join(part.title() for part in rest)
            params[key] = str(value)
        return params
