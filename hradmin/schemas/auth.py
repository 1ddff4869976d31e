"""Auth API schemas."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from hradmin.domain.enums import AdminRole


class LoginRequest(BaseModel):
    """Request body for admin login (mobile number + password)."""

    mobile: str = Field(..., min_length=10, max_length=15, description="Admin mobile number")
    password: str = Field(..., min_length=1)

    @field_validator("mobile")
    @classmethod
    def _strip_country_code(cls, v: str) -> str:
        """Accept '+91XXXXXXXXXX' and bare 10-digit numbers alike."""
        v = v.strip().replace(" ", "")
        if v.startswith("+91"):
            v = v[3:]
        if not v.isdigit():
            raise ValueError("mobile must contain digits only")
        return v


class TokenResponse(BaseModel):
    """JWT token response."""

    access_token: str
    token_type: str = "bearer"


class AdminResponse(BaseModel):
    """Authenticated admin (no password hash)."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    mobile: str
    role: AdminRole
