"""Pydantic schemas for tenant (company account) records."""

from typing import Optional, List

from pydantic import BaseModel, Field, EmailStr


class EmailSettings(BaseModel):
    """Sender settings used for candidate notification emails."""
    
    sender_name: str = Field(..., description="Display name of the sender")
    sender_email: EmailStr = Field(..., description="Sender address")
    email_subject: str = Field(..., description="Subject line template")


class TenantBase(BaseModel):
    """Branding and profile fields shared by tenant schemas."""
    
    email: EmailStr = Field(..., description="Login email")
    company_name: str = Field(..., min_length=1, max_length=255, description="Company name")
    logo_url: Optional[str] = Field(None, description="Company logo URL")
    brand_color: str = Field(..., description="Brand color as a hex string")
    departments: List[str] = Field(..., description="Department labels in display order")
    intro_text: str = Field(..., description="Subscription page intro text")
    careers_page_url: str = Field(..., description="Link to the company careers page")
    email_settings: Optional[EmailSettings] = None
    ats_provider: Optional[str] = Field(None, description="External ATS provider name")
    company_ats_id: Optional[str] = Field(None, description="Company id in the external ATS")


class TenantCreate(BaseModel):
    """Schema for registering a new tenant.
    
    Optional branding fields left out are filled from the configured
    tenant defaults.
    """
    
    email: EmailStr
    password: str = Field(..., min_length=1)
    company_name: str = Field(..., min_length=1, max_length=255)
    logo_url: Optional[str] = None
    brand_color: Optional[str] = None
    departments: Optional[List[str]] = None
    intro_text: Optional[str] = None
    careers_page_url: Optional[str] = None


class TenantUpdate(BaseModel):
    """Schema for updating a tenant. Only provided fields are changed."""
    
    company_name: Optional[str] = Field(None, min_length=1, max_length=255)
    logo_url: Optional[str] = None
    brand_color: Optional[str] = None
    departments: Optional[List[str]] = None
    intro_text: Optional[str] = None
    careers_page_url: Optional[str] = None
    email_settings: Optional[EmailSettings] = None
    ats_provider: Optional[str] = None
    company_ats_id: Optional[str] = None


class TenantResponse(TenantBase):
    """Schema for tenant response."""
    
    id: str


class TenantInDB(TenantResponse):
    """Stored tenant record including the password hash."""
    
    hashed_password: str
    
    def to_response(self) -> TenantResponse:
        return TenantResponse(**self.model_dump(exclude={"hashed_password"}))


class PublicTenantProfile(BaseModel):
    """Branding subset rendered on the public subscription page."""
    
    id: str
    company_name: str
    logo_url: Optional[str] = None
    brand_color: str
    departments: List[str]
    intro_text: str
    careers_page_url: str


class LoginRequest(BaseModel):
    """Login credentials."""
    
    email: EmailStr
    password: str


class AuthResponse(BaseModel):
    """Result of a successful registration or login."""
    
    message: str
    tenant: TenantResponse
    access_token: str
    token_type: str = "bearer"
    expires_in: int
