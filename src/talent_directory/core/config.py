"""Application configuration management."""

from typing import Optional, List
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class TenantDefaults(BaseModel):
    """Values filled in for optional fields when a tenant registers."""
    
    brand_color: str = "#3B82F6"
    departments: List[str] = Field(
        default_factory=lambda: ["Engineering", "Product", "Marketing", "Sales"]
    )
    intro_text_template: str = (
        "Join our team at {company_name}! "
        "We're always looking for talented individuals."
    )
    careers_page_url: str = "#"
    
    def intro_text(self, company_name: str) -> str:
        return self.intro_text_template.format(company_name=company_name)


class Settings(BaseSettings):
    """Application settings with environment variable support."""
    
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        env_nested_delimiter="__",
    )
    
    # Database Configuration
    database_url: Optional[str] = Field(
        default=None,
        description="Full SQLAlchemy URL; takes precedence over the sqlite path"
    )
    sqlite_path: str = Field(default="talent_directory.db", description="SQLite database file")
    
    # API Configuration
    api_host: str = Field(default="0.0.0.0", description="API host")
    api_port: int = Field(default=8000, description="API port")
    secret_key: str = Field(default="dev-secret-key", description="JWT secret key")
    algorithm: str = Field(default="HS256", description="JWT algorithm")
    access_token_expire_minutes: int = Field(default=60, description="Token expiry minutes")
    
    # Application Configuration
    log_level: str = Field(default="INFO", description="Logging level")
    environment: str = Field(default="development", description="Environment name")
    
    # Directory Configuration
    recent_window_days: int = Field(default=7, ge=0, description="Window for recent signups")
    seed_demo_data: bool = Field(default=True, description="Seed the demo tenant on startup")
    csv_quote_fields: bool = Field(
        default=True,
        description="Quote CSV fields containing delimiters instead of writing them raw"
    )
    demo_email: str = Field(default="demo@company.com", description="Reserved demo login email")
    demo_password: str = Field(default="demo123", description="Reserved demo login secret")
    tenant_defaults: TenantDefaults = Field(default_factory=TenantDefaults)
    
    @property
    def sqlalchemy_url(self) -> str:
        """Resolve the database URL, defaulting to a local sqlite file."""
        return self.database_url or f"sqlite:///{self.sqlite_path}"


# Global settings instance
settings = Settings()
