"""
Configuration management.
Simple .env based config, every value overridable by environment.
"""

from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""
    
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )
    
    # Server
    host: str = "0.0.0.0"
    port: int = 3000
    cors_origins: List[str] = ["*"]
    
    # Database (recreated empty on every start)
    database_path: str = "./database.db"
    
    # Seed source
    seed_url: str = "https://s3.amazonaws.com/roxiler.com/product_transaction.json"
    seed_timeout: float = 30.0
    seed_replace_existing: bool = False
    
    # Listing
    max_per_page: int = 100
    
    # Logging
    log_level: str = "INFO"


# Global settings instance
settings = Settings()
