"""
Warehouse Explorer Configuration
================================
Environment-aware settings using pydantic-settings.
Loads from environment variables or .env files.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Environment: 'dev' routes all tables to dev schema, 'prod' uses defined schemas
    environment: str = "dev"

    # Supabase (warehouse access)
    supabase_url: str = ""
    supabase_service_key: str = ""

    # Scan settings
    page_size: int = 1000
    max_workers: int = 1

    # Relation label → physical table
    relation_tables: dict[str, str] = {
        "fact_sales": "gold.fact_sales",
        "dim_customers": "gold.dim_customers",
        "dim_products": "gold.dim_products",
    }


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
