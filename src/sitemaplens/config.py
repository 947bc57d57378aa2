# SitemapLens — Configuration via Pydantic BaseSettings
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
	"""Application settings with sane defaults.

	Environment variables are prefixed with SITEMAPLENS_. CLI flags can override.
	"""

	model_config = SettingsConfigDict(env_prefix="SITEMAPLENS_", env_file=".env", extra="ignore")

	user_agent: str = Field(default="SitemapLens/0.1 (+https://example.com)")
	timeout: float = Field(default=15.0, gt=0)
	retries: int = Field(default=0, ge=0)
	backoff: float = Field(default=0.5, ge=0)
	max_sitemap_depth: int = Field(default=5, ge=0)
	log_level: str = Field(default="INFO")
	log_dir: str = Field(default="logs")
