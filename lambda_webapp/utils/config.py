"""Runtime settings read from the environment."""

import os
from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field

DEVELOPMENT = "development"
DEFAULT_REGION = "eu-west-1"
API_PREFIX = "/api/"


class Settings(BaseModel):
    """Plain values the router and content providers consume."""
    model_config = ConfigDict(frozen=True)

    environment: str = Field(default=DEVELOPMENT, description="Runtime environment designator")
    region: str = Field(default=DEFAULT_REGION, description="Deployment region name")
    api_prefix: str = Field(default=API_PREFIX, description="Prefix eligible for parameterized routes")

    @property
    def is_development(self) -> bool:
        """Stack traces are only exposed in development."""
        return self.environment.lower() == DEVELOPMENT

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from environment variables, defaulting missing values."""
        env = os.environ if environ is None else environ
        environment = (env.get("ENVIRONMENT") or env.get("NODE_ENV") or DEVELOPMENT).strip()
        region = (env.get("AWS_REGION") or DEFAULT_REGION).strip()
        return cls(environment=environment, region=region)
