"""Historical market data subsystem model."""

from pydantic import BaseModel, ConfigDict, StrictBool


class HmdsInitResponse(BaseModel):
    """Result of ``hmds/auth/init``."""

    authenticated: StrictBool

    model_config = ConfigDict(frozen=True)
