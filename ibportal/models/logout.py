"""Logout result model."""

from pydantic import BaseModel, ConfigDict, StrictBool


class LogoutResponse(BaseModel):
    """Result of ending the session."""

    status: StrictBool

    model_config = ConfigDict(frozen=True)
