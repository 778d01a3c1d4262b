"""Keepalive (tickle) models."""

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt, StrictStr

from ..config import SSO_EXPIRY_WARNING_MS
from .auth_status import AuthStatus


class HmdsInfo(BaseModel):
    """Historical data subsystem state embedded in a tickle."""

    error: StrictStr | None = None

    model_config = ConfigDict(frozen=True)


class IServerInfo(BaseModel):
    """Trading server state embedded in a tickle."""

    auth_status: AuthStatus = Field(..., alias="authStatus")

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class TickleResponse(BaseModel):
    """Keepalive acknowledgement.

    ``sso_expires`` is the remaining SSO validity in milliseconds exactly as
    the gateway reported it.
    """

    session: StrictStr
    sso_expires: StrictInt = Field(..., alias="ssoExpires")
    # The gateway spells it "collission"
    collision: StrictBool = Field(..., alias="collission")
    user_id: StrictInt = Field(..., alias="userId")
    hmds: HmdsInfo | None = None
    iserver: IServerInfo | None = None

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    def is_expiring(self, threshold_ms: int = SSO_EXPIRY_WARNING_MS) -> bool:
        """Whether the SSO session ends within ``threshold_ms``."""
        return self.sso_expires < threshold_ms

    @property
    def authenticated(self) -> bool | None:
        """Embedded trading-server auth flag, ``None`` when not reported."""
        if self.iserver is None:
            return None
        return self.iserver.auth_status.authenticated
