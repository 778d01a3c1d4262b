"""Authentication state and session initialization models."""

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictStr,
    computed_field,
)


class ServerInfo(BaseModel):
    """Backend server the gateway is connected to."""

    server_name: StrictStr = Field(..., alias="serverName")
    server_version: StrictStr = Field(..., alias="serverVersion")

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class AuthStatus(BaseModel):
    """Authentication state reported by ``iserver/auth/status``.

    ``server_info`` is absent while the gateway has no brokerage backend
    connection yet.
    """

    authenticated: StrictBool
    competing: StrictBool
    connected: StrictBool
    message: StrictStr
    mac: StrictStr = Field(..., alias="MAC")
    server_info: ServerInfo | None = Field(None, alias="serverInfo")
    hardware_info: StrictStr | None = Field(None, alias="hardwareInfo")
    fail: StrictStr | None = None

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class InitSessionRequest(BaseModel):
    """Body of ``iserver/auth/ssodh/init``.

    ``publish`` is a protocol constant and always serialized as ``True``.
    """

    compete: bool

    model_config = ConfigDict(frozen=True)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def publish(self) -> bool:
        return True

    def to_wire(self) -> dict[str, bool]:
        """Serialize as the JSON object the gateway expects."""
        return {"publish": self.publish, "compete": self.compete}


class InitSessionResponse(BaseModel):
    """Result of session initialization."""

    authenticated: StrictBool
    competing: StrictBool
    connected: StrictBool
    message: StrictStr
    mac: StrictStr = Field(..., alias="MAC")
    server_info: ServerInfo | None = Field(None, alias="serverInfo")

    model_config = ConfigDict(frozen=True, populate_by_name=True)
