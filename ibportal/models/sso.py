"""Single sign-on validation models.

The SSO endpoint is the only one keyed in UPPER_SNAKE_CASE, so the response
model derives its aliases from the field names. The nested ``Features``
object goes back to camelCase.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt, StrictStr

from ..core.enums import LoginType


class Features(BaseModel):
    """Entitlement flags of the account."""

    env: StrictStr
    wlms: StrictBool
    realtime: StrictBool
    bond: StrictBool
    option_chains: StrictBool = Field(..., alias="optionChains")
    calendar: StrictBool
    new_mf: StrictBool = Field(..., alias="newMf")

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class SsoValidateResponse(BaseModel):
    """Payload of ``sso/validate``.

    ``result=False`` means the SSO ticket is invalid or expired; it is a
    regular answer, not a transport failure.
    """

    user_id: StrictInt
    user_name: StrictStr
    result: StrictBool
    auth_time: StrictInt
    sf_enabled: StrictBool
    is_free_trial: StrictBool
    credential: StrictStr
    ip: StrictStr
    expires: StrictInt
    qualified_for_mobile_auth: StrictBool | None = None
    landing_app: StrictStr
    is_master: StrictBool
    last_accessed: StrictInt
    login_type: StrictInt
    paper_user_name: StrictStr | None = None
    features: Features | None = None
    region: StrictStr | None = None

    model_config = ConfigDict(
        frozen=True, populate_by_name=True, alias_generator=str.upper
    )

    @property
    def login_kind(self) -> LoginType | None:
        """Login type as an enum, ``None`` for codes this client does not know."""
        return LoginType.from_code(self.login_type)

    @property
    def is_paper(self) -> bool:
        return self.login_kind is LoginType.PAPER
