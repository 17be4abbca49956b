from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Callable

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from tokbox.config import Settings


class Role(str, Enum):
    PUBLISHER = "publisher"
    SUBSCRIBER = "subscriber"
    MODERATOR = "moderator"


class CredentialPair(BaseModel):
    model_config = ConfigDict(frozen=True)

    api_key: str
    partner_secret: str = Field(repr=False)

    @classmethod
    def from_settings(cls, settings: Settings) -> CredentialPair:
        if not settings.tokbox_key or not settings.tokbox_secret:
            raise ValueError("TOKBOX_KEY and TOKBOX_SECRET must both be set")
        return cls(api_key=settings.tokbox_key, partner_secret=settings.tokbox_secret)

    @property
    def auth_header(self) -> str:
        return f"{self.api_key}:{self.partner_secret}"


class Session(BaseModel):
    """A session created on the service, bound to the credentials that created it."""

    model_config = ConfigDict(frozen=True)

    session_id: str
    partner_id: str = ""
    create_dt: str = ""
    session_status: str = ""
    credentials: CredentialPair | None = Field(default=None, repr=False)

    def token(
        self,
        role: Role | str = "",
        connection_data: str = "",
        expiration_seconds: int = 0,
        *,
        clock: Callable[[], float] | None = None,
        nonce_source: Callable[[], int] | None = None,
    ) -> str:
        # 86400 seconds is the service default lifetime when expiration_seconds <= 0.
        from tokbox.services.token_signer import generate_token

        return generate_token(
            self,
            role=role,
            connection_data=connection_data,
            expiration_seconds=expiration_seconds,
            clock=clock,
            nonce_source=nonce_source,
        )


class Recording(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    id: str
    session_id: str = Field(alias="sessionId")
