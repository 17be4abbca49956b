"""Participant token minting.

A token is ``T1==`` followed by the standard base64 encoding of::

    partner_id=<api_key>&sig=<hex hmac-sha1>:<payload>

where ``payload`` is the ordered, form-escaped field string built by
:func:`build_payload`. The service re-derives the signature from that exact
string, so field order and escaping must not change.
"""
from __future__ import annotations

import base64
import hashlib
import hmac
import logging
import random
from typing import Callable
from urllib.parse import quote_plus

from tokbox.errors import SigningError
from tokbox.models.session_model import Role, Session
from tokbox.utils.time_utils import now_unix

logger = logging.getLogger(__name__)

TOKEN_PREFIX = "T1=="
NONCE_MAX = 999999

Clock = Callable[[], float]
NonceSource = Callable[[], int]


def random_nonce() -> int:
    """Uniqueness only, not a security boundary."""
    return random.randint(0, NONCE_MAX)


def build_payload(
    session_id: str,
    create_time: int,
    nonce: int,
    expire_time: int | None = None,
    role: Role | str = "",
    connection_data: str = "",
) -> str:
    if isinstance(role, Role):
        role = role.value
    fields: list[tuple[str, str]] = [
        ("session_id", session_id),
        ("create_time", str(create_time)),
    ]
    if expire_time is not None:
        fields.append(("expire_time", str(expire_time)))
    if role:
        fields.append(("role", role))
    if connection_data:
        fields.append(("connection_data", connection_data))
    fields.append(("nonce", str(nonce)))
    return "&".join(f"{key}={quote_plus(value)}" for key, value in fields)


def sign_payload(secret: str, payload: str) -> str:
    try:
        mac = hmac.new(secret.encode("utf-8"), digestmod=hashlib.sha1)
        mac.update(payload.encode("utf-8"))
        return mac.hexdigest()
    except (TypeError, ValueError, AttributeError) as exc:
        raise SigningError(f"could not sign token payload: {exc}") from exc


def encode_token(api_key: str, signature: str, payload: str) -> str:
    pre_coded = f"partner_id={api_key}&sig={signature}:{payload}"
    return TOKEN_PREFIX + base64.standard_b64encode(pre_coded.encode("utf-8")).decode("ascii")


def generate_token(
    session: Session,
    role: Role | str = "",
    connection_data: str = "",
    expiration_seconds: int = 0,
    *,
    clock: Clock | None = None,
    nonce_source: NonceSource | None = None,
) -> str:
    """Mint a token granting access to ``session``.

    ``expiration_seconds <= 0`` leaves out ``expire_time`` so the service
    applies its default lifetime. Empty ``role`` and ``connection_data`` are
    left out of the payload entirely.
    """
    credentials = session.credentials
    if credentials is None:
        raise SigningError(f"session {session.session_id} has no credentials bound")

    now = int((clock or now_unix)())
    expire_time = now + expiration_seconds if expiration_seconds > 0 else None
    nonce = (nonce_source or random_nonce)()

    payload = build_payload(
        session.session_id,
        create_time=now,
        nonce=nonce,
        expire_time=expire_time,
        role=role,
        connection_data=connection_data,
    )
    signature = sign_payload(credentials.partner_secret, payload)
    logger.debug("Minted token for session %s (expire_time=%s)", session.session_id, expire_time)
    return encode_token(credentials.api_key, signature, payload)
