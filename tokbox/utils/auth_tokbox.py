from __future__ import annotations

import base64
import binascii
import hmac
from urllib.parse import parse_qsl

from pydantic import BaseModel, ConfigDict

from tokbox.errors import DecodeError
from tokbox.services.token_signer import TOKEN_PREFIX, sign_payload


class DecodedToken(BaseModel):
    model_config = ConfigDict(frozen=True)

    partner_id: str
    signature: str
    payload: str
    fields: dict[str, str]


def decode_token(token: str) -> DecodedToken:
    if not token.startswith(TOKEN_PREFIX):
        raise DecodeError("token does not start with T1==")
    try:
        raw = base64.b64decode(token[len(TOKEN_PREFIX):], validate=True).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError) as exc:
        raise DecodeError(f"token body is not valid base64: {exc}") from exc

    head, sep, rest = raw.partition("&sig=")
    if not sep or not head.startswith("partner_id="):
        raise DecodeError("token is missing partner_id or sig")
    signature, sep, payload = rest.partition(":")
    if not sep:
        raise DecodeError("token signature is not followed by a payload")

    return DecodedToken(
        partner_id=head[len("partner_id="):],
        signature=signature,
        payload=payload,
        fields=dict(parse_qsl(payload, keep_blank_values=True)),
    )


def verify_token(token: str, secret: str) -> bool:
    try:
        decoded = decode_token(token)
    except DecodeError:
        return False
    expected = sign_payload(secret, decoded.payload)
    return hmac.compare_digest(expected, decoded.signature)
