import base64

import pytest

from tokbox.errors import DecodeError
from tokbox.utils.auth_tokbox import decode_token, verify_token


def test_verify_token_accepts_matching_secret(session):
    token = session.token(role="publisher", expiration_seconds=3600)
    assert verify_token(token, "s1")


def test_verify_token_rejects_wrong_secret(session):
    token = session.token()
    assert not verify_token(token, "other")


def test_verify_token_rejects_tampered_payload(session):
    decoded = decode_token(session.token(role="subscriber"))
    forged_payload = decoded.payload.replace("role=subscriber", "role=moderator")
    forged = "T1==" + base64.b64encode(
        f"partner_id=k1&sig={decoded.signature}:{forged_payload}".encode()
    ).decode()
    assert not verify_token(forged, "s1")


@pytest.mark.parametrize(
    "token",
    [
        "not-a-token",
        "T1==***",
        "T1==" + base64.b64encode(b"hello").decode(),
        "T1==" + base64.b64encode(b"partner_id=k1&sig=abc").decode(),
    ],
)
def test_decode_token_rejects_malformed(token):
    with pytest.raises(DecodeError):
        decode_token(token)
    assert not verify_token(token, "s1")


def test_decode_token_exposes_fields(session):
    decoded = decode_token(session.token(connection_data="a b", clock=lambda: 10, nonce_source=lambda: 5))
    assert decoded.partner_id == "k1"
    assert decoded.fields == {
        "session_id": "abc123",
        "create_time": "10",
        "connection_data": "a b",
        "nonce": "5",
    }
