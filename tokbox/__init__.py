from tokbox.config import Settings, get_settings
from tokbox.errors import (
    BodyReadError,
    DecodeError,
    EmptyResponseError,
    RemoteError,
    SigningError,
    TokboxError,
    TransportError,
)
from tokbox.models.session_model import CredentialPair, Recording, Role, Session
from tokbox.services.token_signer import generate_token
from tokbox.services.tokbox_client import TokboxClient
from tokbox.utils.auth_tokbox import decode_token, verify_token

__all__ = [
    "BodyReadError",
    "CredentialPair",
    "DecodeError",
    "EmptyResponseError",
    "Recording",
    "RemoteError",
    "Role",
    "Session",
    "Settings",
    "SigningError",
    "TokboxClient",
    "TokboxError",
    "TransportError",
    "decode_token",
    "generate_token",
    "get_settings",
    "verify_token",
]
