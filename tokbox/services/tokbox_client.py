from __future__ import annotations

import json
import logging
from enum import Enum
from typing import Any
from xml.etree import ElementTree

import httpx
from pydantic import ValidationError

from tokbox.config import get_settings
from tokbox.errors import (
    BodyReadError,
    DecodeError,
    EmptyResponseError,
    RemoteError,
    TransportError,
)
from tokbox.models.session_model import CredentialPair, Recording, Session

logger = logging.getLogger(__name__)

AUTH_HEADER = "X-TB-PARTNER-AUTH"
SESSION_FIELDS = ("session_id", "partner_id", "create_dt", "session_status")


class Endpoint(Enum):
    SESSION_CREATE = "session_create"
    ARCHIVE = "archive"


class TokboxClient:
    """Server-side client for the TokBox partner API.

    Sessions returned by :meth:`new_session` are bound to this client's
    credentials so they can mint tokens on their own.
    """

    def __init__(
        self,
        credentials: CredentialPair | None = None,
        *,
        host: str | None = None,
        client: httpx.Client | None = None,
    ):
        self.settings = get_settings()
        self.credentials = credentials or CredentialPair.from_settings(self.settings)
        self.host = (host or self.settings.tokbox_api_host).rstrip("/")
        self._owns_client = client is None
        self.client = client or httpx.Client(timeout=self.settings.tokbox_timeout)

    @classmethod
    def new(cls, api_key: str, partner_secret: str, **kwargs: Any) -> TokboxClient:
        return cls(CredentialPair(api_key=api_key, partner_secret=partner_secret), **kwargs)

    def __enter__(self) -> TokboxClient:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_client:
            self.client.close()

    def new_session(self, location: str = "", peer_to_peer: bool = False) -> Session:
        data: dict[str, str] = {}
        if location:
            data["location"] = location
        data["p2p.preference"] = "enabled" if peer_to_peer else "disabled"

        body = self._request(Endpoint.SESSION_CREATE, data=data)
        try:
            root = ElementTree.fromstring(body)
        except ElementTree.ParseError as exc:
            raise DecodeError(f"could not parse session response: {exc}") from exc

        entries = root.findall("Session")
        if not entries:
            raise EmptyResponseError("TokBox did not return a session")

        first = entries[0]
        session = Session(
            **{name: first.findtext(name, default="") for name in SESSION_FIELDS},
            credentials=self.credentials,
        )
        logger.debug("Created session %s", session.session_id)
        return session

    def new_recording(self, session: Session, has_audio: bool = True, has_video: bool = True) -> Recording:
        payload = {
            "sessionId": session.session_id,
            "hasAudio": has_audio,
            "hasVideo": has_video,
        }
        body = self._request(
            Endpoint.ARCHIVE,
            content=json.dumps(payload).encode("utf-8"),
            headers={"Content-Type": "application/json"},
        )
        try:
            recording = Recording.model_validate(json.loads(body))
        except (ValueError, ValidationError) as exc:
            raise DecodeError("Couldn't unmarshal JSON response") from exc
        logger.debug("Started recording %s for session %s", recording.id, recording.session_id)
        return recording

    def _url(self, endpoint: Endpoint) -> str:
        if endpoint is Endpoint.SESSION_CREATE:
            return f"{self.host}/session/create"
        if endpoint is Endpoint.ARCHIVE:
            return f"{self.host}/v2/partner/{self.credentials.api_key}/archive"
        raise AssertionError(f"unknown endpoint: {endpoint!r}")

    def _request(self, endpoint: Endpoint, headers: dict[str, str] | None = None, **kwargs: Any) -> bytes:
        url = self._url(endpoint)
        request_headers = {AUTH_HEADER: self.credentials.auth_header, **(headers or {})}
        logger.debug("TokBox request: POST %s", url)
        try:
            request = self.client.build_request("POST", url, headers=request_headers, **kwargs)
            response = self.client.send(request, stream=True)
        except (httpx.TransportError, httpx.InvalidURL) as exc:
            raise TransportError(f"request to {url} failed: {exc}") from exc

        try:
            if response.status_code != 200:
                raise RemoteError(response.status_code)
            try:
                return response.read()
            except (httpx.HTTPError, httpx.StreamError) as exc:
                raise BodyReadError("Couldn't read response body") from exc
        finally:
            response.close()
