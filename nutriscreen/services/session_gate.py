"""
Sign-in / sign-out navigation for the demo client.

The access code only decides which page is shown. It is not an
authentication mechanism and protects nothing; a real deployment would plug a
proper CredentialVerifier in here.
"""
from __future__ import annotations

import hmac
import logging
from typing import Optional, Protocol

from nutriscreen.services.survey_service import SurveySession


logger = logging.getLogger(__name__)

DEFAULT_HINT = "Invalid credentials."


class CredentialVerifier(Protocol):
    def verify(self, secret: str) -> bool:
        ...


class DemoAccessCode:
    def __init__(self, code: str) -> None:
        self._code = code

    def verify(self, secret: str) -> bool:
        return hmac.compare_digest((secret or "").strip().encode(), self._code.encode())


class SessionGate:
    def __init__(self, verifier: CredentialVerifier, cfg: Optional[dict] = None, hint: str = DEFAULT_HINT) -> None:
        self.verifier = verifier
        self.cfg = cfg or {}
        self.hint = hint

    @classmethod
    def from_config(cls, cfg: dict) -> "SessionGate":
        session = cfg.get("session") or {}
        code = session.get("access_code")
        if not code:
            raise ValueError("session.access_code is not configured")
        return cls(DemoAccessCode(str(code)), cfg=cfg, hint=session.get("hint", DEFAULT_HINT))

    def start(self, secret: str) -> Optional[SurveySession]:
        """Return a fresh survey session, or None when the code does not match."""
        if not self.verifier.verify(secret):
            logger.info("Sign-in refused")
            return None
        logger.info("Survey session started")
        return SurveySession.from_config(self.cfg)
