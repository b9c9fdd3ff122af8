"""
Google token verification.

The frontend may hand us either an OAuth access token or an ID token, so
both are tried in order:
1. access token -> userinfo endpoint (Authorization: Bearer <token>)
2. ID token     -> tokeninfo endpoint (?id_token=<token>)

The first response carrying an email wins.
"""

import logging
from typing import Optional, Tuple

import requests

from careerion.core.config import Settings, get_settings
from careerion.core.errors import ValidationError

logger = logging.getLogger(__name__)

VERIFY_FAILED = "Unable to verify Google token"


def _json_object(resp: requests.Response) -> Optional[dict]:
    """Response body as a dict, or None when it is not a JSON object."""
    try:
        data = resp.json()
    except ValueError:
        return None
    return data if isinstance(data, dict) else None


class GoogleTokenVerifier:
    """
    Resolves a Google token to a profile dict.

    Each attempt returns (profile, error); verify() raises once every
    attempt has failed. The requests session is injectable for tests.
    """

    def __init__(self, settings: Settings = None, session: requests.Session = None):
        self.settings = settings or get_settings()
        self.session = session or requests.Session()

    def _from_userinfo(self, token: str) -> Tuple[Optional[dict], Optional[str]]:
        try:
            resp = self.session.get(
                self.settings.google_userinfo_url,
                headers={"Authorization": f"Bearer {token}"},
                timeout=self.settings.google_timeout_seconds,
            )
        except requests.RequestException as e:
            return None, f"UserInfo API error: {e}"
        if not resp.ok:
            return None, f"UserInfo API returned {resp.status_code}: {resp.reason}"
        data = _json_object(resp)
        if data is None:
            return None, "UserInfo API returned invalid JSON"
        logger.info("Google OAuth: verified access token")
        return data, None

    def _from_tokeninfo(self, token: str) -> Tuple[Optional[dict], Optional[str]]:
        try:
            resp = self.session.get(
                self.settings.google_tokeninfo_url,
                params={"id_token": token},
                timeout=self.settings.google_timeout_seconds,
            )
        except requests.RequestException as e:
            return None, f"TokenInfo API error: {e}"
        if not resp.ok:
            return None, f"TokenInfo API returned {resp.status_code}: {resp.reason}"

        data = _json_object(resp)
        if data is None:
            return None, "TokenInfo API returned invalid JSON"
        email = data.get("email")
        logger.info("Google OAuth: verified ID token")
        return {
            "sub": data.get("sub"),
            "email": email,
            "name": data.get("name") or (email.split("@")[0] if email else "Google User"),
            "picture": data.get("picture"),
        }, None

    def verify(self, token: str) -> dict:
        """
        Return the Google profile {sub, email, name, picture}.

        Raises ValidationError (400) with the last failure as details.
        """
        last_error = None
        for attempt in (self._from_userinfo, self._from_tokeninfo):
            profile, error = attempt(token)
            if profile and profile.get("email"):
                return profile
            last_error = error or "Google profile has no email"

        logger.error("Google OAuth verification failed: %s", last_error)
        raise ValidationError(VERIFY_FAILED, details=last_error)


def get_google_verifier() -> GoogleTokenVerifier:
    """Dependency for FastAPI route injection."""
    return GoogleTokenVerifier()
