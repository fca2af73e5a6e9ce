import logging

import requests

from .errors import AuthenticationError, ParseError, TransportError
from .http_client import build_url, canonical_reason, send
from .models import Session

logger = logging.getLogger(__name__)

LOGIN_SESSIONS = "login-sessions"
SESSION_HEADER = "sessionID"

def login(client: requests.Session, host: str, username: str, password: str) -> Session:
    """
    Opens an API session and returns its token.

    OneView answers an invalid login with 200 OK and simply leaves out the
    sessionID header, so the header, not the status code, decides success.
    """
    payload = {
        "userName": username,
        "password": password,
    }
    resp = send(client, "POST", build_url(host, LOGIN_SESSIONS), json_body=payload)

    if not resp.ok:
        raise TransportError(f"Login request rejected: {resp.status_code} {canonical_reason(resp.status_code)}")

    raw_token = resp.headers.get(SESSION_HEADER)
    if raw_token is None:
        raise AuthenticationError("login failed")

    # http.client hands header values over as latin-1 decoded text
    try:
        token = raw_token.encode("latin-1").decode("utf-8")
    except UnicodeError as e:
        raise ParseError(f"{SESSION_HEADER} header is not valid UTF-8: {e}") from e

    logger.debug("Logged in to %s as %s", host, username)
    return Session(token=token)

def _delete_session(client: requests.Session, host: str, session: Session) -> None:
    resp = send(client, "DELETE", build_url(host, LOGIN_SESSIONS), json_body={"Auth": session.token})
    if not resp.ok:
        raise TransportError(f"Logout rejected: {resp.status_code} {canonical_reason(resp.status_code)}")

def logout(client: requests.Session, host: str, session: Session) -> None:
    """Best-effort session release. Failures are recorded and dropped, never raised."""
    try:
        _delete_session(client, host, session)
    except Exception as e:
        # the verdict is already decided; a stale session only costs the appliance a slot
        logger.debug("Ignoring logout failure on %s: %s", host, e)
        return
    logger.debug("Logged out from %s", host)
