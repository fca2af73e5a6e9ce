import logging
from typing import Optional

from .aggregator import classify
from .http_client import build_client
from .models import ClientConfig, Verdict
from .session import login, logout
from .alerts import get_alerts

logger = logging.getLogger(__name__)

def check_alerts(host: str, username: str, password: str,
                 ca_certificate: Optional[bytes] = None,
                 insecure: bool = False) -> Verdict:
    """
    One full check: build client, log in, fetch uncleared alerts, classify,
    log out. Any CheckError propagates to the caller; there is no partial result.
    """
    client = build_client(ClientConfig(target_host=host, ca_certificate=ca_certificate, insecure_mode=insecure))
    try:
        session = login(client, host, username, password)
        try:
            alerts = get_alerts(client, host, session)
            verdict = classify(alerts)
        finally:
            logout(client, host, session)
    finally:
        client.close()

    logger.info("%s: %s", verdict.status.value, verdict.message)
    return verdict
