import logging
from typing import Any, Dict

import requests

from .errors import HttpError, ParseError
from .http_client import build_url, canonical_reason, send
from .models import Alert, AlertCollection, Session

logger = logging.getLogger(__name__)

ALERTS = "alerts"
UNCLEARED_FILTER = "\"alertState<>'Cleared'\""

def get_alerts(client: requests.Session, host: str, session: Session) -> AlertCollection:
    """
    Fetches every alert not in Cleared state. The session token goes into the
    request body as {"Auth": token}, which is how this API expects it.
    """
    resp = send(
        client, "GET", build_url(host, ALERTS),
        params={"filter": UNCLEARED_FILTER},
        json_body={"Auth": session.token},
    )

    if resp.status_code != 200:
        raise HttpError(canonical_reason(resp.status_code), status_code=resp.status_code)

    try:
        data = resp.json()
    except ValueError as e:
        raise ParseError(f"Alert response is not valid JSON: {e}") from e

    alerts = parse_alert_collection(data)
    logger.debug("Received %d uncleared alerts (server reported count=%d)", len(alerts.members), alerts.count)
    return alerts

def _parse_alert(idx: int, item: Any) -> Alert:
    if not isinstance(item, dict):
        raise ParseError(f"members[{idx}] is not an object")
    severity = item.get("severity")
    if not isinstance(severity, str):
        raise ParseError(f"members[{idx}] has no string 'severity' field")
    return Alert(severity=severity, raw=item)

def parse_alert_collection(data: Dict[str, Any]) -> AlertCollection:
    """Validates a decoded alert resource collection. Unknown fields are ignored."""
    if not isinstance(data, dict):
        raise ParseError("Alert response is not a JSON object")

    count = data.get("count")
    # bool is an int subclass, but never a valid count
    if not isinstance(count, int) or isinstance(count, bool):
        raise ParseError("Alert response has no integer 'count' field")

    members = data.get("members")
    if not isinstance(members, list):
        raise ParseError("Alert response has no 'members' list")

    collection = AlertCollection(count=count, members=[_parse_alert(i, m) for i, m in enumerate(members)])
    if collection.count != len(collection.members):
        logger.warning("Server reported %d alerts but sent %d, using the members list", collection.count, len(collection.members))
    return collection
