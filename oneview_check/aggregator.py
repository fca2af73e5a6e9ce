from dataclasses import dataclass
from typing import List

from .models import AlertCollection, AlertSeverity, Status, Verdict

NO_ALERTS_MESSAGE = "No uncleared alerts found"

@dataclass
class SeverityCounts:
    ok: int = 0
    warning: int = 0
    critical: int = 0

    def add(self, severity: AlertSeverity):
        if severity is AlertSeverity.CRITICAL:
            self.critical += 1
        elif severity is AlertSeverity.WARNING:
            self.warning += 1
        else:
            self.ok += 1

def count_severities(alerts: AlertCollection) -> SeverityCounts:
    """Raises InvariantError on the first severity outside ok/warning/critical."""
    counts = SeverityCounts()
    for alert in alerts.members:
        counts.add(AlertSeverity.parse(alert.severity))
    return counts

def classify(alerts: AlertCollection) -> Verdict:
    """
    Reduces a set of uncleared alerts to one verdict.

    Status priority is critical > warning > ok. The message lists critical and
    warning counts only when non-zero, always followed by the harmless count,
    e.g. "2 critical alerts found, 1 warning alerts found, 2 harmless alerts found".
    """
    if alerts.is_empty():
        return Verdict(Status.OK, NO_ALERTS_MESSAGE)

    counts = count_severities(alerts)

    if counts.critical > 0:
        status = Status.CRITICAL
    elif counts.warning > 0:
        status = Status.WARNING
    else:
        status = Status.OK

    msg_list: List[str] = []
    if counts.critical > 0:
        msg_list.append(f"{counts.critical} critical alerts found")
    if counts.warning > 0:
        msg_list.append(f"{counts.warning} warning alerts found")
    msg_list.append(f"{counts.ok} harmless alerts found")

    return Verdict(status, ", ".join(msg_list))
