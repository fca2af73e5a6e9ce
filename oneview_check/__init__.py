from .constants import VERSION as __version__
from .check import check_alerts
from .models import Status, Verdict

__all__ = ["check_alerts", "Status", "Verdict", "__version__"]
