import platform

NAME = "check_oneview"
VERSION = "1.0.0"
SOURCE_URL = "https://github.com/check-oneview/check_oneview"

# REST API version sent as X-Api-Version on every request
HPE_ONEVIEW_API_VERSION = "800"

# Seconds; applied to every request, connect and read alike
DEFAULT_TIMEOUT = 60.0

def generate_user_agent() -> str:
    """Descriptive User-Agent, e.g. check_oneview/1.0.0 (Linux; Python 3.12.1; +https://...)"""
    return f"{NAME}/{VERSION} ({platform.system()}; Python {platform.python_version()}; +{SOURCE_URL})"
