import logging
import ssl
from http import HTTPStatus
from typing import Optional, Dict, Any

import requests
from requests.adapters import HTTPAdapter
from requests.packages.urllib3.exceptions import InsecureRequestWarning

from .constants import HPE_ONEVIEW_API_VERSION, DEFAULT_TIMEOUT, generate_user_agent
from .errors import ConfigError, TransportError
from .models import ClientConfig

logger = logging.getLogger(__name__)

class OneViewAdapter(HTTPAdapter):
    """
    Single-slot connection pool, no adapter-level retries and an optional
    custom SSL context. The management boards' embedded HTTP stack does not
    cope with keep-alive, so together with `Connection: close` every request
    gets a fresh TCP/TLS connection.
    """

    def __init__(self, ssl_context: Optional[ssl.SSLContext] = None):
        # init_poolmanager() runs inside HTTPAdapter.__init__
        self.ssl_context = ssl_context
        super().__init__(pool_connections=1, pool_maxsize=1, max_retries=0, pool_block=False)

    def init_poolmanager(self, *args, **kwargs):
        if self.ssl_context is not None:
            kwargs["ssl_context"] = self.ssl_context
        return super().init_poolmanager(*args, **kwargs)

def default_headers() -> Dict[str, str]:
    return {
        "Accept": "application/json",
        "Content-Type": "application/json",
        "User-Agent": generate_user_agent(),
        "X-Api-Version": HPE_ONEVIEW_API_VERSION,
        "Connection": "close",
    }

def load_ca_context(ca_certificate: bytes) -> ssl.SSLContext:
    """System trust store plus `ca_certificate` (PEM) as an additional root."""
    try:
        pem = ca_certificate.decode("ascii")
    except UnicodeDecodeError as e:
        raise ConfigError(f"CA certificate is not PEM encoded: {e}") from e

    context = ssl.create_default_context()
    try:
        context.load_verify_locations(cadata=pem)
    except (ssl.SSLError, ValueError) as e:
        raise ConfigError(f"Can't parse CA certificate: {e}") from e
    return context

def build_client(config: ClientConfig) -> requests.Session:
    """
    Builds the HTTP client for one appliance. Purely in-memory, no network I/O.

    Trust policy: insecure mode wins over everything (no chain and no hostname
    validation, a supplied CA is ignored); otherwise a non-empty CA is added to
    the system roots; otherwise the system roots are used as-is.
    """
    client = requests.Session()
    client.headers.clear()
    client.headers.update(default_headers())

    ssl_context = None
    if config.insecure_mode:
        if config.ca_certificate:
            logger.debug("Insecure mode requested, ignoring supplied CA certificate")
        client.verify = False
        requests.packages.urllib3.disable_warnings(InsecureRequestWarning)
    elif config.ca_certificate:
        ssl_context = load_ca_context(config.ca_certificate)
        logger.debug("Added custom CA certificate to trusted roots")

    adapter = OneViewAdapter(ssl_context=ssl_context)
    client.mount("https://", adapter)
    client.mount("http://", adapter)

    logger.debug("HTTP client initialized for %s (verify=%s)", config.target_host, client.verify)
    return client

def build_url(host: str, path: str) -> str:
    return f"https://{host}/rest/{path.lstrip('/')}"

def send(client: requests.Session, method: str, url: str, *,
         json_body: Optional[Any] = None,
         params: Optional[Dict[str, str]] = None,
         timeout: Optional[float] = None) -> requests.Response:
    """Issues one request; any transport-level failure surfaces as TransportError."""
    logger.debug("%s %s", method.upper(), url)
    try:
        resp = client.request(
            method=method.upper(),
            url=url,
            params=params,
            json=json_body,
            # explicit, so REQUESTS_CA_BUNDLE/CURL_CA_BUNDLE can't override insecure mode
            verify=client.verify,
            timeout=timeout or DEFAULT_TIMEOUT,
        )
    except requests.RequestException as e:
        raise TransportError(f"{method.upper()} {url} failed: {e}") from e

    logger.debug("%s %s (%s)", resp.status_code, resp.reason, url)
    return resp

def canonical_reason(status_code: int) -> str:
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return "unknown HTTP status"
