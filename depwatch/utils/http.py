"""
HTTP session helpers shared by the remote service clients.
"""

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry


def create_http_session(
    user_agent: str,
    timeout: float = 30,
    max_retries: int = 0
) -> requests.Session:
    """
    Create a configured HTTP session with retry policy and standard headers.

    Args:
        user_agent: User-Agent string for the session
        timeout: Default timeout in seconds, stored on the session for callers
        max_retries: Retries on connection errors and 429/5xx responses (0 disables)

    Returns:
        Configured requests.Session instance
    """
    session = requests.Session()

    retry_strategy = Retry(
        total=max_retries,
        backoff_factor=1,
        status_forcelist=[429, 500, 502, 503, 504],
        allowed_methods=["HEAD", "GET"],
        raise_on_status=False,
    )

    adapter = HTTPAdapter(max_retries=retry_strategy)
    session.mount("http://", adapter)
    session.mount("https://", adapter)

    session.timeout = timeout

    session.headers.update({"User-Agent": user_agent, "Accept": "application/json"})

    return session
