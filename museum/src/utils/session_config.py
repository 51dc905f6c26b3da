import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from museum.src.constants.met import MAX_FETCH_WORKERS


def get_configured_session() -> requests.Session:
    """
    Return a requests.Session sized for parallel fan-out.

    Every upstream call is a single attempt: the adapter never retries, not
    even connection setup. The connection pool matches the fetch worker pool
    so parallel detail fetches do not queue on connections.
    """
    session = requests.Session()
    retry_strategy = Retry(total=0, read=False, raise_on_status=False)
    adapter = HTTPAdapter(
        pool_connections=4,
        pool_maxsize=MAX_FETCH_WORKERS,
        max_retries=retry_strategy,
    )
    session.mount("https://", adapter)
    session.mount("http://", adapter)
    return session
