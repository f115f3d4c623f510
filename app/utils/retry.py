# app/utils/retry.py
import httpx
from tenacity import retry, stop_after_attempt, wait_exponential, retry_if_exception_type

from app.utils.settings import PRODUCT_CLIENT_RETRIES


def http_retry(attempts: int = PRODUCT_CLIENT_RETRIES):
    # only transport-level failures, an HTTP error status is not retried
    return retry(
        reraise=True,
        stop=stop_after_attempt(attempts),
        wait=wait_exponential(multiplier=0.3, min=0.3, max=3),
        retry=retry_if_exception_type(httpx.TransportError),
    )
