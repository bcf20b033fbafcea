# uxread/services/extract.py
from __future__ import annotations

import logging
import random
import time
from typing import Callable, Optional

import requests

from uxread.core import config

log = logging.getLogger("extract")

ProgressCallback = Callable[[float], None]

API_PATH = "vision/v3.2"
PENDING_STATUSES = {"notStarted", "running"}

FALLBACK_TEXTS = (
    "Welcome to our app! Please enter your email address to get started. We'll send you a verification link.",
    "Your password must be at least 8 characters long and include one uppercase letter, one number, and one special character.",
    "Error: Unable to connect to server. Please check your internet connection and try again.",
)
FALLBACK_MARKER = " [MOCK DATA - Check logs for OCR errors]"
MALFORMED = "Failed to get OCR results: malformed response"


class ExtractionError(RuntimeError):
    """Base for text extraction failures; the message is safe to show to users."""


class ConfigurationError(ExtractionError):
    ...


class AuthenticationError(ExtractionError):
    ...


class AuthorizationError(ExtractionError):
    ...


class InvalidImageError(ExtractionError):
    ...


class RateLimitError(ExtractionError):
    ...


class OperationNotFoundError(ExtractionError):
    ...


class ExtractionTimeoutError(ExtractionError):
    ...


class NoTextFoundError(ExtractionError):
    ...


class ExtractionFailedError(ExtractionError):
    ...


def _read_lines(result: dict) -> list:
    try:
        pages = (result.get("analyzeResult") or {}).get("readResults") or []
        return [str(line.get("text") or "") for page in pages for line in (page.get("lines") or [])]
    except (AttributeError, TypeError) as e:
        raise ExtractionFailedError(MALFORMED) from e


def _error_for_status(resp: requests.Response) -> ExtractionError:
    status = resp.status_code
    if status == 400:
        return InvalidImageError("Invalid image format. Please use PNG, JPEG, BMP, or TIFF.")
    if status == 401:
        return AuthenticationError("Invalid Azure API key. Please check your credentials.")
    if status == 403:
        return AuthorizationError("Azure API quota exceeded or access denied.")
    if status == 429:
        return RateLimitError("Too many requests. Please wait and try again.")
    return ExtractionFailedError(f"OCR processing failed: {status} - {resp.text[:200]}")


class AzureReadClient:
    """
    Client for the Azure Computer Vision Read API.

    Submission is asynchronous on Azure's side: the POST returns an
    Operation-Location which is polled until it reaches a terminal status
    or the attempt budget runs out.
    """

    def __init__(
        self,
        endpoint: str,
        key: str,
        max_attempts: int = 30,
        poll_interval: float = 1.0,
        request_timeout: float = 30.0,
        session: Optional[requests.Session] = None,
    ):
        if max_attempts < 1:
            raise ValueError(f"max_attempts must be at least 1, got {max_attempts}")
        self.endpoint = endpoint.rstrip("/") if endpoint else ""
        self.key = key
        self.max_attempts = max_attempts
        self.poll_interval = poll_interval
        self.request_timeout = request_timeout
        self.session = session or requests.Session()

    @classmethod
    def from_config(cls) -> "AzureReadClient":
        return cls(
            config.AZURE_VISION_ENDPOINT,
            config.AZURE_VISION_KEY,
            max_attempts=config.OCR_MAX_ATTEMPTS,
            poll_interval=config.OCR_POLL_INTERVAL,
            request_timeout=config.OCR_REQUEST_TIMEOUT,
        )

    def _url(self, path: str) -> str:
        return f"{self.endpoint}/{API_PATH}/{path}"

    def _request(self, method: str, url: str, **kwargs) -> requests.Response:
        kwargs.setdefault("timeout", self.request_timeout)
        headers = kwargs.pop("headers", {})
        headers["Ocp-Apim-Subscription-Key"] = self.key
        try:
            resp = self.session.request(method, url, headers=headers, **kwargs)
        except requests.RequestException as e:
            raise ExtractionFailedError(f"OCR processing failed: {e}") from e
        if not resp.ok:
            log.error("Azure API error status=%s url=%s", resp.status_code, url)
            raise _error_for_status(resp)
        return resp

    def extract(self, image: bytes, on_progress: Optional[ProgressCallback] = None) -> str:
        def progress(value: float) -> None:
            if on_progress:
                on_progress(value)

        if not self.endpoint or not self.key:
            raise ConfigurationError(
                "Azure Computer Vision credentials not configured. "
                "Set AZURE_VISION_ENDPOINT and AZURE_VISION_KEY."
            )
        progress(10)

        # 1) Submit
        resp = self._request(
            "POST", self._url("read/analyze"),
            data=image,
            headers={"Content-Type": "application/octet-stream"},
        )
        progress(30)

        operation_location = resp.headers.get("Operation-Location")
        if not operation_location:
            raise OperationNotFoundError("No operation location received from Azure API")
        operation_id = operation_location.rstrip("/").split("/")[-1]
        log.info("OCR operation started: %s", operation_id)

        # 2) Poll
        result: dict = {}
        attempts = 0
        while True:
            time.sleep(self.poll_interval)
            resp = self._request("GET", self._url(f"read/analyzeResults/{operation_id}"))
            try:
                result = resp.json()
            except ValueError as e:
                raise ExtractionFailedError(MALFORMED) from e
            if not isinstance(result, dict):
                raise ExtractionFailedError(MALFORMED)
            attempts += 1
            log.debug("OCR attempt %d, status: %s", attempts, result.get("status"))
            progress(30 + attempts / self.max_attempts * 60)
            if result.get("status") not in PENDING_STATUSES or attempts >= self.max_attempts:
                break
        progress(100)

        # 3) Collect lines
        status = result.get("status")
        if status == "succeeded":
            text = " ".join(_read_lines(result)).strip()
            if not text:
                raise NoTextFoundError(
                    "No text detected in the image. Please ensure the image contains readable text."
                )
            log.info("OCR succeeded, extracted %d characters", len(text))
            return text
        if status == "failed":
            raise ExtractionFailedError("Azure OCR processing failed")
        raise ExtractionTimeoutError(f"Azure OCR processing timed out after {attempts} attempts")

    def close(self) -> None:
        self.session.close()

    def check_health(self) -> dict:
        if not self.endpoint or not self.key:
            return {"healthy": False, "error": "Azure credentials not configured"}
        try:
            self._request("GET", self._url("models"), timeout=5)
        except AuthenticationError:
            return {"healthy": False, "error": "Invalid API key"}
        except ExtractionError:
            return {"healthy": False, "error": "Service unavailable"}
        return {"healthy": True}


def fallback_text() -> str:
    return random.choice(FALLBACK_TEXTS) + FALLBACK_MARKER


def extract_text(
    client: AzureReadClient,
    image: bytes,
    on_progress: Optional[ProgressCallback] = None,
    use_fallback: bool = False,
) -> str:
    """
    Extract text from one image. With use_fallback, failures are logged and
    replaced by placeholder text instead of raising.
    """
    try:
        return client.extract(image, on_progress=on_progress)
    except ExtractionError as e:
        if not use_fallback:
            raise
        log.warning("Falling back to mock OCR data due to error: %s", e)
        return fallback_text()
