from typing import Any

import httpx

from vectorizer.payload.models import SubmissionPayload
from vectorizer.submission.base import BaseSubmissionClient
from vectorizer.submission.exceptions import SubmissionRejected, SubmissionTransportError
from vectorizer.submission.models import SubmissionOutcome


class HttpSubmissionClient(BaseSubmissionClient):
    """Posts payloads to the vectorization API as JSON."""

    def __init__(
        self,
        *,
        api_url: str,
        timeout_seconds: int,
        http_client: httpx.Client | None = None,
    ) -> None:
        self._api_url = api_url
        self._http = http_client or httpx.Client(timeout=timeout_seconds)

    def close(self) -> None:
        self._http.close()

    def submit(self, payload: SubmissionPayload) -> SubmissionOutcome:
        try:
            response = self._http.post(self._api_url, json=payload.to_request())
        except httpx.HTTPError as exc:
            raise SubmissionTransportError(f"API Error: {exc}") from exc

        if not response.is_success:
            raise SubmissionTransportError(
                f"API Error: {response.status_code} - {response.text}"
            )
        return parse_response(_decode(response))


def parse_response(body: dict[str, Any]) -> SubmissionOutcome:
    """Classify a 2xx response body.

    Raises:
        SubmissionRejected: when ``success`` is not true.
    """
    if not body.get("success"):
        raise SubmissionRejected(str(body.get("error") or "Unknown API error"))
    if body.get("skipped"):
        existing = body.get("existingChunks")
        return SubmissionOutcome(
            skipped=True,
            chunks=0,
            existing_chunks=existing if isinstance(existing, int) else None,
        )
    results = body.get("results")
    return SubmissionOutcome(chunks=len(results) if isinstance(results, list) else 0)


def _decode(response: httpx.Response) -> dict[str, Any]:
    try:
        body = response.json()
    except ValueError as exc:
        raise SubmissionRejected(f"Invalid JSON response: {exc}") from exc
    if not isinstance(body, dict):
        raise SubmissionRejected("JSON response must be an object")
    return body
