from dataclasses import dataclass


@dataclass(frozen=True)
class SubmissionOutcome:
    """Successful API answer for one document."""

    skipped: bool = False
    chunks: int = 0
    existing_chunks: int | None = None
