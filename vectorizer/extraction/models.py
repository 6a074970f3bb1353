from dataclasses import dataclass


@dataclass(frozen=True)
class ExtractedText:
    """Text to submit for one document, plus how extraction went."""

    content: str
    accepted: bool
    characters: int = 0
    error: str | None = None
