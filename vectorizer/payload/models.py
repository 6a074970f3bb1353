from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class SubmissionPayload:
    """One document as sent to the vectorization API."""

    name: str
    id: str
    title: str
    content: str
    size_bytes: int
    created_at: str | None
    namespace: str
    flow: str

    def to_request(self) -> dict[str, Any]:
        """Serialize to the API request envelope."""
        return {
            "text": {
                "name": self.name,
                "id": self.id,
                "title": self.title,
                "content": self.content,
                "size": self.size_bytes,
                "created": self.created_at,
            },
            "namespace": self.namespace,
            "flow": self.flow,
        }
