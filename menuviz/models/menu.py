from typing import Dict, Any, Union
from dataclasses import dataclass, field
from datetime import datetime, timezone


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class MenuSession:
    """One processing run and the raw input it started from"""
    id: int
    original_text: str
    created_at: datetime = field(default_factory=_utcnow)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "originalText": self.original_text,
            "createdAt": self.created_at.isoformat(),
        }


@dataclass(frozen=True)
class MenuItem:
    """A persisted food item with its resolved image"""
    id: int
    session_id: int
    name: str
    description: str
    image_url: str
    created_at: datetime = field(default_factory=_utcnow)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "sessionId": self.session_id,
            "name": self.name,
            "description": self.description,
            "imageUrl": self.image_url,
            "createdAt": self.created_at.isoformat(),
        }


@dataclass(frozen=True)
class TextMenuInput:
    """Menu text pasted, dictated, or read from a text/plain upload"""
    text: str
    source: str = "text"  # "text" or "file"

    @property
    def original_text(self) -> str:
        return self.text

    @property
    def status_message(self) -> str:
        if self.source == "file":
            return "Parsing uploaded menu file..."
        return "Parsing menu text..."


@dataclass(frozen=True)
class ImageMenuInput:
    """An uploaded photo of a menu"""
    image_bytes: bytes = field(repr=False)
    mime_type: str
    filename: str = "upload"

    @property
    def original_text(self) -> str:
        return f"Uploaded image: {self.filename}"

    @property
    def status_message(self) -> str:
        return "Analyzing menu image..."


RawMenuInput = Union[TextMenuInput, ImageMenuInput]
