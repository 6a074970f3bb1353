from vectorizer.extraction.models import ExtractedText
from vectorizer.extraction.normalize import normalize_text, placeholder_text
from vectorizer.extraction.text_extractor import TextExtractor

__all__ = ["ExtractedText", "TextExtractor", "normalize_text", "placeholder_text"]
