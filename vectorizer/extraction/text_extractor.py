from vectorizer.extraction.models import ExtractedText
from vectorizer.extraction.normalize import normalize_text, placeholder_text
from vectorizer.logging.logger import Log
from vectorizer.pdf.base import BasePdfExtractor
from vectorizer.pdf.exceptions import PdfExtractionError

MIN_TEXT_LENGTH = 50


class TextExtractor:
    """Runs the PDF engine and applies the cleanup and acceptance policy.

    Extraction never fails a job: converter errors and too-short output are
    replaced by a placeholder and reported as a rejected extraction.
    """

    def __init__(
        self,
        pdf_extractor: BasePdfExtractor,
        min_length: int = MIN_TEXT_LENGTH,
    ) -> None:
        self._pdf_extractor = pdf_extractor
        self._min_length = min_length

    def extract(self, raw_bytes: bytes, file_name: str) -> ExtractedText:
        try:
            raw_text = self._pdf_extractor.extract(raw_bytes)
        except PdfExtractionError as exc:
            Log.warning(f"Text extraction failed for {file_name}: {exc}")
            return self._fallback(raw_bytes, file_name, characters=0, error=str(exc))

        text = normalize_text(raw_text)
        if len(text) > self._min_length:
            Log.info(f"Extracted {len(text)} chars from {file_name}")
            return ExtractedText(content=text, accepted=True, characters=len(text))

        Log.warning(f"Extracted text too short for {file_name}: {len(text)} chars")
        return self._fallback(
            raw_bytes,
            file_name,
            characters=len(text),
            error=f"text shorter than {self._min_length + 1} chars",
        )

    def _fallback(
        self,
        raw_bytes: bytes,
        file_name: str,
        *,
        characters: int,
        error: str,
    ) -> ExtractedText:
        Log.warning(f"Using placeholder content for {file_name}")
        return ExtractedText(
            content=placeholder_text(file_name, len(raw_bytes)),
            accepted=False,
            characters=characters,
            error=error,
        )
