import subprocess
import tempfile
from pathlib import Path

from vectorizer.pdf.base import BasePdfExtractor
from vectorizer.pdf.exceptions import PdfExtractionError


class PdftotextAdapter(BasePdfExtractor):
    """Extracts text by running the poppler ``pdftotext`` command.

    The PDF and the text output are written into a temporary directory that
    is removed before ``extract`` returns or raises.
    """

    def __init__(self, binary: str = "pdftotext", timeout_seconds: int = 120) -> None:
        self._binary = binary
        self._timeout_seconds = timeout_seconds

    def extract(self, pdf_bytes: bytes) -> str:
        try:
            with tempfile.TemporaryDirectory(prefix="vectorizer-pdf-") as tmp_dir_raw:
                tmp_dir = Path(tmp_dir_raw)
                pdf_path = tmp_dir / "document.pdf"
                text_path = tmp_dir / "document.txt"
                pdf_path.write_bytes(pdf_bytes)
                self._run(pdf_path, text_path)
                if not text_path.exists():
                    raise PdfExtractionError("pdftotext produced no output")
                return text_path.read_text(encoding="utf-8", errors="replace")
        except OSError as exc:
            raise PdfExtractionError(f"pdftotext temp file handling failed: {exc}") from exc

    def _run(self, pdf_path: Path, text_path: Path) -> None:
        try:
            proc = subprocess.run(
                [self._binary, str(pdf_path), str(text_path)],
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                text=True,
                check=False,
                timeout=self._timeout_seconds,
            )
        except subprocess.TimeoutExpired as exc:
            raise PdfExtractionError(
                f"pdftotext timed out after {self._timeout_seconds}s"
            ) from exc
        except OSError as exc:
            raise PdfExtractionError(f"pdftotext could not be started: {exc}") from exc
        if proc.returncode != 0:
            stderr = (proc.stderr or "").strip()
            raise PdfExtractionError(
                f"pdftotext failed (exit={proc.returncode}): {stderr[:320]}"
            )
