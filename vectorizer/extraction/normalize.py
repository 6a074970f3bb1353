import re

_WHITESPACE_RUN = re.compile(r"\s+")
_BLANK_LINES = re.compile(r"\n\s*\n")
_CRLF = re.compile(r"\r\n")
_TAB = re.compile(r"\t")


def normalize_text(text: str) -> str:
    """Clean converter output.

    Rules apply in this order: whitespace runs to one space, blank-line runs
    to one newline, CRLF to LF, tabs to spaces, then trim. The first rule
    already folds every line break into a space.
    """
    text = _WHITESPACE_RUN.sub(" ", text)
    text = _BLANK_LINES.sub("\n", text)
    text = _CRLF.sub("\n", text)
    text = _TAB.sub(" ", text)
    return text.strip()


def placeholder_text(file_name: str, size_bytes: int) -> str:
    """Content submitted in place of text that could not be extracted."""
    return (
        f"[Error extrayendo contenido del PDF - Archivo: {file_name}, "
        f"Tamaño: {size_bytes} bytes]"
    )
