import shutil

import pytest


@pytest.fixture(scope="session")
def pdftotext_binary() -> str:
    binary = shutil.which("pdftotext")
    if binary is None:
        pytest.skip("pdftotext not installed; install poppler-utils to run these tests")
    return binary
