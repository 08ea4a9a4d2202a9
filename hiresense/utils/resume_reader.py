"""
Resume text from uploaded files.

PDF pages (PyPDF2), Word paragraphs and tables (python-docx) and plain
text are all flattened to one string, which becomes the user's
resumeText. Uploads over 5MB are refused.
"""

import io
import re
from typing import Callable, Dict, NamedTuple

from docx import Document
from fastapi import HTTPException, UploadFile
from PyPDF2 import PdfReader

MAX_RESUME_MB = 5
MAX_RESUME_BYTES = MAX_RESUME_MB * 1024 * 1024

_BLANK_RUNS = re.compile(r"\n{3,}")


class ResumeUpload(NamedTuple):
    text: str
    filename: str


def _pdf_text(content: bytes) -> str:
    pages = PdfReader(io.BytesIO(content)).pages
    return "\n".join(filter(None, (page.extract_text() for page in pages)))


def _docx_text(content: bytes) -> str:
    doc = Document(io.BytesIO(content))
    lines = [p.text for p in doc.paragraphs if p.text.strip()]
    # Skills grids are usually tables
    for table in doc.tables:
        for row in table.rows:
            cells = [c.text.strip() for c in row.cells if c.text.strip()]
            if cells:
                lines.append(" | ".join(cells))
    return "\n".join(lines)


def _plain_text(content: bytes) -> str:
    for encoding in ("utf-8", "cp1252"):
        try:
            return content.decode(encoding)
        except UnicodeDecodeError:
            pass
    # latin-1 maps every byte
    return content.decode("latin-1")


READERS: Dict[str, Callable[[bytes], str]] = {
    ".pdf": _pdf_text,
    ".docx": _docx_text,
    ".txt": _plain_text,
}


def resume_extension(filename: str) -> str:
    _, dot, ext = filename.rpartition(".")
    return f".{ext.lower()}" if dot else ""


def normalize_resume_text(text: str) -> str:
    lines = (line.rstrip() for line in text.replace("\r\n", "\n").split("\n"))
    return _BLANK_RUNS.sub("\n\n", "\n".join(lines)).strip()


def parse_resume(content: bytes, filename: str) -> ResumeUpload:
    """Validate and convert raw upload bytes. Raises HTTPException (400/413)."""
    ext = resume_extension(filename)
    reader = READERS.get(ext)
    if reader is None:
        raise HTTPException(status_code=400, detail=f"Unsupported file type '{ext}'. Allowed: PDF, DOCX, TXT")

    if len(content) > MAX_RESUME_BYTES:
        raise HTTPException(status_code=413, detail=f"File too large. Maximum size: {MAX_RESUME_MB}MB")

    try:
        text = normalize_resume_text(reader(content))
    except Exception as e:
        raise HTTPException(status_code=400, detail=f"Error reading {ext[1:].upper()}: {e}") from e

    if not text:
        raise HTTPException(status_code=400, detail="Could not extract text from file. File may be empty or corrupted.")
    return ResumeUpload(text, filename)


async def read_resume(file: UploadFile) -> ResumeUpload:
    if not file.filename:
        raise HTTPException(status_code=400, detail="No filename provided")
    return parse_resume(await file.read(), file.filename)
