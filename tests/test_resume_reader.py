import io

import pytest
from docx import Document
from fastapi import HTTPException

from hiresense.utils.resume_reader import MAX_RESUME_BYTES, parse_resume, resume_extension


def docx_bytes():
    doc = Document()
    doc.add_paragraph("Jordan Lee - Data Scientist")
    doc.add_paragraph("")
    table = doc.add_table(rows=1, cols=2)
    table.rows[0].cells[0].text = "Python"
    table.rows[0].cells[1].text = "SQL"
    buffer = io.BytesIO()
    doc.save(buffer)
    return buffer.getvalue()


@pytest.mark.parametrize("filename, ext", [
    ("cv.PDF", ".pdf"),
    ("my.resume.docx", ".docx"),
    ("README", ""),
])
def test_resume_extension(filename, ext):
    assert resume_extension(filename) == ext


def test_docx_paragraphs_and_tables():
    upload = parse_resume(docx_bytes(), "cv.docx")

    assert upload.text == "Jordan Lee - Data Scientist\nPython | SQL"
    assert upload.filename == "cv.docx"


def test_text_is_normalized():
    content = b"Name\r\n\r\n\r\n\r\nSkills   \r\nPython\n\n"

    assert parse_resume(content, "cv.txt").text == "Name\n\nSkills\nPython"


def test_cp1252_text():
    assert parse_resume("Café manager".encode("cp1252"), "cv.txt").text == "Café manager"


def test_unsupported_extension():
    with pytest.raises(HTTPException) as exc:
        parse_resume(b"data", "cv.odt")
    assert exc.value.status_code == 400


def test_too_large():
    with pytest.raises(HTTPException) as exc:
        parse_resume(b"a" * (MAX_RESUME_BYTES + 1), "cv.txt")
    assert exc.value.status_code == 413


def test_empty_file():
    with pytest.raises(HTTPException) as exc:
        parse_resume(b"   \n  ", "cv.txt")
    assert exc.value.status_code == 400


def test_broken_pdf():
    with pytest.raises(HTTPException) as exc:
        parse_resume(b"not a pdf", "cv.pdf")
    assert exc.value.status_code == 400
