import io
import sys
from pathlib import Path

import pytest
from docx import Document

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from src.core.document_reader import DocumentReader
from src.core.resume_parser import ResumeParser


@pytest.fixture
def sample_resume_text():
    """Fixture to provide sample resume text"""
    return """
    John Doe
    john.doe@example.com
    (555) 123-4567
    linkedin.com/in/johndoe

    Experience
    Software Engineer at Tech Corp
    2020-2023
    Developed web applications

    Skills
    JavaScript, Python, React

    Education
    Bachelor of Computer Science
    University of Technology
    2016-2020
    """


@pytest.fixture
def resume_parser():
    """Fixture to provide ResumeParser instance"""
    return ResumeParser()


@pytest.fixture
def document_reader():
    """Fixture to provide DocumentReader instance with no antiword on the path"""
    return DocumentReader(antiword_path="antiword-not-installed-for-tests")


@pytest.fixture
def make_docx():
    """Fixture building an in-memory DOCX file from a list of paragraphs"""
    def _make(paragraphs):
        doc = Document()
        for paragraph in paragraphs:
            doc.add_paragraph(paragraph)
        buffer = io.BytesIO()
        doc.save(buffer)
        return buffer.getvalue()

    return _make


@pytest.fixture
def resume_docx(make_docx):
    """Fixture to provide a DOCX resume as bytes"""
    return make_docx([
        "Jane Roe",
        "jane.roe@example.org",
        "Experience",
        "Acme Inc 2019 - 2022",
        "Skills",
        "Python, SQL, Leadership",
        "Education",
        "Master of Data Science 2017-2019",
    ])


@pytest.fixture
def make_pdf():
    """Fixture building a single-page PDF with one Helvetica text line per entry"""
    def _escape(line):
        return line.replace("\\", "\\\\").replace("(", "\\(").replace(")", "\\)")

    def _make(lines):
        operators = ["BT", "/F1 12 Tf", "72 720 Td"]
        for index, line in enumerate(lines):
            if index:
                operators.append("0 -20 Td")
            operators.append(f"({_escape(line)}) Tj")
        operators.append("ET")
        stream = "\n".join(operators).encode("latin-1")

        objects = [
            b"<< /Type /Catalog /Pages 2 0 R >>",
            b"<< /Type /Pages /Kids [3 0 R] /Count 1 >>",
            b"<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] "
            b"/Resources << /Font << /F1 5 0 R >> >> /Contents 4 0 R >>",
            b"<< /Length %d >>\nstream\n" % len(stream) + stream + b"\nendstream",
            b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>",
        ]

        pdf = bytearray(b"%PDF-1.4\n")
        offsets = []
        for number, body in enumerate(objects, start=1):
            offsets.append(len(pdf))
            pdf += b"%d 0 obj\n" % number + body + b"\nendobj\n"

        xref_offset = len(pdf)
        pdf += b"xref\n0 %d\n" % (len(objects) + 1)
        pdf += b"0000000000 65535 f \n"
        for offset in offsets:
            pdf += b"%010d 00000 n \n" % offset
        pdf += b"trailer\n<< /Size %d /Root 1 0 R >>\nstartxref\n%d\n%%%%EOF\n" % (
            len(objects) + 1, xref_offset)
        return bytes(pdf)

    return _make
