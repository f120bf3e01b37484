import io
import os
import logging
import subprocess
import tempfile
from pathlib import Path
from typing import Callable, Dict, List, Optional
import pdfplumber
from docx import Document
import mammoth
import PyPDF2
from pdfminer.high_level import extract_text as pdfminer_extract_text
from pdfminer.layout import LAParams
from config.settings import settings

from .exceptions import DecodeFailure, DocumentTooLarge, UnsupportedFormat

logger = logging.getLogger(__name__)

PDF = 'application/pdf'
DOC = 'application/msword'
DOCX = 'application/vnd.openxmlformats-officedocument.wordprocessingml.document'
UNKNOWN = 'application/octet-stream'

PDF_SIGNATURE = b'%PDF-'
ZIP_SIGNATURE = b'PK\x03\x04'
OLE_SIGNATURE = b'\xD0\xCF\x11\xE0'

EXTENSION_MEDIA_TYPES = {
    '.pdf': PDF,
    '.docx': DOCX,
    '.doc': DOC,
}


def sniff_media_type(header: bytes, filename: str = "") -> str:
    """Detect media type from file signature, falling back to the extension"""
    if header.startswith(PDF_SIGNATURE):
        return PDF
    if header.startswith(ZIP_SIGNATURE):
        return DOCX
    if header.startswith(OLE_SIGNATURE):
        return DOC
    return EXTENSION_MEDIA_TYPES.get(Path(filename).suffix.lower(), UNKNOWN)


class DocumentReader:
    """Turns an uploaded document buffer into plain text.

    Each supported media type has its own decoder chain. Decoders are tried in
    the configured order and the first one producing non-blank text wins. Any
    decoder error is reported as DecodeFailure; only when every decoder in the
    chain raises does the whole extraction fail.
    """

    def __init__(self,
                 pdf_methods: Optional[List[str]] = None,
                 docx_methods: Optional[List[str]] = None,
                 antiword_path: Optional[str] = None,
                 max_document_size: Optional[int] = None):
        self.antiword_path = antiword_path or settings.ANTIWORD_PATH
        self.max_document_size = max_document_size if max_document_size is not None else settings.MAX_DOCUMENT_SIZE
        self.supported_media_types = tuple(settings.SUPPORTED_MEDIA_TYPES)

        available_pdf = {
            'pdfplumber': self._extract_with_pdfplumber,
            'pdfminer': self._extract_with_pdfminer,
            'pypdf2': self._extract_with_pypdf2,
        }
        available_docx = {
            'mammoth': self._extract_with_mammoth,
            'python-docx': self._extract_with_python_docx,
        }
        self.pdf_methods = self._resolve_methods(
            pdf_methods or settings.PDF_EXTRACTION_METHODS, available_pdf)
        self.docx_methods = self._resolve_methods(
            docx_methods or settings.DOCX_EXTRACTION_METHODS, available_docx)

    @staticmethod
    def _resolve_methods(names: List[str],
                         available: Dict[str, Callable[[bytes], str]]) -> List[Callable[[bytes], str]]:
        unknown = [name for name in names if name not in available]
        if unknown:
            raise ValueError(f"Unknown extraction methods: {', '.join(unknown)}")
        return [available[name] for name in names]

    def extract_text(self, buffer: bytes, media_type: str) -> str:
        """Decode a document buffer of the declared media type into plain text"""
        if media_type not in self.supported_media_types:
            logger.error(f"Unsupported file type: {media_type}")
            raise UnsupportedFormat(media_type)

        if media_type == PDF:
            return self.read_pdf(buffer)
        if media_type == DOCX:
            return self.read_docx(buffer)
        return self.read_doc(buffer)

    def _run_chain(self, methods: List[Callable[[bytes], str]], buffer: bytes, media_type: str) -> str:
        text = None
        last_error = None
        for method in methods:
            try:
                candidate = method(buffer)
            except Exception as e:
                logger.warning(f"Method {method.__name__} failed: {e}")
                last_error = e
                continue
            text = candidate or ""
            if text.strip():
                logger.debug(f"Extracted {len(text)} characters using {method.__name__}")
                return text

        if text is None:
            logger.error(f"All decoders failed for {media_type}: {last_error}")
            raise DecodeFailure(media_type) from last_error

        logger.warning(f"Decoders returned no text for {media_type}")
        return text

    def read_pdf(self, buffer: bytes) -> str:
        """Read PDF using the configured extraction methods"""
        return self._run_chain(self.pdf_methods, buffer, PDF)

    def _extract_with_pdfplumber(self, buffer: bytes) -> str:
        """Extract text using pdfplumber"""
        text = ""
        with pdfplumber.open(io.BytesIO(buffer)) as pdf:
            for page in pdf.pages:
                page_text = page.extract_text()
                if page_text:
                    text += page_text + "\n"
        return text

    def _extract_with_pdfminer(self, buffer: bytes) -> str:
        """Extract text using pdfminer"""
        laparams = LAParams(
            line_margin=0.5,
            word_margin=0.1,
            char_margin=2.0,
            boxes_flow=0.5,
            detect_vertical=True
        )
        return pdfminer_extract_text(io.BytesIO(buffer), laparams=laparams)

    def _extract_with_pypdf2(self, buffer: bytes) -> str:
        """Extract text using PyPDF2"""
        text = ""
        reader = PyPDF2.PdfReader(io.BytesIO(buffer))
        for page in reader.pages:
            text += (page.extract_text() or "") + "\n"
        return text

    def read_docx(self, buffer: bytes) -> str:
        """Read DOCX using the configured extraction methods"""
        return self._run_chain(self.docx_methods, buffer, DOCX)

    def _extract_with_mammoth(self, buffer: bytes) -> str:
        """Extract raw text using mammoth"""
        result = mammoth.extract_raw_text(io.BytesIO(buffer))
        return result.value

    def _extract_with_python_docx(self, buffer: bytes) -> str:
        """Extract paragraphs and table rows using python-docx"""
        doc = Document(io.BytesIO(buffer))

        text_parts = [paragraph.text for paragraph in doc.paragraphs if paragraph.text.strip()]
        for table in doc.tables:
            for row in table.rows:
                row_text = ' | '.join(cell.text for cell in row.cells)
                if row_text.strip():
                    text_parts.append(row_text)

        return '\n'.join(text_parts)

    def read_doc(self, buffer: bytes) -> str:
        """Read legacy DOC, handing OOXML content mislabelled as DOC to the DOCX chain"""
        if buffer.startswith(ZIP_SIGNATURE):
            logger.info("DOC upload carries an OOXML signature, decoding as DOCX")
            return self.read_docx(buffer)
        return self._extract_with_antiword(buffer)

    def _extract_with_antiword(self, buffer: bytes) -> str:
        """Extract text from a binary DOC file with the antiword tool"""
        temp_doc = None
        try:
            try:
                with tempfile.NamedTemporaryFile(suffix='.doc', delete=False) as temp_file:
                    temp_doc = temp_file.name
                    temp_file.write(buffer)
            except OSError as e:
                logger.error(f"Could not stage DOC for antiword: {e}")
                raise DecodeFailure(DOC, "Could not write temporary file for legacy DOC decoder") from e

            try:
                result = subprocess.run(
                    [self.antiword_path, temp_doc],
                    capture_output=True,
                    text=True,
                    encoding='utf-8',
                    errors='replace',
                    timeout=settings.ANTIWORD_TIMEOUT
                )
            except FileNotFoundError as e:
                logger.error(f"antiword not found at {self.antiword_path}")
                raise DecodeFailure(DOC, "Legacy DOC decoder (antiword) is not installed") from e
            except subprocess.TimeoutExpired as e:
                logger.error(f"antiword timed out after {settings.ANTIWORD_TIMEOUT}s")
                raise DecodeFailure(DOC) from e
            except OSError as e:
                logger.error(f"antiword could not be run from {self.antiword_path}: {e}")
                raise DecodeFailure(DOC, f"Legacy DOC decoder (antiword) could not be run: {e}") from e
        finally:
            if temp_doc is not None:
                try:
                    os.unlink(temp_doc)
                except OSError as e:
                    logger.warning(f"Could not remove temporary file {temp_doc}: {e}")

        if result.returncode != 0:
            logger.error(f"antiword failed: {result.stderr.strip()}")
            raise DecodeFailure(DOC)
        return result.stdout

    def detect_media_type(self, file_path: str) -> str:
        """Detect file type using file signatures and extension"""
        with open(file_path, 'rb') as f:
            header = f.read(8)
        return sniff_media_type(header, str(file_path))

    def read_document(self, file_path: str) -> str:
        """Read a document from disk and return its plain text"""
        size = os.path.getsize(file_path)
        if size > self.max_document_size:
            logger.error(f"Document {file_path} is too large: {size} bytes")
            raise DocumentTooLarge(size, self.max_document_size)

        media_type = self.detect_media_type(file_path)
        with open(file_path, 'rb') as f:
            buffer = f.read()
        return self.extract_text(buffer, media_type)
