"""
Document Loader for contract files.

Extracts text from uploaded contract bytes (PDF and plain text, plus
best-effort DOCX when enabled) and validates size and type on the way.
Extraction is lossy by nature; it is a text scrape, not a codec.
"""

import io
import re
from datetime import datetime, timezone
from pathlib import PurePath
from typing import NamedTuple, Optional

from contract_route_toolkit.config.settings import FileAuditConfig
from contract_route_toolkit.models.schemas import FileMetadata


# =============================================================================
# Supported Types
# =============================================================================

PDF_MIME = "application/pdf"
DOCX_MIME = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
DOC_MIME = "application/msword"
TXT_MIME = "text/plain"

EXTENSION_MIME_TYPES = {
    "pdf": PDF_MIME,
    "docx": DOCX_MIME,
    "doc": DOC_MIME,
    "txt": TXT_MIME,
}

SUPPORTED_EXTENSIONS = ["pdf", "txt"]
SUPPORTED_MIME_TYPES = [PDF_MIME, TXT_MIME]

DEFAULT_MAX_FILE_SIZE = 10 * 1024 * 1024

_CJK_CHAR = re.compile(r"[一-鿿]")
_LATIN_WORD = re.compile(r"[a-zA-Z]+")
_CONTROL_CHARS = re.compile(r"[\x00-\x08\x0B\x0C\x0E-\x1F\x7F-\x84\x86-\x9F]")


class DocumentParseError(ValueError):
    """Raised when a contract file cannot be turned into usable text."""


class ParsedDocument(NamedTuple):
    """Cleaned text of a contract file and its metadata."""

    content: str
    metadata: FileMetadata


def file_extension(file_name: str) -> str:
    """Lowercase extension of a file name without the dot."""
    return PurePath(file_name).suffix.lower().lstrip(".")


def detect_mime_type(file_name: str, data: bytes = b"") -> str:
    """
    Detect a file's MIME type from magic bytes, then from its extension.

    Args:
        file_name: Original file name
        data: File content (may be empty)

    Returns:
        MIME type string, or "unknown"
    """
    if len(data) >= 4:
        if data[:4] == b"%PDF":
            return PDF_MIME
        # DOCX is a ZIP container
        if data[:2] == b"PK":
            return DOCX_MIME

    return EXTENSION_MIME_TYPES.get(file_extension(file_name), "unknown")


def validate_file_type(
    file_name: str,
    mime_type: Optional[str] = None,
    allow_docx: bool = False
) -> bool:
    """
    Check whether a file looks like a supported contract format.

    Args:
        file_name: Original file name
        mime_type: Declared MIME type, if any
        allow_docx: Accept DOCX files as well

    Returns:
        True if the extension or the declared/derived MIME type is supported
    """
    extensions = SUPPORTED_EXTENSIONS + (["docx"] if allow_docx else [])
    mime_types = SUPPORTED_MIME_TYPES + ([DOCX_MIME] if allow_docx else [])

    detected = mime_type or detect_mime_type(file_name)
    return file_extension(file_name) in extensions or detected in mime_types


def get_supported_file_types(allow_docx: bool = False) -> dict:
    """Describe the accepted formats and limits."""
    extensions = SUPPORTED_EXTENSIONS + (["docx"] if allow_docx else [])
    return {
        "extensions": extensions,
        "mime_types": [EXTENSION_MIME_TYPES[ext] for ext in extensions],
        "max_file_size": "10MB",
    }


def clean_extracted_content(content: str) -> str:
    """
    Normalize extracted text.

    Collapses whitespace, drops page markers and control characters and
    normalizes curly quotes.
    """
    content = content.replace("\f", "")
    content = re.sub(r"Page \d+ of \d+", "", content, flags=re.IGNORECASE)
    content = re.sub(r"^\s*\d+\s*$", "", content, flags=re.MULTILINE)
    content = re.sub(r"\s+", " ", content).strip()
    content = re.sub(r"[“”]", '"', content)
    content = re.sub(r"[‘’]", "'", content)
    return _CONTROL_CHARS.sub("", content)


def count_words(text: str) -> int:
    """Count CJK characters individually and Latin text by words."""
    return len(_CJK_CHAR.findall(text)) + len(_LATIN_WORD.findall(text))


# =============================================================================
# Document Loader
# =============================================================================

class DocumentLoader:
    """
    Extracts text from contract file bytes.

    PDF goes through pypdf and plain text is decoded directly. DOCX is
    handled by python-docx only when ``allow_docx`` is set; legacy DOC is
    never supported.
    """

    def __init__(
        self,
        max_file_size: int = DEFAULT_MAX_FILE_SIZE,
        min_content_chars: int = 50,
        allow_docx: bool = False
    ):
        """
        Initialize the document loader.

        Args:
            max_file_size: Largest accepted file in bytes
            min_content_chars: Minimum characters of cleaned text
            allow_docx: Enable degraded DOCX extraction
        """
        self.max_file_size = max_file_size
        self.min_content_chars = min_content_chars
        self.allow_docx = allow_docx

    @classmethod
    def from_config(cls, config: Optional[FileAuditConfig] = None) -> "DocumentLoader":
        """Create a loader from file audit settings."""
        config = config or FileAuditConfig()
        return cls(
            max_file_size=config.max_file_size,
            min_content_chars=config.min_content_chars,
            allow_docx=config.allow_docx,
        )

    # -------------------------------------------------------------------------
    # Main Loading Methods
    # -------------------------------------------------------------------------

    def parse(
        self,
        data: bytes,
        file_name: str,
        mime_type: Optional[str] = None
    ) -> "ParsedDocument":
        """
        Extract and clean the text of a contract file.

        Args:
            data: Raw file content
            file_name: Original file name with extension
            mime_type: Declared MIME type (detected if absent)

        Returns:
            ParsedDocument of (content, metadata)

        Raises:
            DocumentParseError: If the file is too large, of an unsupported
                type, unreadable, or yields too little text
        """
        if len(data) > self.max_file_size:
            size_mb = round(len(data) / 1024 / 1024)
            limit_mb = round(self.max_file_size / 1024 / 1024)
            raise DocumentParseError(f"文件大小超过限制 ({size_mb}MB > {limit_mb}MB)")

        detected = mime_type or detect_mime_type(file_name, data)
        extension = file_extension(file_name)
        page_count = None

        if detected == PDF_MIME or (detected not in EXTENSION_MIME_TYPES.values() and extension == "pdf"):
            text, page_count = self._load_pdf(data)
        elif detected == TXT_MIME or (detected not in EXTENSION_MIME_TYPES.values() and extension == "txt"):
            text = self._load_text(data)
        elif detected == DOCX_MIME and self.allow_docx:
            text = self._load_docx(data)
        elif detected in (DOCX_MIME, DOC_MIME):
            raise DocumentParseError(
                f"{extension.upper() or 'Word'}文件格式在此环境下不支持，请转换为PDF或TXT格式"
            )
        else:
            raise DocumentParseError(
                f"不支持的文件类型: {detected if detected != 'unknown' else extension}。"
                f"支持的格式: PDF, TXT"
            )

        text = clean_extracted_content(text)

        if len(text) < self.min_content_chars:
            raise DocumentParseError("无法从文件中提取到足够的文本内容，请检查文件是否损坏或为空")

        metadata = FileMetadata(
            file_name=file_name,
            file_type=detected if detected != "unknown" else f"file/{extension}",
            file_size=len(data),
            page_count=page_count,
            word_count=count_words(text),
            extracted_at=datetime.now(timezone.utc),
        )

        return ParsedDocument(text, metadata)

    # -------------------------------------------------------------------------
    # Format-Specific Loaders
    # -------------------------------------------------------------------------

    @staticmethod
    def _load_pdf(data: bytes) -> tuple[str, int]:
        """
        Extract text from PDF bytes.

        Returns:
            Tuple of (text, page_count)
        """
        import pypdf

        try:
            reader = pypdf.PdfReader(io.BytesIO(data))
            pages = reader.pages
            text_parts = [page.extract_text() or "" for page in pages]
        except Exception as e:
            raise DocumentParseError(f"PDF解析失败: {e}") from e

        return "\n\n".join(part for part in text_parts if part), len(pages)

    @staticmethod
    def _load_docx(data: bytes) -> str:
        """Extract paragraph and table text from DOCX bytes."""
        import docx

        try:
            doc = docx.Document(io.BytesIO(data))
        except Exception as e:
            raise DocumentParseError(f"DOCX解析失败: {e}") from e

        paragraphs = [para.text for para in doc.paragraphs if para.text.strip()]

        for table in doc.tables:
            for row in table.rows:
                row_text = [cell.text for cell in row.cells if cell.text.strip()]
                if row_text:
                    paragraphs.append(" | ".join(row_text))

        return "\n\n".join(paragraphs)

    @staticmethod
    def _load_text(data: bytes) -> str:
        """Decode plain text bytes."""
        for encoding in ("utf-8", "utf-16"):
            try:
                return data.decode(encoding)
            except UnicodeDecodeError:
                continue

        # latin-1 maps every byte, so this cannot fail
        return data.decode("latin-1")
