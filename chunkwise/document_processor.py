"""Document processing module for extracting chunkable text from files."""

import os
from pathlib import Path

# On Windows, disable Hugging Face cache symlinks to avoid WinError 1314
# ("A required privilege is not held by the client"). Using copies instead.
if os.name == "nt":
    os.environ.setdefault("HF_HUB_DISABLE_SYMLINKS", "1")
from typing import Callable, Dict

from chunkwise.models.document import Document

try:
    from docling.document_converter import DocumentConverter
    DOCLING_AVAILABLE = True
except ImportError:
    DOCLING_AVAILABLE = False

try:
    from pypdf import PdfReader
    PYPDF_AVAILABLE = True
except ImportError:
    PYPDF_AVAILABLE = False

try:
    from docx import Document as DocxDocument
    DOCX_AVAILABLE = True
except ImportError:
    DOCX_AVAILABLE = False

FILE_TYPES = {
    ".pdf": "pdf",
    ".docx": "docx",
    ".doc": "docx",
    ".txt": "text",
    ".md": "text",
}


class DocumentProcessor:
    """Extracts plain text from PDF, Word and text files."""

    def __init__(self, use_docling: bool = True):
        """
        Initialize the document processor.

        Args:
            use_docling: Whether to use docling for PDF and Word extraction when installed (default: True)
        """
        self.use_docling = use_docling and DOCLING_AVAILABLE
        self._custom_parsers: Dict[str, Callable[[str], str]] = {}
        if self.use_docling:
            try:
                self.converter = DocumentConverter()
                print("✓ Docling initialized successfully")
            except OSError as e:
                if getattr(e, "winerror", None) == 1314:
                    print(
                        "✗ Docling failed (Windows symlink privilege). "
                        "Falling back to pypdf. Enable Developer Mode to use docling."
                    )
                    self.use_docling = False
                else:
                    print(f"✗ Failed to initialize docling: {e}")
                    raise

    def register_parser(self, extension: str, parser: Callable[[str], str]) -> None:
        """
        Add or replace the extractor for a file extension.

        Args:
            extension: File suffix such as ".html" (leading dot optional, case-insensitive).
            parser: Callable taking a file path and returning its text.
        """
        ext = extension.lower()
        if not ext.startswith("."):
            ext = "." + ext
        self._custom_parsers[ext] = parser

    def parse(self, file_path: str) -> Document:
        """Extract a file's text and wrap it with its file_type and file_path."""
        extension = Path(file_path).suffix.lower()
        content = self.extract_text(file_path)
        return Document(
            content=content,
            metadata={
                "file_type": FILE_TYPES.get(extension, extension.lstrip(".") or "unknown"),
                "file_path": str(file_path),
            },
        )

    def extract_text(self, file_path: str) -> str:
        """
        Extract text from a document file.

        Args:
            file_path: Path to the document file

        Returns:
            Extracted text content

        Raises:
            ValueError: If the format is unsupported or its extraction backend is missing.
        """
        extension = Path(file_path).suffix.lower()

        if extension in self._custom_parsers:
            return self._custom_parsers[extension](file_path).strip()
        if extension == ".pdf":
            return self._extract_from_pdf(file_path)
        elif extension in [".docx", ".doc"]:
            return self._extract_from_docx(file_path)
        elif extension in [".txt", ".md"]:
            return self._extract_from_txt(file_path)
        else:
            raise ValueError(f"Unsupported file format: {extension or '(none)'}")

    def _extract_with_docling(self, file_path: str) -> str:
        """Convert with docling; plain text export first, markdown as fallback."""
        result = self.converter.convert(file_path)
        if not hasattr(result, "document"):
            raise ValueError("Docling conversion result has no 'document' attribute")

        docling_doc = result.document
        for export in ("export_to_text", "export_to_markdown"):
            if hasattr(docling_doc, export):
                text = getattr(docling_doc, export)()
                if text and text.strip():
                    print(f"✓ Docling extracted {len(text)} characters")
                    return text.strip()

        raise ValueError("Docling extraction returned empty text")

    def _extract_from_pdf(self, file_path: str) -> str:
        """Extract text from PDF file using docling, or pypdf page by page."""
        if self.use_docling:
            print(f"Extracting text from PDF using docling: {file_path}")
            try:
                return self._extract_with_docling(file_path)
            except OSError as e:
                if getattr(e, "winerror", None) != 1314:
                    print(f"✗ Docling extraction failed: {e}")
                    raise
                print(
                    "✗ Docling failed (Windows symlink privilege). "
                    "Falling back to pypdf for this document."
                )
                self.use_docling = False

        if not PYPDF_AVAILABLE:
            raise ValueError("pypdf is required for PDF extraction. Install with: uv add pypdf")

        print(f"Extracting text from PDF using pypdf: {file_path}")
        reader = PdfReader(file_path)
        pages = []
        for page in reader.pages:
            # image-only pages yield no text
            pages.append(page.extract_text() or "")
        return "\n".join(pages).strip()

    def _extract_from_docx(self, file_path: str) -> str:
        """Extract text from Word document using docling or python-docx."""
        if self.use_docling:
            print(f"Extracting text from Word document using docling: {file_path}")
            return self._extract_with_docling(file_path)

        if not DOCX_AVAILABLE:
            raise ValueError("python-docx is required for Word document extraction. Install with: uv add python-docx")

        print(f"Extracting text from Word document using python-docx: {file_path}")
        doc = DocxDocument(file_path)
        return "\n".join(paragraph.text for paragraph in doc.paragraphs).strip()

    def _extract_from_txt(self, file_path: str) -> str:
        """Extract text from plain text file."""
        with open(file_path, "r", encoding="utf-8") as f:
            return f.read().strip()
