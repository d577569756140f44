"""
Concrete implementation of DocumentPort for résumé uploads:
PDF, DOCX and plain text.

CPU-bound parsing is offloaded to a threadpool via asyncio.to_thread()
so large files do not block the event loop.
"""

import asyncio
import io
import zipfile

from docx.opc.exceptions import PackageNotFoundError
from pypdf import PdfReader
from pypdf.errors import PyPdfError

from resume_ai.ports.document_port import DocumentPort


class DocumentAdapter(DocumentPort):
    """Extracts text from PDF, DOCX and plain-text résumé files."""

    _SUPPORTED = ["pdf", "docx", "txt", "md"]

    # Scanned PDFs and image-only files typically yield almost nothing.
    _MIN_TEXT_LENGTH = 20

    async def extract_text(self, file_bytes: bytes, file_extension: str) -> str:
        """
        Route to the correct parser based on file extension.

        Raises ValueError if:
        - The file type is unsupported
        - The file cannot be read as its extension claims (corrupt or mislabelled)
        - The extracted text is too short (likely a scanned/image-only document)
        """
        ext = file_extension.lower().strip(".")

        if ext == "pdf":
            try:
                text = await asyncio.to_thread(self._extract_pdf, file_bytes)
            except PyPdfError as exc:
                raise ValueError(self._unreadable(ext)) from exc
        elif ext == "docx":
            try:
                text = await asyncio.to_thread(self._extract_docx, file_bytes)
            except (PackageNotFoundError, zipfile.BadZipFile, KeyError) as exc:
                raise ValueError(self._unreadable(ext)) from exc
        elif ext in ("txt", "md"):
            text = self._extract_plain(file_bytes)
        else:
            raise ValueError(
                f"Unsupported file type: .{ext}. "
                f"Supported: {', '.join(self._SUPPORTED)}"
            )

        if len(text.strip()) < self._MIN_TEXT_LENGTH:
            raise ValueError(
                "The uploaded document appears to be empty, scanned or image-based. "
                "Please upload a text-based file or paste the résumé text instead."
            )

        return text

    def supported_extensions(self) -> list[str]:
        return self._SUPPORTED.copy()

    @staticmethod
    def _unreadable(ext: str) -> str:
        return (
            f"The uploaded .{ext} file could not be read. "
            "It may be corrupt or saved in a different format; try re-exporting it "
            "or paste the résumé text instead."
        )

    @staticmethod
    def _extract_pdf(file_bytes: bytes) -> str:
        """Extract text from all pages of a PDF."""
        reader = PdfReader(io.BytesIO(file_bytes))
        pages: list[str] = []
        for page in reader.pages:
            text = page.extract_text()
            if text:
                pages.append(text.strip())
        return "\n\n".join(pages)

    @staticmethod
    def _extract_docx(file_bytes: bytes) -> str:
        """Extract text from all paragraphs of a DOCX, then its table cells."""
        from docx import Document

        doc = Document(io.BytesIO(file_bytes))
        lines = [para.text.strip() for para in doc.paragraphs if para.text.strip()]
        # résumé templates often lay out sections in tables
        for table in doc.tables:
            for row in table.rows:
                for cell in row.cells:
                    if cell.text.strip():
                        lines.append(cell.text.strip())
        return "\n".join(lines)

    @staticmethod
    def _extract_plain(file_bytes: bytes) -> str:
        # utf-8-sig drops a BOM left by Windows editors
        return file_bytes.decode("utf-8-sig", errors="replace")
