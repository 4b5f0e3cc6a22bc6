import io

import docx

from legal_analyzer.extraction.exceptions import WordExtractionError


class WordTextExtractor:
    """Extracts raw text from Word documents with python-docx.

    Paragraph text comes first, followed by table cell text row by row.
    Legacy binary ``.doc`` files are not OOXML packages and fail to open.
    """

    def extract(self, content: bytes) -> str:
        try:
            document = docx.Document(io.BytesIO(content))
        except Exception as exc:
            raise WordExtractionError(f"python-docx could not open document: {exc}") from exc

        lines = [paragraph.text for paragraph in document.paragraphs]
        for table in document.tables:
            for row in table.rows:
                cells = [cell.text.strip() for cell in row.cells if cell.text.strip()]
                if cells:
                    lines.append("\t".join(cells))
        return "\n".join(lines).strip()
