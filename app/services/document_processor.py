"""
Document processing service: converts an uploaded DOCX into markdown text.
"""

import re
import logging
from docx import Document as DocxDocument
from docx.oxml.text.paragraph import CT_P
from docx.oxml.table import CT_Tbl
from docx.text.paragraph import Paragraph
from docx.table import Table

logger = logging.getLogger(__name__)

_HEADING_STYLE = re.compile(r'^Heading\s*(\d)$', re.IGNORECASE)


def _runs_to_markdown(paragraph: Paragraph) -> str:
    """Renders a paragraph's runs, keeping bold and italic emphasis."""
    parts = []
    for run in paragraph.runs:
        text = run.text
        if not text:
            continue
        if not text.strip():
            parts.append(text)
            continue
        if run.bold and run.italic:
            text = f"***{text}***"
        elif run.bold:
            text = f"**{text}**"
        elif run.italic:
            text = f"*{text}*"
        parts.append(text)
    return "".join(parts).strip()


def _paragraph_to_markdown(paragraph: Paragraph) -> str:
    text = _runs_to_markdown(paragraph)
    if not text:
        return ""

    style_name = paragraph.style.name if paragraph.style is not None else ""
    heading = _HEADING_STYLE.match(style_name)
    if heading:
        # Heading text without run emphasis
        return f"{'#' * int(heading.group(1))} {paragraph.text.strip()}"
    if style_name == "Title":
        return f"# {paragraph.text.strip()}"
    if style_name.startswith("List"):
        return f"- {text}"
    return text


def _table_to_markdown(table: Table) -> str:
    rows = []
    for r_idx, row in enumerate(table.rows):
        cells = []
        for cell in row.cells:
            cell_lines = [_runs_to_markdown(p) for p in cell.paragraphs]
            cells.append("<br>".join(line for line in cell_lines if line).replace("|", "\\|"))
        rows.append("| " + " | ".join(cells) + " |")
        if r_idx == 0:
            rows.append("|" + " --- |" * len(row.cells))
    return "\n".join(rows)


def document_to_markdown(doc: DocxDocument) -> str:
    """
    Walks the document body in order and renders paragraphs and tables as
    markdown blocks separated by blank lines.
    """
    blocks = []
    for element in doc.element.body:
        if isinstance(element, CT_P):
            block = _paragraph_to_markdown(Paragraph(element, doc))
        elif isinstance(element, CT_Tbl):
            block = _table_to_markdown(Table(element, doc))
        else:
            continue
        if block:
            blocks.append(block)
    return "\n\n".join(blocks)


def convert_docx_to_markdown(file_path: str) -> str:
    """Opens a DOCX file from disk and returns its markdown text."""
    logger.info(f"Converting DOCX to markdown: {file_path}")
    doc = DocxDocument(file_path)
    markdown = document_to_markdown(doc)
    logger.info(f"Extracted {len(markdown)} characters")
    return markdown
