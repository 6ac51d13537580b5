"""
Tests for DOCX to markdown conversion.
"""

import pytest
from docx import Document as DocxDocument
from docx.opc.exceptions import PackageNotFoundError

from app.services.document_processor import convert_docx_to_markdown, document_to_markdown


def save_doc(doc, tmp_path, name="documento.docx"):
    path = tmp_path / name
    doc.save(str(path))
    return str(path)


class TestConvertDocxToMarkdown:

    def test_single_paragraph(self, tmp_path):
        doc = DocxDocument()
        doc.add_paragraph("El proyecto cumple el criterio X")
        assert convert_docx_to_markdown(save_doc(doc, tmp_path)) == "El proyecto cumple el criterio X"

    def test_headings_and_lists(self, tmp_path):
        doc = DocxDocument()
        doc.add_heading("Memoria técnica", level=1)
        doc.add_heading("Alcance", level=2)
        doc.add_paragraph("Primer criterio", style="List Bullet")
        doc.add_paragraph("Segundo criterio", style="List Number")

        markdown = convert_docx_to_markdown(save_doc(doc, tmp_path))

        assert markdown == (
            "# Memoria técnica\n\n"
            "## Alcance\n\n"
            "- Primer criterio\n\n"
            "- Segundo criterio"
        )

    def test_run_emphasis(self, tmp_path):
        doc = DocxDocument()
        paragraph = doc.add_paragraph()
        paragraph.add_run("Importante").bold = True
        paragraph.add_run(": revisar el ")
        paragraph.add_run("anexo").italic = True

        markdown = convert_docx_to_markdown(save_doc(doc, tmp_path))

        assert markdown == "**Importante**: revisar el *anexo*"

    def test_table_rendered_as_markdown(self, tmp_path):
        doc = DocxDocument()
        doc.add_paragraph("Tabla de requisitos")
        table = doc.add_table(rows=2, cols=2)
        table.cell(0, 0).text = "Requisito"
        table.cell(0, 1).text = "Estado"
        table.cell(1, 0).text = "Seguridad"
        table.cell(1, 1).text = "Hecho"

        markdown = convert_docx_to_markdown(save_doc(doc, tmp_path))

        assert markdown == (
            "Tabla de requisitos\n\n"
            "| Requisito | Estado |\n"
            "| --- | --- |\n"
            "| Seguridad | Hecho |"
        )

    def test_empty_paragraphs_skipped(self, tmp_path):
        doc = DocxDocument()
        doc.add_paragraph("Uno")
        doc.add_paragraph("")
        doc.add_paragraph("   ")
        doc.add_paragraph("Dos")
        assert convert_docx_to_markdown(save_doc(doc, tmp_path)) == "Uno\n\nDos"

    def test_empty_document(self):
        assert document_to_markdown(DocxDocument()) == ""

    def test_invalid_file_raises(self, tmp_path):
        path = tmp_path / "roto.docx"
        path.write_bytes(b"not a zip archive")
        with pytest.raises(PackageNotFoundError):
            convert_docx_to_markdown(str(path))
