"""
Prompt assembly for the compliance table request.
"""

TABLE_DIRECTIVE = (
    "Por favor, devuélveme sólo una tabla Markdown con columnas: "
    "Criterio, Cumple (Sí/No) y Observaciones."
)


def build_prompt(instruction: str, display_name: str, document_text: str) -> str:
    """
    Joins the user instruction, document name, extracted text and the fixed
    table directive, each block separated by a blank line.
    """
    prompt = (
        f"{instruction or ''}\n\n"
        f"Documento: {display_name}\n\n"
        f"{document_text}\n\n"
        f"{TABLE_DIRECTIVE}"
    )
    return prompt.strip()
