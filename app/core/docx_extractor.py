from io import BytesIO

from docx import Document


def extract_docx_text(docx_bytes: bytes) -> str:
    """
    Deterministically extract paragraph text from a DOCX.
    Returns one string with one non-empty paragraph per line.
    """
    doc = Document(BytesIO(docx_bytes))
    paragraphs = [(p.text or "").strip() for p in doc.paragraphs]
    return "\n".join(t for t in paragraphs if t)
