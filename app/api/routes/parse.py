import logging

from fastapi import APIRouter, File, HTTPException, UploadFile

from app.core.config import settings
from app.core.docx_extractor import extract_docx_text
from app.core.pdf_extractor import extract_pdf_text
from app.core.schemas import ParseResponse, TextParseRequest
from app.core.text_parser import parse_text_to_response

logger = logging.getLogger(__name__)

router = APIRouter(tags=["parse"])

DOCX_CONTENT_TYPES = {
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
}
TEXT_CONTENT_TYPES = {"text/plain", "text/markdown"}


EXAMPLE_RESPONSE = {
    "parsed_resume": {
        "personalInfo": {
            "name": "Jane Doe",
            "title": "Professional",
            "email": "jane@example.com",
            "phone": "(555) 123-4567",
            "location": "Austin, TX 78701",
            "summary": "Experienced professional with a strong background in various fields.",
        },
        "experiences": [
            {
                "id": "3f9a1c2b7",
                "title": "Engineer",
                "company": "Acme Corp",
                "startYear": "2019",
                "endYear": "2021",
                "description": "Responsibilities and achievements in this role.",
            }
        ],
        "education": [
            {
                "id": "a81d0e4f2",
                "institution": "Computer Science State University",
                "degree": "BS",
                "graduationYear": "2015",
            }
        ],
        "skills": [
            {"id": "c04b9e113", "name": "Python", "category": "Programming Languages"},
        ],
    },
    "source": "text",
    "line_count": 9,
    "warnings": [],
}


@router.post(
    "/parse",
    response_model=ParseResponse,
    summary="Parse Resume File",
    description="Extract a structured resume record from a DOCX, PDF or TXT upload. Unrecognized content falls back to placeholder values.",
    responses={
        200: {
            "description": "Successfully parsed resume",
            "content": {"application/json": {"example": EXAMPLE_RESPONSE}},
        },
        400: {"description": "Empty file uploaded"},
        413: {"description": "File exceeds the upload size limit"},
        415: {"description": "Unsupported file format"},
        422: {"description": "File has no extractable text"},
    },
)
async def parse_resume(
    file: UploadFile = File(..., description="Resume file (DOCX, PDF, or TXT format)")
):
    """
    Parse a resume file into personal info, experiences, education and skills.

    **Supported formats:**
    - DOCX (.docx)
    - PDF (.pdf) - Text-layer extraction only, OCR not supported
    - TXT (.txt, .md)
    """
    raw = await file.read()
    if not raw:
        raise HTTPException(status_code=400, detail="Empty file uploaded.")
    if len(raw) > settings.max_upload_bytes:
        raise HTTPException(
            status_code=413,
            detail=f"File exceeds the {settings.max_upload_bytes} byte upload limit.",
        )

    filename = (file.filename or "").lower()
    content_type = (file.content_type or "").lower()

    # DOCX
    if filename.endswith(".docx") or content_type in DOCX_CONTENT_TYPES:
        text = _extract_or_422(extract_docx_text, raw, "DOCX")
        return parse_text_to_response(text, source="docx")

    # PDF
    if filename.endswith(".pdf") or content_type == "application/pdf":
        text = _extract_or_422(extract_pdf_text, raw, "PDF")
        if not text.strip():
            raise HTTPException(
                status_code=422,
                detail="PDF appears to have no extractable text. OCR is not supported.",
            )
        return parse_text_to_response(text, source="pdf")

    # Text
    if content_type in TEXT_CONTENT_TYPES or filename.endswith((".txt", ".md")):
        text = raw.decode("utf-8", errors="replace")
        return parse_text_to_response(text, source="text")

    raise HTTPException(status_code=415, detail=f"Unsupported content type: {file.content_type}")


@router.post(
    "/parse/text",
    response_model=ParseResponse,
    summary="Parse Resume Text",
    description="Parse resume text that was already extracted from its document.",
)
def parse_resume_text_body(payload: TextParseRequest):
    return parse_text_to_response(payload.text, source="user")


def _extract_or_422(extractor, raw: bytes, kind: str) -> str:
    try:
        return extractor(raw)
    except Exception as exc:
        logger.warning(f"{kind} text extraction failed: {exc}")
        raise HTTPException(status_code=422, detail=f"Could not read {kind} file.") from exc
