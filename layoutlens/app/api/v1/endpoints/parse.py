from fastapi import APIRouter, HTTPException
from ....models.parse import ParseRequest, ParseResponse
from ....services.parser_service import ParserService
from ....core.config import get_settings

router = APIRouter()
settings = get_settings()


@router.post("/", response_model=ParseResponse)
def parse_export(request: ParseRequest):
    """
    Runs a parse task. Extraction failures come back in the envelope
    (success=False), not as HTTP errors.
    """
    if len(request.xml.encode("utf-8")) > settings.MAX_XML_SIZE:
        raise HTTPException(
            status_code=413,
            detail=f"XML too large. Maximum: {settings.MAX_XML_SIZE / (1024 * 1024):.0f}MB"
        )

    return ParserService.handle_task(task=request.task, xml=request.xml)
