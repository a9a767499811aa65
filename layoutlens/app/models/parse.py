from pydantic import BaseModel, Field
from typing import Any, Dict, Optional

PARSE_COMBINED_TASK = "parseCombined"


class ParseRequest(BaseModel):
    task: str = Field(default=PARSE_COMBINED_TASK)
    xml: str


class ParseErrorDetail(BaseModel):
    message: str
    stack: str = ""


class ParseResponse(BaseModel):
    success: bool
    data: Optional[Dict[str, Any]] = None
    error: Optional[ParseErrorDetail] = None
