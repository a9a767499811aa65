# layoutlens/app/services/parser_service.py
from typing import Optional
import time
import traceback
import logging

from ...core.parsing.exceptions import LayoutExportError, UnsupportedTaskError
from ...core.parsing.orchestrator import parse_combined
from ..models.parse import PARSE_COMBINED_TASK, ParseErrorDetail, ParseResponse

logger = logging.getLogger(__name__)


class ParserService:

    @staticmethod
    def parse_combined_export(xml: str) -> dict:
        """
        Parsea el export combinado y lo devuelve listo para transporte.
        """
        start_time = time.time()

        result = parse_combined(xml)
        data = result.to_transport()

        processing_time = time.time() - start_time
        logger.info(
            f"Combined export parsed in {processing_time:.3f}s: "
            f"{len(result.fields)} fields, {len(result.db_fields)} database fields"
        )
        return data

    @staticmethod
    def handle_task(task: Optional[str], xml: str) -> ParseResponse:
        """
        Dispatches a task and wraps the outcome in the response envelope.

        Every error is caught here once and turned into
        ``{success: False, error: {message, stack}}``.
        """
        try:
            if task != PARSE_COMBINED_TASK:
                raise UnsupportedTaskError(task)

            return ParseResponse(success=True, data=ParserService.parse_combined_export(xml))

        except LayoutExportError as e:
            logger.warning(f"Parse task {task!r} failed: {e}")
            return ParserService._failure(e, e.message)
        except Exception as e:
            logger.exception(f"Unexpected error in parse task {task!r}")
            return ParserService._failure(e, str(e))

    @staticmethod
    def _failure(exc: BaseException, message: str) -> ParseResponse:
        stack = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
        return ParseResponse(
            success=False,
            error=ParseErrorDetail(message=message, stack=stack)
        )
