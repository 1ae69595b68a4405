"""Maps domain exceptions to the JSON error envelope."""

from dataclasses import dataclass

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.biomarkers.exceptions import ContractViolationError
from app.dataset.exceptions import DatasetError, DatasetNotFoundError
from app.documents.exceptions import DocumentExtractionError, UnsupportedDocumentTypeError
from app.llm.exceptions import ExternalModelError, ExternalModelIncompleteError
from app.logging.logger import Log
from app.processor.exceptions import DocumentTooLargeError, InsufficientTextError


@dataclass(frozen=True)
class ErrorKind:
    code: str
    status_code: int
    retryable: bool = False


# Most specific first: lookup walks this list in order.
ERROR_KINDS: list[tuple[type[Exception], ErrorKind]] = [
    (ContractViolationError, ErrorKind("contract_violation", 400)),
    (RequestValidationError, ErrorKind("contract_violation", 400)),
    (DocumentTooLargeError, ErrorKind("document_too_large", 413)),
    (UnsupportedDocumentTypeError, ErrorKind("unsupported_document_type", 415)),
    (InsufficientTextError, ErrorKind("insufficient_text", 422)),
    (DocumentExtractionError, ErrorKind("document_extraction_failed", 422)),
    (DatasetNotFoundError, ErrorKind("dataset_not_found", 500)),
    (DatasetError, ErrorKind("dataset_error", 500)),
    (ExternalModelIncompleteError, ErrorKind("external_model_incomplete", 502, retryable=True)),
    (ExternalModelError, ErrorKind("external_model_failure", 502)),
]

_INTERNAL_ERROR = ErrorKind("internal_error", 500)


def classify(exc: Exception) -> ErrorKind:
    for exc_type, kind in ERROR_KINDS:
        if isinstance(exc, exc_type):
            return kind
    return _INTERNAL_ERROR


def error_response(exc: Exception, operation: str) -> JSONResponse:
    kind = classify(exc)
    Log.error(f"{operation} failed [{kind.code}]: {exc}")
    return JSONResponse(
        status_code=kind.status_code,
        content={
            "success": False,
            "error": kind.code,
            "message": f"{operation} failed: {exc}",
            "retryable": kind.retryable,
        },
    )


def register_error_handlers(app: FastAPI) -> None:
    async def handle(request: Request, exc: Exception) -> JSONResponse:
        operation = getattr(request.state, "operation", "Request")
        return error_response(exc, operation)

    for exc_type, _kind in ERROR_KINDS:
        app.add_exception_handler(exc_type, handle)
    app.add_exception_handler(Exception, handle)
