from typing import Any

from fastapi import APIRouter, Body, File, Request, UploadFile
from starlette.concurrency import run_in_threadpool

from app.biomarkers.exceptions import ContractViolationError
from app.processor.exceptions import DocumentTooLargeError
from app.processor.processor import Processor

router = APIRouter()


def _processor(request: Request) -> Processor:
    processor: Processor = request.app.state.processor
    return processor


@router.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}


@router.post("/extractReport")
async def extract_report(
    request: Request,
    document: UploadFile | None = File(None),
) -> dict[str, Any]:
    """Extract patient metadata and biomarkers from an uploaded PDF or DOCX."""
    request.state.operation = "Extraction"
    if document is None:
        raise ContractViolationError("No file uploaded.")
    max_upload_bytes: int = request.app.state.settings.max_upload_bytes
    if document.size is not None and document.size > max_upload_bytes:
        raise DocumentTooLargeError(
            f"File is {document.size} bytes; the limit is {max_upload_bytes} bytes"
        )
    # One byte past the limit is enough for the processor to reject it.
    content = await document.read(max_upload_bytes + 1)
    result = await run_in_threadpool(
        _processor(request).extract_report,
        document.filename or "",
        document.content_type or "",
        content,
    )
    return {"success": True, "data": result.to_dict()}


@router.post("/analyzeWithDataset")
async def analyze_with_dataset(
    request: Request,
    body: Any = Body(None),
) -> dict[str, Any]:
    """Evaluate biomarkers against the reference dataset."""
    request.state.operation = "Dataset analysis"
    payload = body.get("data") if isinstance(body, dict) else None
    result = await run_in_threadpool(_processor(request).analyze, payload)
    return {"success": True, "data": result.to_dict()}
