"""
API Routes: M-Pesa Statement Import
"""

import logging
from typing import Optional

from fastapi import APIRouter, UploadFile, File, Form, HTTPException, Depends

from api.v1.schemas import ImportResponse, UploadInfoResponse, ErrorResponse
from api.v1.dependencies import get_import_use_case
from application.errors import InvalidFileError, ParseFailureError
from application.use_cases.import_statement import ImportStatementUseCase
from config import settings

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/mpesa")


def format_size(num_bytes: int) -> str:
    """10485760 -> '10MB'"""
    megabytes = num_bytes / (1024 * 1024)
    if megabytes.is_integer():
        return f"{int(megabytes)}MB"
    return f"{megabytes:.1f}MB"


@router.post(
    "/upload-statement",
    response_model=ImportResponse,
    responses={
        400: {"model": ErrorResponse},
        413: {"model": ErrorResponse},
        422: {"model": ErrorResponse},
    },
)
async def upload_statement(
    file: UploadFile = File(..., description="M-Pesa statement PDF file"),
    user_id: str = Form(..., description="Authenticated user identifier"),
    pdf_password: Optional[str] = Form(None, description="PDF password if encrypted"),
    use_case: ImportStatementUseCase = Depends(get_import_use_case)
):
    """
    Import transactions from an M-Pesa statement

    Workflow:
    1. Extract text from the PDF (PyMuPDF)
    2. Parse the SUMMARY table into income/expense transactions
    3. Skip duplicates and save the rest under the M-Pesa category
    """

    too_large = HTTPException(
        status_code=413,
        detail=f"File exceeds maximum size of {format_size(settings.MAX_UPLOAD_BYTES)}"
    )

    # Multipart uploads report their size before the body is read
    if file.size is not None and file.size > settings.MAX_UPLOAD_BYTES:
        raise too_large

    content = await file.read()
    if len(content) > settings.MAX_UPLOAD_BYTES:
        raise too_large

    try:
        result = await use_case.execute(
            file_bytes=content,
            filename=file.filename or "",
            user_id=user_id,
            password=pdf_password
        )
    except InvalidFileError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except ParseFailureError as e:
        raise HTTPException(status_code=422, detail=str(e))

    return ImportResponse(**result.to_response())


@router.get("/upload-info", response_model=UploadInfoResponse)
async def upload_info():
    """Upload limits and instructions"""

    return UploadInfoResponse(
        maxFileSize=format_size(settings.MAX_UPLOAD_BYTES),
        supportedFormats=["PDF"],
        instructions=[
            "Download your M-Pesa statement from the Safaricom app",
            "Select the PDF file to upload",
            "We'll automatically extract and categorize your transactions",
            "Duplicate transactions will be skipped",
        ]
    )
