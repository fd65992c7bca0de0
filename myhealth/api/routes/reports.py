"""Medical report endpoints."""

import logging
from typing import List, Optional
from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile
from sqlalchemy.orm import Session

from myhealth.core.config import Settings
from myhealth.core.database import get_db
from myhealth.core.dependencies import get_current_user, get_settings_dependency
from myhealth.schemas.auth import TokenClaims
from myhealth.schemas.common import SuccessResponse
from myhealth.schemas.report import MedicalReportOut
from myhealth.services.report_store import ReportRecordStore
from myhealth.utils.file_utils import (
    DEFAULT_REPORT_FILENAME,
    is_allowed_file,
    format_file_size,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/reports", tags=["reports"])


@router.post("/upload", response_model=SuccessResponse)
async def upload_report(
    analysis: str = Form(...),
    report: Optional[UploadFile] = File(None),
    current_user: TokenClaims = Depends(get_current_user),
    settings: Settings = Depends(get_settings_dependency),
    db: Session = Depends(get_db),
):
    """
    Record an analysed report.

    The analysis text was produced by the client; the file itself is only
    checked for type and size and is not kept.
    """
    filename = DEFAULT_REPORT_FILENAME
    if report is not None and report.filename:
        filename = report.filename

        # Validate file extension
        if not is_allowed_file(filename, settings.allowed_extensions):
            raise HTTPException(
                status_code=400,
                detail=f"File type not allowed. Allowed types: {', '.join(sorted(settings.allowed_extensions))}",
            )

        # Read and validate file size
        file_content = await report.read()
        max_size = settings.max_file_size_mb * 1024 * 1024
        if len(file_content) > max_size:
            raise HTTPException(
                status_code=400,
                detail=f"File too large. Maximum size: {settings.max_file_size_mb}MB",
            )
        logger.info(f"Report {filename} received ({format_file_size(len(file_content))})")

    ReportRecordStore(db).append(current_user.id, filename, analysis)
    return SuccessResponse()


@router.get("", response_model=List[MedicalReportOut])
def list_reports(
    current_user: TokenClaims = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Caller's reports, newest first."""
    return ReportRecordStore(db).list_for_user(current_user.id)
