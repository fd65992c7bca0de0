"""Report record store."""

from typing import List
from sqlalchemy.orm import Session
from sqlalchemy import desc

from ..models import MedicalReport


class ReportRecordStore:
    """Append-only store of report filenames and their analyses."""

    def __init__(self, db: Session):
        """Initialize with database session."""
        self.db = db

    def append(self, user_id: int, filename: str, analysis: str) -> int:
        """Save one analysed upload and return the record id."""
        report = MedicalReport(user_id=user_id, filename=filename, analysis=analysis)
        self.db.add(report)
        self.db.commit()
        self.db.refresh(report)
        return report.id

    def list_for_user(self, user_id: int) -> List[MedicalReport]:
        """A user's reports, most recent first."""
        return (
            self.db.query(MedicalReport)
            .filter(MedicalReport.user_id == user_id)
            .order_by(desc(MedicalReport.created_at), desc(MedicalReport.id))
            .all()
        )
