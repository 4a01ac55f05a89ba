from datetime import date
from typing import List, Optional

from pydantic import Field

from studio.models.baseModel import DocumentModel


class InstructorPayment(DocumentModel):
    """Payroll settlement covering a set of sessions (referenced by id)"""

    id: str
    instructor_id: str
    instructor_name: str = ""
    date: date
    amount: float
    period_start: date
    period_end: date
    class_ids: List[str] = Field(default_factory=list)
    notes: Optional[str] = None
