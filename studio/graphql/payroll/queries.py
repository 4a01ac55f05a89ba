from datetime import date
from typing import List, Optional

import strawberry
from strawberry.types import Info

from studio.core.errors import StudioError
from studio.crud.classSessionCrud import get_class_session_or_raise
from studio.crud.payrollCrud import calculate_pay, compute_pending_payroll, list_instructor_payments
from .types import InstructorPayment, PendingPayroll, PendingPayrollResponse


@strawberry.type
class PayrollQueries:
    @strawberry.field
    async def pending_payroll(
        self,
        info: Info,
        instructor_id: str,
        period_start: date,
        period_end: date,
    ) -> PendingPayrollResponse:
        """Sessions awaiting payment with the computed totals"""
        try:
            summary = compute_pending_payroll(info.context.store, instructor_id, period_start, period_end)
            return PendingPayrollResponse(
                success=True,
                payroll=PendingPayroll.from_dataclass(summary),
                message=f"{summary.total_count} clases pendientes"
            )
        except StudioError as e:
            return PendingPayrollResponse(success=False, payroll=None, message=str(e), error_code=e.code)

    @strawberry.field
    async def session_pay(self, info: Info, session_id: str) -> Optional[float]:
        """Pay for one session at the current room rates"""
        store = info.context.store
        try:
            return calculate_pay(store, get_class_session_or_raise(store, session_id))
        except StudioError:
            return None

    @strawberry.field
    async def instructor_payments(self, info: Info, instructor_id: Optional[str] = None) -> List[InstructorPayment]:
        payments = list_instructor_payments(info.context.store, instructor_id)
        return [InstructorPayment.from_model(p) for p in payments]
