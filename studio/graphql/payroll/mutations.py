"""
GraphQL mutations for instructor payroll
"""
import logging

import strawberry
from strawberry.types import Info

from studio.core.errors import StudioError
from studio.crud.payrollCrud import delete_payment, record_payment
from .types import InstructorPayment, PayrollPaymentResponse, RecordPaymentInput

logger = logging.getLogger(__name__)


@strawberry.type
class PayrollMutations:
    @strawberry.mutation
    async def record_instructor_payment(self, info: Info, input: RecordPaymentInput) -> PayrollPaymentResponse:
        """Pay the selected sessions and link them to the payment"""
        store = info.context.store

        try:
            payment = record_payment(
                store,
                input.instructor_id,
                amount=input.amount,
                period_start=input.period_start,
                period_end=input.period_end,
                session_ids=input.session_ids,
                notes=input.notes,
                paid_at=input.paid_at,
            )
            return PayrollPaymentResponse(
                success=True,
                payment=InstructorPayment.from_model(payment),
                message=f"Pago de ${payment.amount:g} registrado"
            )
        except StudioError as e:
            logger.info("Payroll payment rejected for %s: %s", input.instructor_id, e)
            return PayrollPaymentResponse(success=False, payment=None, message=str(e), error_code=e.code)

    @strawberry.mutation
    async def delete_instructor_payment(self, info: Info, payment_id: str) -> PayrollPaymentResponse:
        """Undo a payment; its sessions go back to pending"""
        store = info.context.store

        try:
            payment = delete_payment(store, payment_id)
            return PayrollPaymentResponse(
                success=True,
                payment=InstructorPayment.from_model(payment),
                message="Pago eliminado"
            )
        except StudioError as e:
            return PayrollPaymentResponse(success=False, payment=None, message=str(e), error_code=e.code)
