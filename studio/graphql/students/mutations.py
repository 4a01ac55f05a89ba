"""
GraphQL mutations for Students
"""
import logging

import strawberry
from strawberry.types import Info

from studio.core.errors import StudioError
from studio.crud.plansCrud import delete_student_plan, process_payment, update_student_plan
from studio.crud.studentsCrud import (
    add_history_entry,
    add_student,
    delete_history_entry,
    delete_student,
    get_student,
    update_student,
)
from .types import (
    AddHistoryInput,
    CreateStudentInput,
    Payment,
    PaymentResponse,
    Plan,
    ProcessPaymentInput,
    Student,
    StudentResponse,
    UpdatePlanInput,
    UpdateStudentMedicalInput,
    UpdateStudentProfileInput,
)

logger = logging.getLogger(__name__)


@strawberry.type
class StudentMutations:
    """Student mutations"""

    @strawberry.mutation
    async def create_student(self, info: Info, input: CreateStudentInput) -> StudentResponse:
        store = info.context.store

        try:
            student = add_student(
                store,
                name=input.name,
                phone=input.phone,
                email=input.email,
                status=input.status,
                emergency_contact=input.emergency_contact,
                medical_info=input.medical_info,
                allergies=input.allergies,
                injuries=input.injuries,
                conditions=input.conditions,
                sports_info=input.sports_info,
            )
            return StudentResponse(success=True, student=Student.from_model(student), message="Alumna registrada")
        except StudioError as e:
            return StudentResponse(success=False, student=None, message=str(e), error_code=e.code)

    @strawberry.mutation
    async def update_student_profile(self, info: Info, input: UpdateStudentProfileInput) -> StudentResponse:
        store = info.context.store

        try:
            student = update_student(store, input.student_id, input.to_update())
            return StudentResponse(success=True, student=Student.from_model(student), message="Perfil actualizado")
        except StudioError as e:
            return StudentResponse(success=False, student=None, message=str(e), error_code=e.code)

    @strawberry.mutation
    async def update_student_medical(self, info: Info, input: UpdateStudentMedicalInput) -> StudentResponse:
        store = info.context.store

        try:
            student = update_student(store, input.student_id, input.to_update())
            return StudentResponse(
                success=True,
                student=Student.from_model(student),
                message="Ficha médica actualizada"
            )
        except StudioError as e:
            return StudentResponse(success=False, student=None, message=str(e), error_code=e.code)

    @strawberry.mutation
    async def delete_student(self, info: Info, student_id: str) -> StudentResponse:
        store = info.context.store

        try:
            delete_student(store, student_id)
            return StudentResponse(success=True, student=None, message="Alumna eliminada")
        except StudioError as e:
            return StudentResponse(success=False, student=None, message=str(e), error_code=e.code)

    @strawberry.mutation
    async def process_payment(self, info: Info, input: ProcessPaymentInput) -> PaymentResponse:
        """Record a payment and grant the plan it buys"""
        store = info.context.store

        try:
            payment, plan = process_payment(
                store,
                input.student_id,
                amount=input.amount,
                method=input.method,
                plan_name=input.plan_name,
                credits=input.credits,
                discipline=input.discipline,
                paid_at=input.paid_at,
                valid_months=input.valid_months,
            )
            return PaymentResponse(
                success=True,
                payment=Payment.from_model(payment),
                plan=Plan.from_model(plan),
                message=f"Pago registrado: {plan.name}"
            )
        except StudioError as e:
            logger.info("Payment rejected for student %s: %s", input.student_id, e.code)
            return PaymentResponse(success=False, payment=None, plan=None, message=str(e), error_code=e.code)

    @strawberry.mutation
    async def update_plan(self, info: Info, input: UpdatePlanInput) -> PaymentResponse:
        """Manual credit or expiry adjustment"""
        store = info.context.store

        try:
            plan = update_student_plan(store, input.student_id, input.plan_id, input.to_update())
            return PaymentResponse(success=True, payment=None, plan=Plan.from_model(plan), message="Plan actualizado")
        except StudioError as e:
            return PaymentResponse(success=False, payment=None, plan=None, message=str(e), error_code=e.code)

    @strawberry.mutation
    async def delete_plan(self, info: Info, student_id: str, plan_id: str) -> StudentResponse:
        store = info.context.store

        try:
            delete_student_plan(store, student_id, plan_id)
            return StudentResponse(
                success=True,
                student=Student.from_model(get_student(store, student_id)),
                message="Plan eliminado"
            )
        except StudioError as e:
            return StudentResponse(success=False, student=None, message=str(e), error_code=e.code)

    @strawberry.mutation
    async def add_history_entry(self, info: Info, input: AddHistoryInput) -> StudentResponse:
        store = info.context.store

        try:
            add_history_entry(
                store,
                input.student_id,
                activity=input.activity,
                cost=input.cost,
                notes=input.notes,
                entry_date=input.date,
            )
            return StudentResponse(
                success=True,
                student=Student.from_model(get_student(store, input.student_id)),
                message="Actividad registrada"
            )
        except StudioError as e:
            return StudentResponse(success=False, student=None, message=str(e), error_code=e.code)

    @strawberry.mutation
    async def delete_history_entry(self, info: Info, student_id: str, entry_id: str) -> StudentResponse:
        store = info.context.store

        try:
            delete_history_entry(store, student_id, entry_id)
            return StudentResponse(
                success=True,
                student=Student.from_model(get_student(store, student_id)),
                message="Actividad eliminada"
            )
        except StudioError as e:
            return StudentResponse(success=False, student=None, message=str(e), error_code=e.code)
