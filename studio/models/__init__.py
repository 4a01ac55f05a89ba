# Studio document models
from studio.models.baseModel import DocumentModel
from studio.models.settingsModel import RateTier, RoomRate, StudioSettings
from studio.models.peopleModel import Plan, Payment, HistoryEntry, Student, Instructor
from studio.models.classModel import Attendee, ClassSession
from studio.models.payrollModel import InstructorPayment
from studio.models.storageModel import StudioData, KeyValueEntry

__all__ = [
    "DocumentModel",
    "RateTier", "RoomRate", "StudioSettings",
    "Plan", "Payment", "HistoryEntry", "Student", "Instructor",
    "Attendee", "ClassSession",
    "InstructorPayment",
    "StudioData", "KeyValueEntry",
]
