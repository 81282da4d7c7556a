from models.timeslot import OPERATING_DAYS, WEEKDAYS, TimeSlot, format_slots
from models.student import ClassType, Student, generate_student_id
from models.roster import Roster

__all__ = [
    "OPERATING_DAYS",
    "WEEKDAYS",
    "TimeSlot",
    "format_slots",
    "ClassType",
    "Student",
    "generate_student_id",
    "Roster",
]
