from models.student import Student
from models.call_record import CallRecord
from models.import_stats import ImportStats

__all__ = [
    "Student",
    "CallRecord",
    "ImportStats",
]
