"""Example: use the service layer directly (no Flask).

Controllers are a thin layer; the roster and attendance rules live in services.
"""

from classroom_attendance.attendance.standing import classify_standing
from classroom_attendance.container import build_container


def main():
    container = build_container()
    stats = container.attendance_service.get_attendance_stats()
    for student in container.student_service.get_all():
        counts = stats.get(student.id)
        print(student.name, counts.to_dict() if counts else "-", classify_standing(counts).value)


if __name__ == "__main__":
    main()
