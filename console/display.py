from tracker.models.record import Record

RULE = "-----------------------------------------"


def record_line(record: Record) -> str:
    return f"  [ID: {record.id:<4d} | Name: {record.name:<15s} | Score: {record.score:.2f}]"


def found_line(record: Record) -> str:
    return f"  Found: [ID: {record.id}, Name: {record.name}, Score: {record.score:.2f}]"


def not_found_line(id: int) -> str:
    return f"  Employee with ID {id} not found."


def duplicate_line(id: int) -> str:
    return f"  ERROR: Employee ID {id} already exists. Skipping insertion."


def listing(records: list[Record]) -> list[str]:
    """Lines for the sorted listing, including the closing rule."""
    if not records:
        lines = ["  No employees in the tracker."]
    else:
        lines = [record_line(record) for record in records]
    lines.append(RULE)
    return lines
