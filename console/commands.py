from tracker.engine.store import RecordStore
from tracker.models.record import Record

from . import display
from .menu import Menu


def register_commands(menu: Menu, store: RecordStore) -> None:

    @menu.command(1, "Add Employee")
    def add() -> None:
        menu.write()
        menu.write("--- Add New Employee ---")
        emp_id = menu.prompt.read_int("Enter Employee ID: ")
        name = menu.prompt.read_text("Enter Employee Name: ")
        score = menu.prompt.read_float("Enter Performance Score: ")

        if store.add(Record.create(emp_id, name, score)):
            menu.write("Employee added successfully.")
        else:
            menu.write(display.duplicate_line(emp_id))

    @menu.command(2, "Search Employee")
    def search() -> None:
        menu.write()
        menu.write("--- Search for Employee ---")
        emp_id = menu.prompt.read_int("Enter Employee ID to search: ")

        record = store.find(emp_id)
        if record:
            menu.write(display.found_line(record))
        else:
            menu.write(display.not_found_line(emp_id))

    @menu.command(3, "Display All Employees (Sorted by ID)")
    def show_all() -> None:
        menu.write()
        menu.write("--- All Employees (Sorted by ID) ---")
        for line in display.listing(store.all()):
            menu.write(line)

    @menu.command(4, "Exit")
    def exit_menu() -> None:
        menu.write("Exiting... Cleaning up memory.")
        store.close()
        menu.stop()
