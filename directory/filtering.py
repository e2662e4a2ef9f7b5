from collections.abc import Callable, Iterable, Sequence
from typing import Any

from models import Employee, SortOrder, ViewQuery

MANAGER_ROLE_MARKERS = ('manager', 'lead')

# Wire name of a sortable column -> accessor
SORT_FIELDS: dict[str, Callable[[Employee], Any]] = {
    'name': lambda e: e.name,
    'surname': lambda e: e.surname,
    'role': lambda e: e.role,
    'employeeNumber': lambda e: e.employee_number,
    'email': lambda e: e.email,
    'managerName': lambda e: e.manager_name,
    'salary': lambda e: e.salary,
    'birthDate': lambda e: e.birth_date,
}


def is_manager_like(role: str | None) -> bool:
    if not role:
        return False
    lowered = role.lower()
    return any(marker in lowered for marker in MANAGER_ROLE_MARKERS)


def matches_search(employee: Employee, term: str, *, include_email: bool = False) -> bool:
    needle = term.strip().lower()
    if not needle:
        return True

    fields = [employee.name, employee.surname, employee.role, employee.employee_number]
    if include_email:
        fields.append(employee.email)

    return any(value is not None and needle in value.lower() for value in fields)


def search_employees(employees: Iterable[Employee], term: str, *, include_email: bool = False) -> list[Employee]:
    if not term.strip():
        return list(employees)

    return [e for e in employees if matches_search(e, term, include_email=include_email)]


def filter_by_role(employees: Iterable[Employee], role: str | None) -> list[Employee]:
    if not role:
        return list(employees)

    return [e for e in employees if e.role == role]


def sort_employees(employees: Iterable[Employee], sort_by: str | None, order: SortOrder = SortOrder.ASC) -> list[Employee]:
    """Stable sort on a wire column name.

    Strings compare case-insensitively. Employees without a value for the
    column always come last, whatever the direction.
    """
    items = list(employees)
    if not sort_by:
        return items

    try:
        accessor = SORT_FIELDS[sort_by]
    except KeyError:
        raise ValueError(f'Unsupported sort field: {sort_by}') from None

    def key(employee: Employee) -> Any:  # noqa: ANN401
        value = accessor(employee)
        return value.lower() if isinstance(value, str) else value

    present = [e for e in items if accessor(e) is not None]
    missing = [e for e in items if accessor(e) is None]

    return sorted(present, key=key, reverse=order == SortOrder.DESC) + missing


def apply_view(employees: Sequence[Employee], query: ViewQuery, *, include_email: bool = False) -> list[Employee]:
    filtered = search_employees(employees, query.search, include_email=include_email)
    filtered = filter_by_role(filtered, query.role)
    return sort_employees(filtered, query.sort_by, query.sort_order)
