from dataclasses import dataclass
from datetime import date


@dataclass
class Employee:
    id: int
    employee_number: str
    name: str
    surname: str
    role: str
    salary: float | None = None
    birth_date: date | None = None
    email: str | None = None
    manager_id: int | None = None
    manager_name: str | None = None
    gravatar_url: str | None = None
    profile_picture_path: str | None = None
    department_id: int | None = None
    department_name: str | None = None

    @property
    def full_name(self) -> str:
        return f'{self.name} {self.surname}'


@dataclass
class EmployeeDraft:
    name: str
    surname: str
    employee_number: str
    role: str
    salary: float | None = None
    birth_date: date | None = None
    email: str | None = None
    manager_id: int | None = None
    department_id: int | None = None

    @classmethod
    def from_employee(cls, employee: Employee) -> 'EmployeeDraft':
        return cls(
            name=employee.name,
            surname=employee.surname,
            employee_number=employee.employee_number,
            role=employee.role,
            salary=employee.salary,
            birth_date=employee.birth_date,
            email=employee.email,
            manager_id=employee.manager_id,
            department_id=employee.department_id,
        )
