from typing import Any

from models import DashboardSummary, Employee, EmployeeDraft, HierarchyNode


def employee_to_dict(employee: Employee) -> dict[str, Any]:
    return {
        'id': employee.id,
        'employeeNumber': employee.employee_number,
        'name': employee.name,
        'surname': employee.surname,
        'role': employee.role,
        'salary': employee.salary,
        'birthDate': employee.birth_date.isoformat() if employee.birth_date is not None else None,
        'email': employee.email,
        'managerId': employee.manager_id,
        'managerName': employee.manager_name,
        'gravatarUrl': employee.gravatar_url,
        'profilePicturePath': employee.profile_picture_path,
        'departmentId': employee.department_id,
        'departmentName': employee.department_name,
    }


def manager_option_to_dict(employee: Employee) -> dict[str, Any]:
    return {'id': employee.id, 'label': f'{employee.full_name} - {employee.role}'}


def draft_to_dict(draft: EmployeeDraft) -> dict[str, Any]:
    return {
        'name': draft.name,
        'surname': draft.surname,
        'birthDate': draft.birth_date.isoformat() if draft.birth_date is not None else None,
        'employeeNumber': draft.employee_number,
        'salary': draft.salary,
        'role': draft.role,
        'email': draft.email,
        'managerId': draft.manager_id,
        'departmentId': draft.department_id,
    }


def forest_to_list(forest: list[HierarchyNode]) -> list[dict[str, Any]]:
    result: list[dict[str, Any]] = []
    stack: list[tuple[HierarchyNode, list[dict[str, Any]]]] = [(node, result) for node in reversed(forest)]

    while stack:
        node, siblings = stack.pop()
        item: dict[str, Any] = {'employee': employee_to_dict(node.employee), 'level': node.level, 'children': []}
        siblings.append(item)
        stack.extend((child, item['children']) for child in reversed(node.children))

    return result


def summary_to_dict(summary: DashboardSummary) -> dict[str, Any]:
    return {
        'totalEmployees': summary.total_employees,
        'totalManagers': summary.total_managers,
        'averageSalary': summary.average_salary,
        'maxDepth': summary.max_depth,
    }
