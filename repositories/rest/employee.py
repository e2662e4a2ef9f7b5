from typing import Any, cast

import requests

from models import AdvancedSearchCriteria, Employee, EmployeeDraft, ProfilePicture
from repositories import EmployeeRepository

from .base import RestBaseRepository
from .util import TokenProvider, from_json


def draft_to_dict(draft: EmployeeDraft) -> dict[str, Any]:
    data: dict[str, Any] = {
        'name': draft.name,
        'surname': draft.surname,
        'birthDate': draft.birth_date.isoformat() if draft.birth_date is not None else None,
        'employeeNumber': draft.employee_number,
        'salary': draft.salary,
        'role': draft.role,
        'email': draft.email,
        'managerId': draft.manager_id,
    }

    if draft.department_id is not None:
        data['departmentId'] = draft.department_id

    return data


def criteria_to_params(criteria: AdvancedSearchCriteria) -> dict[str, str]:
    params: dict[str, str] = {}
    if criteria.search_term:
        params['searchTerm'] = criteria.search_term
    if criteria.role:
        params['role'] = criteria.role
    if criteria.min_salary is not None:
        params['minSalary'] = str(criteria.min_salary)
    if criteria.max_salary is not None:
        params['maxSalary'] = str(criteria.max_salary)
    if criteria.has_manager is not None:
        params['hasManager'] = 'true' if criteria.has_manager else 'false'
    return params


class RestEmployeeRepository(EmployeeRepository, RestBaseRepository):
    def __init__(self, base_url: str, token_provider: TokenProvider | None, timeout: float | None = None) -> None:
        RestBaseRepository.__init__(self, base_url, token_provider, timeout)

    def employee_from_json(self, json: dict[str, Any]) -> Employee:
        return from_json(Employee, json)

    def employees_from_response(self, resp: requests.Response) -> list[Employee]:
        json = cast(list[dict[str, Any]], resp.json())
        return [self.employee_from_json(item) for item in json]

    def get_all(self) -> list[Employee]:
        resp = self.authenticated_get(f'{self.base_url}/api/employees')

        if resp.status_code == requests.codes.ok:
            return self.employees_from_response(resp)

        self.unexpected_error(resp)

    def get(self, employee_id: int) -> Employee | None:
        resp = self.authenticated_get(f'{self.base_url}/api/employees/{employee_id}')

        if resp.status_code == requests.codes.ok:
            return self.employee_from_json(cast(dict[str, Any], resp.json()))

        if resp.status_code == requests.codes.not_found:
            return None

        self.unexpected_error(resp)

    def get_for_user(self, username: str, role: str) -> list[Employee]:
        resp = self.authenticated_get(
            f'{self.base_url}/api/employees/my-employees',
            params={'username': username, 'role': role},
        )

        if resp.status_code == requests.codes.ok:
            return self.employees_from_response(resp)

        self.unexpected_error(resp)

    def get_roles(self) -> list[str]:
        resp = self.authenticated_get(f'{self.base_url}/api/employees/roles')

        if resp.status_code == requests.codes.ok:
            return cast(list[str], resp.json())

        self.unexpected_error(resp)

    def search_advanced(self, criteria: AdvancedSearchCriteria) -> list[Employee]:
        resp = self.authenticated_get(
            f'{self.base_url}/api/employees/search/advanced',
            params=criteria_to_params(criteria),
        )

        if resp.status_code == requests.codes.ok:
            return self.employees_from_response(resp)

        self.unexpected_error(resp)

    def create(self, draft: EmployeeDraft) -> Employee:
        resp = self.authenticated_post(f'{self.base_url}/api/employees', draft_to_dict(draft))

        if resp.status_code in (requests.codes.ok, requests.codes.created):
            return self.employee_from_json(cast(dict[str, Any], resp.json()))

        self.unexpected_error(resp)

    def update(self, employee_id: int, draft: EmployeeDraft) -> Employee:
        resp = self.authenticated_put(f'{self.base_url}/api/employees/{employee_id}', draft_to_dict(draft))

        if resp.status_code == requests.codes.ok:
            return self.employee_from_json(cast(dict[str, Any], resp.json()))

        self.unexpected_error(resp)

    def delete(self, employee_id: int) -> None:
        resp = self.authenticated_delete(f'{self.base_url}/api/employees/{employee_id}')

        if resp.status_code in (requests.codes.ok, requests.codes.no_content):
            return

        self.unexpected_error(resp)

    def upload_profile_picture(self, employee_id: int, picture: ProfilePicture) -> None:
        resp = self.authenticated_post(
            f'{self.base_url}/api/employees/{employee_id}/upload-profile-picture',
            files={'file': (picture.filename, picture.stream, picture.content_type)},
        )

        if resp.ok:
            return

        self.unexpected_error(resp)

    def delete_profile_picture(self, employee_id: int) -> None:
        resp = self.authenticated_delete(f'{self.base_url}/api/employees/{employee_id}/profile-picture')

        if resp.ok:
            return

        self.unexpected_error(resp)
