from models import AdvancedSearchCriteria, Employee, EmployeeDraft, ProfilePicture


class EmployeeRepository:
    def get_all(self) -> list[Employee]:
        raise NotImplementedError  # pragma: no cover

    def get(self, employee_id: int) -> Employee | None:
        raise NotImplementedError  # pragma: no cover

    def get_for_user(self, username: str, role: str) -> list[Employee]:
        raise NotImplementedError  # pragma: no cover

    def get_roles(self) -> list[str]:
        raise NotImplementedError  # pragma: no cover

    def search_advanced(self, criteria: AdvancedSearchCriteria) -> list[Employee]:
        raise NotImplementedError  # pragma: no cover

    def create(self, draft: EmployeeDraft) -> Employee:
        raise NotImplementedError  # pragma: no cover

    def update(self, employee_id: int, draft: EmployeeDraft) -> Employee:
        raise NotImplementedError  # pragma: no cover

    def delete(self, employee_id: int) -> None:
        raise NotImplementedError  # pragma: no cover

    def upload_profile_picture(self, employee_id: int, picture: ProfilePicture) -> None:
        raise NotImplementedError  # pragma: no cover

    def delete_profile_picture(self, employee_id: int) -> None:
        raise NotImplementedError  # pragma: no cover
