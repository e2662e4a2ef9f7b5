import logging
from collections.abc import Callable, Sequence

import requests

from models import (
    AdvancedSearchCriteria,
    CurrentUser,
    DashboardSummary,
    DirectoryMode,
    Employee,
    EmployeeDraft,
    HierarchyNode,
    Notification,
    ProfilePicture,
    ViewQuery,
)
from repositories import BackendError, EmployeeRepository, HierarchyRepository

from .filtering import apply_view, is_manager_like
from .hierarchy import (
    CyclicManagementChainError,
    EmployeeNotFoundError,
    all_subordinates,
    build_forest,
    compute_statistics,
    hierarchy_path,
)
from .state import DirectoryState, DirectoryStateRegistry

logger = logging.getLogger(__name__)

LOAD_FAILED = 'Failed to load employee data'
SAVE_FAILED = 'Failed to save employee'
DELETE_FAILED = 'Failed to delete employee'
EDIT_FAILED = 'Failed to load employee data'
UPLOAD_FAILED = 'Failed to upload profile picture'
REMOVE_PICTURE_FAILED = 'Failed to remove profile picture'
SEARCH_FAILED = 'Search failed'
TREE_FAILED = 'Failed to load organization chart'
STATISTICS_FAILED = 'Failed to load statistics'
CONFIRMATION_REQUIRED = 'Deletion must be confirmed before the employee is removed.'
IDENTITY_REQUIRED = 'A user identity is required to load employees in scoped mode.'

# employee created, follow-up picture upload failed
CREATED_STATUS = 201


def failure_notification(err: requests.RequestException, fallback: str) -> Notification:
    if isinstance(err, BackendError):
        return Notification.error(err.message or fallback, err.status)

    return Notification.error(fallback)


class DirectoryController:
    """Turns console actions into backend requests and keeps the Data Store in sync.

    Actions answer with a Notification and never raise for backend failures:
    the failure is logged, converted into an error notification and the store
    is left as it was.
    """

    def __init__(
        self,
        employee_repo: EmployeeRepository,
        hierarchy_repo: HierarchyRepository,
        states: DirectoryStateRegistry,
        mode: DirectoryMode,
        viewer: CurrentUser | None = None,
    ) -> None:
        self.employee_repo = employee_repo
        self.hierarchy_repo = hierarchy_repo
        self.state: DirectoryState = states.for_viewer(viewer)
        self.mode = mode
        self.viewer = viewer

    def _fail(self, action: str, err: requests.RequestException, fallback: str) -> Notification:
        logger.warning('%s failed: %s', action, err)
        return failure_notification(err, fallback)

    # Loader

    def load(self) -> Notification:
        viewer = self.viewer

        try:
            if self.mode == DirectoryMode.SCOPED:
                if viewer is None:
                    return Notification.error(IDENTITY_REQUIRED, 401)
                employees, roles, managers = self._load_scoped(viewer)
            else:
                employees = self.employee_repo.get_all()
                roles = sorted({e.role for e in employees if e.role})
                managers = employees
        except requests.RequestException as err:
            return self._fail('Loading employees', err, LOAD_FAILED)

        self.state.replace(employees, roles, managers)
        logger.info('Loaded %d employees', len(employees))
        return Notification.info(f'Loaded {len(employees)} employees')

    def _load_scoped(self, viewer: CurrentUser) -> tuple[list[Employee], list[str], list[Employee]]:
        employees = self.employee_repo.get_for_user(viewer.username, viewer.role)

        candidates = self.employee_repo.get_all() if viewer.is_admin else employees
        managers = [e for e in candidates if is_manager_like(e.role)]

        roles = self.employee_repo.get_roles()
        return employees, roles, managers

    def ensure_loaded(self) -> Notification | None:
        if self.state.loaded:
            return None
        return self.load()

    # Derived views

    def view(self, query: ViewQuery) -> list[Employee]:
        return apply_view(self.state.employees, query, include_email=self.mode.searches_email)

    def manager_options(self) -> list[Employee]:
        return list(self.state.employees)

    def manager_candidates(self) -> list[Employee]:
        return list(self.state.managers)

    def org_chart(self) -> tuple[list[HierarchyNode], Notification | None]:
        try:
            return build_forest(self.state.employees), None
        except CyclicManagementChainError as err:
            logger.warning('Organization chart rejected: %s', err)
            return [], Notification.error(str(err), 409)

    def management_chain(self, employee_id: int) -> tuple[list[Employee], Notification | None]:
        return self._lookup(hierarchy_path, employee_id)

    def subordinates(self, employee_id: int) -> tuple[list[Employee], Notification | None]:
        return self._lookup(all_subordinates, employee_id)

    def _lookup(
        self, query: Callable[[Sequence[Employee], int], list[Employee]], employee_id: int
    ) -> tuple[list[Employee], Notification | None]:
        try:
            return query(self.state.employees, employee_id), None
        except EmployeeNotFoundError as err:
            return [], Notification.error(str(err), 404)
        except CyclicManagementChainError as err:
            logger.warning('Hierarchy lookup for employee %s rejected: %s', employee_id, err)
            return [], Notification.error(str(err), 409)

    # Form handling

    def edit(self, employee_id: int) -> tuple[EmployeeDraft | None, Notification]:
        """Prefilled form for ``employee_id``; the caller sends the id back when saving."""
        try:
            employee = self.employee_repo.get(employee_id)
        except requests.RequestException as err:
            return None, self._fail(f'Loading employee {employee_id}', err, EDIT_FAILED)

        if employee is None:
            return None, Notification.error(f'Employee {employee_id} not found', 404)

        return EmployeeDraft.from_employee(employee), Notification.info(f'Editing {employee.full_name}')

    def save(
        self, draft: EmployeeDraft, picture: ProfilePicture | None = None, edit_id: int | None = None
    ) -> Notification:
        """Create the employee, or update ``edit_id`` when one is given.

        A picture is only uploaded after a create. If that upload fails the
        employee still exists, so the error notification carries 201.
        """
        try:
            if edit_id is None:
                saved = self.employee_repo.create(draft)
            else:
                saved = self.employee_repo.update(edit_id, draft)
        except requests.RequestException as err:
            return self._fail('Saving employee', err, SAVE_FAILED)

        upload_failure = None
        if picture is not None and edit_id is None:
            upload_failure = self._upload(saved.id, picture)

        self.load()

        if edit_id is None:
            logger.info('Created employee %s', saved.id)
            message = 'Employee added successfully!'
        else:
            logger.info('Updated employee %s', saved.id)
            message = 'Employee updated successfully!'

        if upload_failure is not None:
            return Notification.error(f'{message} {upload_failure.message}', CREATED_STATUS)
        return Notification.success(message)

    def delete(self, employee_id: int, *, confirmed: bool) -> Notification:
        if not confirmed:
            return Notification.error(CONFIRMATION_REQUIRED, 400)

        try:
            self.employee_repo.delete(employee_id)
        except requests.RequestException as err:
            return self._fail(f'Deleting employee {employee_id}', err, DELETE_FAILED)

        logger.info('Deleted employee %s', employee_id)
        self.load()
        return Notification.success('Employee deleted successfully!')

    # Profile pictures

    def _upload(self, employee_id: int, picture: ProfilePicture) -> Notification | None:
        try:
            self.employee_repo.upload_profile_picture(employee_id, picture)
        except requests.RequestException as err:
            return self._fail(f'Uploading picture for employee {employee_id}', err, UPLOAD_FAILED)
        return None

    def upload_picture(self, employee_id: int, picture: ProfilePicture) -> Notification:
        failure = self._upload(employee_id, picture)
        if failure is not None:
            return failure

        self.load()
        return Notification.success('Profile picture uploaded successfully!')

    def remove_picture(self, employee_id: int) -> Notification:
        try:
            self.employee_repo.delete_profile_picture(employee_id)
        except requests.RequestException as err:
            return self._fail(f'Removing picture of employee {employee_id}', err, REMOVE_PICTURE_FAILED)

        self.load()
        return Notification.success('Profile picture removed successfully!')

    # Backend-side views

    def advanced_search(self, criteria: AdvancedSearchCriteria) -> Notification:
        try:
            results = self.employee_repo.search_advanced(criteria)
        except requests.RequestException as err:
            return self._fail('Advanced search', err, SEARCH_FAILED)

        self.state.search_results = results
        return Notification.info(f'Found {len(results)} employee(s)')

    def load_remote_tree(self) -> Notification:
        try:
            tree = self.hierarchy_repo.get_tree()
        except requests.RequestException as err:
            return self._fail('Loading organization chart', err, TREE_FAILED)

        self.state.remote_tree = tree
        return Notification.info(f'Loaded {len(tree)} top-level employee(s)')

    def load_summary(self) -> Notification:
        try:
            employees = self.employee_repo.get_all()
            if self.mode == DirectoryMode.SCOPED:
                max_depth = self.hierarchy_repo.get_statistics().max_depth
            else:
                max_depth = compute_statistics(employees).max_depth
        except requests.RequestException as err:
            return self._fail('Loading statistics', err, STATISTICS_FAILED)
        except CyclicManagementChainError as err:
            logger.warning('Statistics rejected: %s', err)
            return Notification.error(str(err), 409)

        salaries = [e.salary or 0 for e in employees]
        average = sum(salaries) / len(salaries) if salaries else 0

        self.state.summary = DashboardSummary(
            total_employees=len(employees),
            total_managers=sum(1 for e in employees if is_manager_like(e.role)),
            average_salary=round(average),
            max_depth=max_depth,
        )
        return Notification.info('Statistics updated')
