from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import date
from typing import Any

import marshmallow
import marshmallow_dataclass
from dependency_injector.wiring import Provide
from flask import Blueprint, Response, request
from flask.views import MethodView

from containers import Container
from directory import DirectoryController
from directory.filtering import SORT_FIELDS
from models import AdvancedSearchCriteria, CurrentUser, Employee, EmployeeDraft, ProfilePicture, SortOrder, ViewQuery

from .serialization import draft_to_dict, employee_to_dict, manager_option_to_dict, summary_to_dict
from .util import (
    class_route,
    compact,
    error_response,
    json_response,
    notification_response,
    requires_viewer,
    validation_error_response,
)

blp = Blueprint('Employees', __name__)

PREFIX = '/api/v1/directory'

JSON_VALIDATION_ERROR = 'Request body must be a JSON object.'
FILE_MISSING_ERROR = 'A file must be sent in the "file" field.'
FILE_TYPE_ERROR = 'Only image files can be used as profile pictures.'

ControllerFactory = Callable[..., DirectoryController]


def validate_past_date(value: date) -> None:
    if value >= date.today():  # noqa: DTZ011
        raise marshmallow.ValidationError('Birth date must be in the past.')


# Employee form validation class
@dataclass
class EmployeeFormBody:
    name: str = field(metadata={'validate': [marshmallow.validate.Length(min=1, max=100)]})
    surname: str = field(metadata={'validate': [marshmallow.validate.Length(min=1, max=100)]})
    employee_number: str = field(
        metadata={'data_key': 'employeeNumber', 'validate': [marshmallow.validate.Length(min=1, max=50)]}
    )
    role: str = field(metadata={'validate': [marshmallow.validate.Length(min=1, max=100)]})
    salary: float | None = field(default=None, metadata={'validate': [marshmallow.validate.Range(min=0)]})
    birth_date: date | None = field(default=None, metadata={'data_key': 'birthDate', 'validate': validate_past_date})
    email: str | None = field(
        default=None, metadata={'validate': [marshmallow.validate.Email(), marshmallow.validate.Length(max=100)]}
    )
    manager_id: int | None = field(default=None, metadata={'data_key': 'managerId'})
    department_id: int | None = field(default=None, metadata={'data_key': 'departmentId'})
    # employee being edited, as issued by the edit form; absent when creating
    edit_id: int | None = field(default=None, metadata={'data_key': 'editId'})

    class Meta:
        unknown = marshmallow.EXCLUDE

    def to_draft(self) -> EmployeeDraft:
        return EmployeeDraft(
            name=self.name,
            surname=self.surname,
            employee_number=self.employee_number,
            role=self.role,
            salary=self.salary,
            birth_date=self.birth_date,
            email=self.email,
            manager_id=self.manager_id,
            department_id=self.department_id,
        )


@dataclass
class ViewQueryArgs:
    search: str = ''
    role: str | None = None
    sort_by: str | None = field(
        default=None, metadata={'data_key': 'sortBy', 'validate': marshmallow.validate.OneOf(list(SORT_FIELDS))}
    )
    sort_order: str = field(
        default=SortOrder.ASC.value,
        metadata={'data_key': 'sortOrder', 'validate': marshmallow.validate.OneOf([o.value for o in SortOrder])},
    )

    class Meta:
        unknown = marshmallow.EXCLUDE

    def to_query(self) -> ViewQuery:
        return ViewQuery(search=self.search, role=self.role, sort_by=self.sort_by, sort_order=SortOrder(self.sort_order))


@dataclass
class AdvancedSearchArgs:
    search_term: str | None = field(default=None, metadata={'data_key': 'searchTerm'})
    role: str | None = None
    min_salary: float | None = field(default=None, metadata={'data_key': 'minSalary'})
    max_salary: float | None = field(default=None, metadata={'data_key': 'maxSalary'})
    has_manager: bool | None = field(default=None, metadata={'data_key': 'hasManager'})

    class Meta:
        unknown = marshmallow.EXCLUDE

    def to_criteria(self) -> AdvancedSearchCriteria:
        return AdvancedSearchCriteria(
            search_term=self.search_term,
            role=self.role,
            min_salary=self.min_salary,
            max_salary=self.max_salary,
            has_manager=self.has_manager,
        )


def picture_from_request() -> ProfilePicture | None:
    file = request.files.get('file')
    if file is None or not file.filename:
        return None

    return ProfilePicture(filename=file.filename, stream=file.stream, content_type=file.mimetype)


def is_image(picture: ProfilePicture) -> bool:
    return picture.content_type.startswith('image/')


def employees_payload(controller: DirectoryController, employees: list[Employee]) -> dict[str, Any]:
    return {
        'employees': [employee_to_dict(e) for e in employees],
        'total': len(controller.state.employees),
    }


@class_route(blp, f'{PREFIX}/reload')
class ReloadEmployees(MethodView):
    init_every_request = False

    @requires_viewer
    def post(
        self,
        viewer: CurrentUser | None,
        controller_factory: ControllerFactory = Provide[Container.controller.provider],
    ) -> Response:
        controller = controller_factory(viewer=viewer)
        notification = controller.load()
        return notification_response(notification, {'total': len(controller.state.employees)})


@class_route(blp, f'{PREFIX}/employees')
class EmployeeList(MethodView):
    init_every_request = False

    @requires_viewer
    def get(
        self,
        viewer: CurrentUser | None,
        controller_factory: ControllerFactory = Provide[Container.controller.provider],
    ) -> Response:
        args_schema = marshmallow_dataclass.class_schema(ViewQueryArgs)()
        try:
            args: ViewQueryArgs = args_schema.load(compact(request.args.to_dict()))
        except marshmallow.ValidationError as err:
            return validation_error_response(err)

        controller = controller_factory(viewer=viewer)
        notification = controller.ensure_loaded()
        if notification is not None and not notification.ok:
            return notification_response(notification)

        employees = controller.view(args.to_query())
        return json_response(employees_payload(controller, employees), 200)


@class_route(blp, f'{PREFIX}/employees/<int:employee_id>')
class EmployeeDetail(MethodView):
    init_every_request = False

    @requires_viewer
    def delete(
        self,
        employee_id: int,
        viewer: CurrentUser | None,
        controller_factory: ControllerFactory = Provide[Container.controller.provider],
    ) -> Response:
        confirmed = request.args.get('confirm', '').lower() in ('1', 'true', 'yes')

        controller = controller_factory(viewer=viewer)
        notification = controller.delete(employee_id, confirmed=confirmed)
        return notification_response(notification)


@class_route(blp, f'{PREFIX}/managers')
class ManagerOptions(MethodView):
    init_every_request = False

    @requires_viewer
    def get(
        self,
        viewer: CurrentUser | None,
        controller_factory: ControllerFactory = Provide[Container.controller.provider],
    ) -> Response:
        controller = controller_factory(viewer=viewer)
        notification = controller.ensure_loaded()
        if notification is not None and not notification.ok:
            return notification_response(notification)

        options = [{'id': None, 'label': 'No Manager'}]
        options.extend(manager_option_to_dict(e) for e in controller.manager_options())
        return json_response({'managers': options}, 200)


@class_route(blp, f'{PREFIX}/manager-candidates')
class ManagerCandidates(MethodView):
    init_every_request = False

    @requires_viewer
    def get(
        self,
        viewer: CurrentUser | None,
        controller_factory: ControllerFactory = Provide[Container.controller.provider],
    ) -> Response:
        controller = controller_factory(viewer=viewer)
        notification = controller.ensure_loaded()
        if notification is not None and not notification.ok:
            return notification_response(notification)

        return json_response({'employees': [employee_to_dict(e) for e in controller.manager_candidates()]}, 200)


@class_route(blp, f'{PREFIX}/roles')
class Roles(MethodView):
    init_every_request = False

    @requires_viewer
    def get(
        self,
        viewer: CurrentUser | None,
        controller_factory: ControllerFactory = Provide[Container.controller.provider],
    ) -> Response:
        controller = controller_factory(viewer=viewer)
        notification = controller.ensure_loaded()
        if notification is not None and not notification.ok:
            return notification_response(notification)

        return json_response({'roles': list(controller.state.roles)}, 200)


@class_route(blp, f'{PREFIX}/form')
class NewEmployeeForm(MethodView):
    init_every_request = False

    @requires_viewer
    def post(self, viewer: CurrentUser | None) -> Response:  # noqa: ARG002
        return json_response({'title': 'Add Employee', 'editId': None, 'form': None}, 200)


@class_route(blp, f'{PREFIX}/form/<int:employee_id>')
class EditEmployeeForm(MethodView):
    init_every_request = False

    @requires_viewer
    def post(
        self,
        employee_id: int,
        viewer: CurrentUser | None,
        controller_factory: ControllerFactory = Provide[Container.controller.provider],
    ) -> Response:
        controller = controller_factory(viewer=viewer)
        draft, notification = controller.edit(employee_id)

        data = {
            'title': 'Edit Employee',
            'editId': employee_id if draft is not None else None,
            'form': draft_to_dict(draft) if draft is not None else None,
        }
        return notification_response(notification, data)


@class_route(blp, f'{PREFIX}/save')
class SaveEmployee(MethodView):
    init_every_request = False

    @requires_viewer
    def post(
        self,
        viewer: CurrentUser | None,
        controller_factory: ControllerFactory = Provide[Container.controller.provider],
    ) -> Response:
        picture = None
        if request.mimetype == 'multipart/form-data':
            req_data: Any = request.form.to_dict()
            picture = picture_from_request()
            if picture is not None and not is_image(picture):
                return error_response(FILE_TYPE_ERROR, 400)
        else:
            req_data = request.get_json(silent=True)
            if not isinstance(req_data, dict):
                return error_response(JSON_VALIDATION_ERROR, 400)

        form_schema = marshmallow_dataclass.class_schema(EmployeeFormBody)()
        try:
            body: EmployeeFormBody = form_schema.load(compact(req_data))
        except marshmallow.ValidationError as err:
            return validation_error_response(err)

        controller = controller_factory(viewer=viewer)
        notification = controller.save(body.to_draft(), picture, body.edit_id)
        return notification_response(notification, status=201 if body.edit_id is None else 200)


@class_route(blp, f'{PREFIX}/employees/<int:employee_id>/picture')
class ProfilePictureUpload(MethodView):
    init_every_request = False

    @requires_viewer
    def post(
        self,
        employee_id: int,
        viewer: CurrentUser | None,
        controller_factory: ControllerFactory = Provide[Container.controller.provider],
    ) -> Response:
        picture = picture_from_request()
        if picture is None:
            return error_response(FILE_MISSING_ERROR, 400)
        if not is_image(picture):
            return error_response(FILE_TYPE_ERROR, 400)

        controller = controller_factory(viewer=viewer)
        notification = controller.upload_picture(employee_id, picture)
        return notification_response(notification)

    @requires_viewer
    def delete(
        self,
        employee_id: int,
        viewer: CurrentUser | None,
        controller_factory: ControllerFactory = Provide[Container.controller.provider],
    ) -> Response:
        controller = controller_factory(viewer=viewer)
        notification = controller.remove_picture(employee_id)
        return notification_response(notification)


@class_route(blp, f'{PREFIX}/search/advanced')
class AdvancedSearch(MethodView):
    init_every_request = False

    @requires_viewer
    def get(
        self,
        viewer: CurrentUser | None,
        controller_factory: ControllerFactory = Provide[Container.controller.provider],
    ) -> Response:
        args_schema = marshmallow_dataclass.class_schema(AdvancedSearchArgs)()
        try:
            args: AdvancedSearchArgs = args_schema.load(compact(request.args.to_dict()))
        except marshmallow.ValidationError as err:
            return validation_error_response(err)

        controller = controller_factory(viewer=viewer)
        notification = controller.advanced_search(args.to_criteria())
        results = [employee_to_dict(e) for e in controller.state.search_results]
        return notification_response(notification, {'employees': results})


@class_route(blp, f'{PREFIX}/statistics')
class Statistics(MethodView):
    init_every_request = False

    @requires_viewer
    def get(
        self,
        viewer: CurrentUser | None,
        controller_factory: ControllerFactory = Provide[Container.controller.provider],
    ) -> Response:
        controller = controller_factory(viewer=viewer)
        notification = controller.load_summary()

        summary = controller.state.summary
        return notification_response(notification, {'statistics': summary_to_dict(summary) if summary else None})
