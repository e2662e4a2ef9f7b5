from collections.abc import Callable

from dependency_injector.wiring import Provide
from flask import Blueprint, Response
from flask.views import MethodView

from containers import Container
from directory import DirectoryController
from models import CurrentUser, Employee, Notification

from .employees import PREFIX
from .serialization import employee_to_dict, forest_to_list
from .util import class_route, json_response, notification_response, requires_viewer

blp = Blueprint('Hierarchy', __name__)

ControllerFactory = Callable[..., DirectoryController]


def loaded_controller(
    controller_factory: ControllerFactory, viewer: CurrentUser | None
) -> tuple[DirectoryController, Notification | None]:
    controller = controller_factory(viewer=viewer)
    notification = controller.ensure_loaded()
    if notification is not None and not notification.ok:
        return controller, notification
    return controller, None


def employees_response(employees: list[Employee], failure: Notification | None) -> Response:
    if failure is not None:
        return notification_response(failure)
    return json_response({'employees': [employee_to_dict(e) for e in employees]}, 200)


@class_route(blp, f'{PREFIX}/hierarchy')
class OrgChart(MethodView):
    init_every_request = False

    @requires_viewer
    def get(
        self,
        viewer: CurrentUser | None,
        controller_factory: ControllerFactory = Provide[Container.controller.provider],
    ) -> Response:
        controller, failure = loaded_controller(controller_factory, viewer)
        if failure is not None:
            return notification_response(failure)

        forest, failure = controller.org_chart()
        if failure is not None:
            return notification_response(failure)

        return json_response({'tree': forest_to_list(forest)}, 200)


@class_route(blp, f'{PREFIX}/hierarchy/remote')
class RemoteOrgChart(MethodView):
    init_every_request = False

    @requires_viewer
    def get(
        self,
        viewer: CurrentUser | None,
        controller_factory: ControllerFactory = Provide[Container.controller.provider],
    ) -> Response:
        controller = controller_factory(viewer=viewer)
        notification = controller.load_remote_tree()
        return notification_response(notification, {'tree': forest_to_list(controller.state.remote_tree)})


@class_route(blp, f'{PREFIX}/hierarchy/path/<int:employee_id>')
class ManagementChain(MethodView):
    init_every_request = False

    @requires_viewer
    def get(
        self,
        employee_id: int,
        viewer: CurrentUser | None,
        controller_factory: ControllerFactory = Provide[Container.controller.provider],
    ) -> Response:
        controller, failure = loaded_controller(controller_factory, viewer)
        if failure is not None:
            return notification_response(failure)

        return employees_response(*controller.management_chain(employee_id))


@class_route(blp, f'{PREFIX}/hierarchy/subordinates/<int:employee_id>')
class Subordinates(MethodView):
    init_every_request = False

    @requires_viewer
    def get(
        self,
        employee_id: int,
        viewer: CurrentUser | None,
        controller_factory: ControllerFactory = Provide[Container.controller.provider],
    ) -> Response:
        controller, failure = loaded_controller(controller_factory, viewer)
        if failure is not None:
            return notification_response(failure)

        return employees_response(*controller.subordinates(employee_id))
