import base64
import binascii
import json
from collections.abc import Callable
from typing import Any

import marshmallow
from flask import Blueprint, Response, current_app, request
from flask.views import MethodView
from tightwrap import wraps

from models import CurrentUser, DirectoryMode, Notification

USERINFO_HEADER = 'X-Apigateway-Api-Userinfo'


def class_route(blueprint: Blueprint, rule: str, **options: Any) -> Callable[[type[MethodView]], type[MethodView]]:  # noqa: ANN401
    def decorator(cls: type[MethodView]) -> type[MethodView]:
        blueprint.add_url_rule(rule, view_func=cls.as_view(cls.__name__), **options)
        return cls

    return decorator


def json_response(data: dict[str, Any] | list[dict[str, Any]], status: int) -> Response:
    return Response(json.dumps(data), status=status, mimetype='application/json')


def error_response(msg: str, code: int) -> Response:
    return json_response({'message': msg, 'code': code}, code)


def validation_error_response(err: marshmallow.ValidationError) -> Response:
    return json_response({'message': 'Invalid request body', 'errors': err.messages, 'code': 400}, 400)


def notification_to_dict(notification: Notification) -> dict[str, Any]:
    return {'message': notification.message, 'level': notification.level.value}


def notification_response(notification: Notification, data: dict[str, Any] | None = None, status: int = 200) -> Response:
    if not notification.ok:
        if notification.status is not None and notification.status < 300:
            # partial success: the action went through, a follow-up step did not
            status = notification.status
        else:
            # no status means the backend could not be reached at all
            return error_response(notification.message, notification.status or 502)

    body = dict(data or {})
    body['notification'] = notification_to_dict(notification)
    return json_response(body, status)


def compact(data: dict[str, Any]) -> dict[str, Any]:
    """Drop empty form values so optional fields fall back to their defaults."""
    return {key: value for key, value in data.items() if value not in ('', None)}


def decode_user_token(header: str) -> dict[str, Any] | None:
    padded = header + '=' * (-len(header) % 4)
    try:
        token = json.loads(base64.urlsafe_b64decode(padded))
    except (binascii.Error, ValueError):
        return None

    return token if isinstance(token, dict) else None


def requires_viewer(f: Callable[..., Response]) -> Callable[..., Response]:
    @wraps(f)
    def decorated_function(*args, **kwargs) -> Response:  # type: ignore[no-untyped-def] # noqa: ANN002, ANN003
        header = request.headers.get(USERINFO_HEADER)

        if header is None:
            if current_app.config.get('DIRECTORY_MODE') == DirectoryMode.SCOPED:
                return error_response('Token is missing', 401)
            return f(*args, viewer=None, **kwargs)

        token = decode_user_token(header)
        if token is None:
            return error_response('Token is malformed', 401)

        required_fields = ['sub', 'role']
        for field in required_fields:
            if field not in token:
                return error_response(f'{field} is missing in token', 401)

        return f(*args, viewer=CurrentUser(username=token['sub'], role=token['role']), **kwargs)

    return decorated_function
