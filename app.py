import logging
import os

from flask import Flask

from blueprints import BlueprintEmployees, BlueprintHealth, BlueprintHierarchy
from containers import Container
from repositories.rest import StaticTokenProvider

LOG_FORMAT = '%(asctime)s %(levelname)s %(name)s %(message)s'


class FlaskMicroservice(Flask):
    container: Container


def create_app() -> FlaskMicroservice:
    logging.basicConfig(level=os.getenv('LOG_LEVEL', 'INFO').upper(), format=LOG_FORMAT)

    app = FlaskMicroservice(__name__)
    app.container = Container()

    app.container.config.svc.employee.url.from_env('EMPLOYEE_SVC_URL', default='http://localhost:8080')
    app.container.config.svc.employee.timeout.from_env('EMPLOYEE_SVC_TIMEOUT', as_=float, default=10.0)
    app.container.config.directory.mode.from_env('DIRECTORY_MODE', default='basic')
    app.config['DIRECTORY_MODE'] = app.container.mode()

    if 'EMPLOYEE_SVC_TOKEN' in os.environ:  # pragma: no cover
        app.container.config.svc.employee.token_provider.from_value(
            StaticTokenProvider(os.environ['EMPLOYEE_SVC_TOKEN'])
        )

    app.register_blueprint(BlueprintHealth)
    app.register_blueprint(BlueprintEmployees)
    app.register_blueprint(BlueprintHierarchy)

    return app
