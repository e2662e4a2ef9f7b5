from dependency_injector import containers, providers

from directory import DirectoryController, DirectoryStateRegistry
from models import DirectoryMode
from repositories.rest import RestEmployeeRepository, RestHierarchyRepository


class Container(containers.DeclarativeContainer):
    wiring_config = containers.WiringConfiguration(packages=['blueprints'])

    config = providers.Configuration()

    employee_repo = providers.ThreadSafeSingleton(
        RestEmployeeRepository,
        base_url=config.svc.employee.url,
        token_provider=config.svc.employee.token_provider,
        timeout=config.svc.employee.timeout,
    )

    hierarchy_repo = providers.ThreadSafeSingleton(
        RestHierarchyRepository,
        base_url=config.svc.employee.url,
        token_provider=config.svc.employee.token_provider,
        timeout=config.svc.employee.timeout,
    )

    state_registry = providers.ThreadSafeSingleton(DirectoryStateRegistry)

    mode = providers.Callable(DirectoryMode, config.directory.mode)

    controller = providers.Factory(
        DirectoryController,
        employee_repo=employee_repo,
        hierarchy_repo=hierarchy_repo,
        states=state_registry,
        mode=mode,
    )
