import threading
from collections.abc import Iterable

from models import CurrentUser, DashboardSummary, Employee, HierarchyNode


class DirectoryState:
    """In-memory Data Store backing the console views of one viewer.

    Loads replace the employee list wholesale. Nothing here is mutated by the
    derived views; only the controller calls the mutators.
    """

    def __init__(self) -> None:
        self._employees: tuple[Employee, ...] = ()
        self._roles: tuple[str, ...] = ()
        self._managers: tuple[Employee, ...] = ()
        self._loaded = False

        self.search_results: list[Employee] = []
        self.remote_tree: list[HierarchyNode] = []
        self.summary: DashboardSummary | None = None

    @property
    def employees(self) -> tuple[Employee, ...]:
        return self._employees

    @property
    def roles(self) -> tuple[str, ...]:
        return self._roles

    @property
    def managers(self) -> tuple[Employee, ...]:
        return self._managers

    @property
    def loaded(self) -> bool:
        return self._loaded

    def replace(self, employees: Iterable[Employee], roles: Iterable[str], managers: Iterable[Employee]) -> None:
        self._employees = tuple(employees)
        self._roles = tuple(roles)
        self._managers = tuple(managers)
        self._loaded = True


class DirectoryStateRegistry:
    """One DirectoryState per viewer, so scoped employee lists never mix.

    Requests without an identity (basic mode) share the store kept under
    ``None``.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._states: dict[tuple[str, str] | None, DirectoryState] = {}

    def for_viewer(self, viewer: CurrentUser | None) -> DirectoryState:
        key = (viewer.username, viewer.role) if viewer is not None else None
        with self._lock:
            state = self._states.get(key)
            if state is None:
                state = self._states[key] = DirectoryState()
            return state
