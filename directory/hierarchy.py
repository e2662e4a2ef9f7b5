"""Organization chart construction over a flat employee list.

Every traversal here is iterative and tracks visited identifiers, so a
manager graph that loops is reported instead of recursing forever.
"""

from collections import Counter, defaultdict, deque
from collections.abc import Iterable, Iterator

from models import Employee, HierarchyNode, HierarchyStatistics

EXECUTIVE_ROLE_MARKERS = ('ceo', 'chief executive officer')


class CyclicManagementChainError(Exception):
    def __init__(self, employee_ids: Iterable[int]) -> None:
        self.employee_ids = tuple(employee_ids)
        chain = ' -> '.join(str(employee_id) for employee_id in self.employee_ids)
        super().__init__(f'Cyclic management chain: {chain}')


class EmployeeNotFoundError(LookupError):
    def __init__(self, employee_id: int) -> None:
        self.employee_id = employee_id
        super().__init__(f'Employee {employee_id} not found')


def _children_by_manager(employees: Iterable[Employee]) -> dict[int, list[Employee]]:
    children: dict[int, list[Employee]] = defaultdict(list)
    for employee in employees:
        if employee.manager_id is not None:
            children[employee.manager_id].append(employee)
    return children


def _check_unreached(employees: list[Employee], reached: set[int]) -> None:
    by_id = {employee.id: employee for employee in employees}
    settled = set(reached)

    for employee in employees:
        if employee.id in settled:
            continue

        chain = [employee.id]
        on_chain = {employee.id}
        current = employee
        while True:
            manager_id = current.manager_id
            if manager_id is None or manager_id not in by_id or manager_id in settled:
                break
            if manager_id in on_chain:
                raise CyclicManagementChainError(chain[chain.index(manager_id) :] + [manager_id])
            chain.append(manager_id)
            on_chain.add(manager_id)
            current = by_id[manager_id]

        # everything on this chain hangs off a missing manager
        settled.update(on_chain)


def build_forest(employees: Iterable[Employee]) -> list[HierarchyNode]:
    """Build the management forest, breadth first from the top-level employees.

    Roots are the employees without a manager, children keep input order and
    each node's level is its depth from its root. Employees whose manager is
    not in the list (nor any of that manager's managers) are left out. A
    management chain that loops raises CyclicManagementChainError.
    """
    employees = list(employees)
    children = _children_by_manager(employees)

    roots = [HierarchyNode(employee=e, level=0) for e in employees if e.manager_id is None]
    reached = {root.employee.id for root in roots}

    queue = deque(roots)
    while queue:
        node = queue.popleft()
        for child in children.get(node.employee.id, []):
            if child.id in reached:
                raise CyclicManagementChainError([node.employee.id, child.id])
            reached.add(child.id)

            child_node = HierarchyNode(employee=child, level=node.level + 1)
            node.children.append(child_node)
            queue.append(child_node)

    _check_unreached(employees, reached)

    return roots


def walk(forest: Iterable[HierarchyNode]) -> Iterator[HierarchyNode]:
    """Yield nodes in display order (depth first, parents before children)."""
    stack = list(reversed(list(forest)))
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.children))


def hierarchy_path(employees: Iterable[Employee], employee_id: int) -> list[Employee]:
    """Management chain from the top of the hierarchy down to ``employee_id``."""
    by_id = {employee.id: employee for employee in employees}
    if employee_id not in by_id:
        raise EmployeeNotFoundError(employee_id)

    path: list[Employee] = []
    seen: list[int] = []
    current: Employee | None = by_id[employee_id]
    while current is not None:
        if current.id in seen:
            raise CyclicManagementChainError(seen[seen.index(current.id) :] + [current.id])
        seen.append(current.id)
        path.append(current)
        current = by_id.get(current.manager_id) if current.manager_id is not None else None

    path.reverse()
    return path


def all_subordinates(employees: Iterable[Employee], manager_id: int) -> list[Employee]:
    """Direct and indirect reports of ``manager_id``, each followed by its own reports."""
    employees = list(employees)
    if not any(employee.id == manager_id for employee in employees):
        raise EmployeeNotFoundError(manager_id)

    children = _children_by_manager(employees)
    result: list[Employee] = []
    seen = {manager_id}

    stack = list(reversed(children.get(manager_id, [])))
    while stack:
        employee = stack.pop()
        if employee.id in seen:
            raise CyclicManagementChainError([employee.manager_id, employee.id])
        seen.add(employee.id)
        result.append(employee)
        stack.extend(reversed(children.get(employee.id, [])))

    return result


def compute_statistics(employees: Iterable[Employee]) -> HierarchyStatistics:
    employees = list(employees)
    forest = build_forest(employees)

    total = len(employees)
    with_managers = sum(1 for e in employees if e.manager_id is not None)
    roles = [(e.role or '').lower() for e in employees]
    admin_count = sum(1 for role in roles if any(marker in role for marker in EXECUTIVE_ROLE_MARKERS))
    manager_count = sum(1 for role in roles if 'manager' in role)

    level_counts = Counter(node.level for node in walk(forest))

    return HierarchyStatistics(
        total_users=total,
        users_with_managers=with_managers,
        users_without_managers=total - with_managers,
        admin_count=admin_count,
        manager_count=manager_count,
        user_count=total - admin_count - manager_count,
        max_depth=max(level_counts, default=0),
        level_counts=dict(sorted(level_counts.items())),
    )
