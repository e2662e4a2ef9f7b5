from dataclasses import dataclass, field

from .employee import Employee


@dataclass
class HierarchyNode:
    employee: Employee
    level: int
    children: list['HierarchyNode'] = field(default_factory=list)


@dataclass
class HierarchyStatistics:
    total_users: int = 0
    users_with_managers: int = 0
    users_without_managers: int = 0
    admin_count: int = 0
    manager_count: int = 0
    user_count: int = 0
    max_depth: int = 0
    level_counts: dict[int, int] = field(default_factory=dict)


@dataclass
class DashboardSummary:
    total_employees: int
    total_managers: int
    average_salary: int
    max_depth: int
