from faker import Faker
from unittest_parametrize import ParametrizedTestCase, parametrize

from directory import CyclicManagementChainError, EmployeeNotFoundError
from directory.hierarchy import all_subordinates, build_forest, compute_statistics, hierarchy_path, walk
from tests.factories import gen_employee


class TestHierarchy(ParametrizedTestCase):
    def setUp(self) -> None:
        self.faker = Faker()

    def test_chain_levels(self) -> None:
        a = gen_employee(self.faker, 1)
        b = gen_employee(self.faker, 2, 1)
        c = gen_employee(self.faker, 3, 2)

        forest = build_forest([c, a, b])

        self.assertEqual(len(forest), 1)
        root = forest[0]
        self.assertEqual((root.employee, root.level), (a, 0))
        self.assertEqual((root.children[0].employee, root.children[0].level), (b, 1))
        self.assertEqual((root.children[0].children[0].employee, root.children[0].children[0].level), (c, 2))
        self.assertEqual(root.children[0].children[0].children, [])

    def test_roots_and_children_keep_input_order(self) -> None:
        employees = [
            gen_employee(self.faker, 5),
            gen_employee(self.faker, 1),
            gen_employee(self.faker, 7, 1),
            gen_employee(self.faker, 3, 1),
        ]

        forest = build_forest(employees)

        self.assertEqual([n.employee.id for n in forest], [5, 1])
        self.assertEqual([n.employee.id for n in forest[1].children], [7, 3])

    def test_orphans_excluded(self) -> None:
        employees = [
            gen_employee(self.faker, 1),
            gen_employee(self.faker, 2, 99),
            gen_employee(self.faker, 3, 2),
        ]

        forest = build_forest(employees)

        self.assertEqual([n.employee.id for n in walk(forest)], [1])

    def test_empty(self) -> None:
        self.assertEqual(build_forest([]), [])

    @parametrize(
        'managers',
        [
            ({1: 1},),
            ({1: 2, 2: 1},),
            ({1: 2, 2: 3, 3: 1},),
        ],
    )
    def test_cycle_raises(self, managers: dict[int, int]) -> None:
        employees = [gen_employee(self.faker, 10)]
        employees.extend(gen_employee(self.faker, i, manager_id) for i, manager_id in managers.items())

        with self.assertRaises(CyclicManagementChainError) as ctx:
            build_forest(employees)

        self.assertEqual(set(ctx.exception.employee_ids), set(managers))

    def test_cycle_message(self) -> None:
        employees = [gen_employee(self.faker, 1, 2), gen_employee(self.faker, 2, 1)]

        with self.assertRaises(CyclicManagementChainError) as ctx:
            build_forest(employees)

        self.assertEqual(str(ctx.exception), 'Cyclic management chain: 1 -> 2 -> 1')

    def test_deep_chain(self) -> None:
        employees = [gen_employee(self.faker, 0)]
        employees.extend(gen_employee(self.faker, i, i - 1) for i in range(1, 3000))

        forest = build_forest(employees)

        nodes = list(walk(forest))
        self.assertEqual(len(nodes), 3000)
        self.assertEqual(nodes[-1].level, 2999)

    def test_walk_order(self) -> None:
        employees = [
            gen_employee(self.faker, 1),
            gen_employee(self.faker, 2, 1),
            gen_employee(self.faker, 3, 2),
            gen_employee(self.faker, 4, 1),
            gen_employee(self.faker, 5),
        ]

        self.assertEqual([n.employee.id for n in walk(build_forest(employees))], [1, 2, 3, 4, 5])

    def test_hierarchy_path(self) -> None:
        employees = [gen_employee(self.faker, 1), gen_employee(self.faker, 2, 1), gen_employee(self.faker, 3, 2)]

        self.assertEqual([e.id for e in hierarchy_path(employees, 3)], [1, 2, 3])
        self.assertEqual([e.id for e in hierarchy_path(employees, 1)], [1])

    def test_hierarchy_path_not_found(self) -> None:
        with self.assertRaises(EmployeeNotFoundError):
            hierarchy_path([gen_employee(self.faker, 1)], 2)

    def test_hierarchy_path_cycle(self) -> None:
        employees = [gen_employee(self.faker, 1, 2), gen_employee(self.faker, 2, 1)]

        with self.assertRaises(CyclicManagementChainError):
            hierarchy_path(employees, 1)

    def test_all_subordinates(self) -> None:
        employees = [
            gen_employee(self.faker, 1),
            gen_employee(self.faker, 2, 1),
            gen_employee(self.faker, 3, 2),
            gen_employee(self.faker, 4, 1),
            gen_employee(self.faker, 5),
        ]

        self.assertEqual([e.id for e in all_subordinates(employees, 1)], [2, 3, 4])
        self.assertEqual(all_subordinates(employees, 5), [])

    def test_all_subordinates_not_found(self) -> None:
        with self.assertRaises(EmployeeNotFoundError):
            all_subordinates([], 1)

    def test_all_subordinates_cycle(self) -> None:
        employees = [gen_employee(self.faker, 1, 2), gen_employee(self.faker, 2, 1)]

        with self.assertRaises(CyclicManagementChainError):
            all_subordinates(employees, 1)

    def test_compute_statistics(self) -> None:
        employees = [
            gen_employee(self.faker, 1, role='CEO'),
            gen_employee(self.faker, 2, 1, role='Engineering Manager'),
            gen_employee(self.faker, 3, 2, role='Developer'),
            gen_employee(self.faker, 4, 2, role='Developer'),
        ]

        stats = compute_statistics(employees)

        self.assertEqual(stats.total_users, 4)
        self.assertEqual(stats.users_with_managers, 3)
        self.assertEqual(stats.users_without_managers, 1)
        self.assertEqual(stats.admin_count, 1)
        self.assertEqual(stats.manager_count, 1)
        self.assertEqual(stats.user_count, 2)
        self.assertEqual(stats.max_depth, 2)
        self.assertEqual(stats.level_counts, {0: 1, 1: 1, 2: 2})

    def test_compute_statistics_empty(self) -> None:
        stats = compute_statistics([])

        self.assertEqual(stats.total_users, 0)
        self.assertEqual(stats.max_depth, 0)
        self.assertEqual(stats.level_counts, {})
