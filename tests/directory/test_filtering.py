from faker import Faker
from unittest_parametrize import ParametrizedTestCase, parametrize

from directory.filtering import apply_view, filter_by_role, is_manager_like, search_employees, sort_employees
from models import SortOrder, ViewQuery
from tests.factories import gen_employee


class TestFiltering(ParametrizedTestCase):
    def setUp(self) -> None:
        self.faker = Faker()
        self.ann = gen_employee(
            self.faker, 1, name='Ann', surname='Lee', role='CEO', employee_number='EMP001', email='ann@corp.io'
        )
        self.bob = gen_employee(
            self.faker, 2, 1, name='bob', surname='Stone', role='Developer', employee_number='EMP002', email='b@x.io'
        )
        self.cid = gen_employee(
            self.faker, 3, 1, name='Cid', surname='Moss', role='Developer', employee_number='EMP003', email='c@x.io'
        )
        self.employees = [self.ann, self.bob, self.cid]

    @parametrize(
        'term,expected_ids',
        [
            ('', [1, 2, 3]),
            ('   ', [1, 2, 3]),
            ('BOB', [2]),
            ('  lee ', [1]),
            ('develop', [2, 3]),
            ('emp003', [3]),
            ('nobody', []),
        ],
    )
    def test_search(self, term: str, expected_ids: list[int]) -> None:
        result = search_employees(self.employees, term)
        self.assertEqual([e.id for e in result], expected_ids)

    @parametrize(
        'include_email,expected_ids',
        [
            (False, []),
            (True, [1]),
        ],
    )
    def test_search_email(self, include_email: bool, expected_ids: list[int]) -> None:  # noqa: FBT001
        result = search_employees(self.employees, 'corp.io', include_email=include_email)
        self.assertEqual([e.id for e in result], expected_ids)

    def test_search_empty_keeps_order(self) -> None:
        reversed_employees = list(reversed(self.employees))
        self.assertEqual(search_employees(reversed_employees, ''), reversed_employees)

    @parametrize(
        'role,expected_ids',
        [
            (None, [1, 2, 3]),
            ('', [1, 2, 3]),
            ('Developer', [2, 3]),
            ('developer', []),
            ('CEO', [1]),
        ],
    )
    def test_filter_by_role(self, role: str | None, expected_ids: list[int]) -> None:
        result = filter_by_role(self.employees, role)
        self.assertEqual([e.id for e in result], expected_ids)

    @parametrize(
        'order,expected',
        [
            (SortOrder.ASC, [30000.0, 50000.0, 80000.0]),
            (SortOrder.DESC, [80000.0, 50000.0, 30000.0]),
        ],
    )
    def test_sort_salary(self, order: SortOrder, expected: list[float]) -> None:
        employees = [gen_employee(self.faker, i, salary=s) for i, s in enumerate([50000.0, 30000.0, 80000.0], 1)]

        result = sort_employees(employees, 'salary', order)

        self.assertEqual([e.salary for e in result], expected)

    def test_sort_case_insensitive(self) -> None:
        result = sort_employees(self.employees, 'name')
        self.assertEqual([e.name for e in result], ['Ann', 'bob', 'Cid'])

    @parametrize(
        'order',
        [
            (SortOrder.ASC,),
            (SortOrder.DESC,),
        ],
    )
    def test_sort_stable(self, order: SortOrder) -> None:
        result = sort_employees([self.bob, self.cid, self.ann], 'role', order)

        developers = [e.id for e in result if e.role == 'Developer']
        self.assertEqual(developers, [2, 3])

    @parametrize(
        'order',
        [
            (SortOrder.ASC,),
            (SortOrder.DESC,),
        ],
    )
    def test_sort_missing_last(self, order: SortOrder) -> None:
        no_salary = gen_employee(self.faker, 9, salary=None)
        employees = [no_salary, *(gen_employee(self.faker, i, salary=1000.0 * i) for i in (1, 2))]

        result = sort_employees(employees, 'salary', order)

        self.assertIs(result[-1], no_salary)

    def test_sort_unknown_field(self) -> None:
        with self.assertRaises(ValueError):
            sort_employees(self.employees, 'shoeSize')

    def test_sort_does_not_mutate(self) -> None:
        employees = [self.cid, self.ann, self.bob]
        sort_employees(employees, 'name', SortOrder.DESC)
        self.assertEqual([e.id for e in employees], [3, 1, 2])

    def test_apply_view_composes(self) -> None:
        query = ViewQuery(search='o', role='Developer', sort_by='surname', sort_order=SortOrder.ASC)

        result = apply_view(self.employees, query)

        # 'o' matches bob, Moss and Stone; Ann Lee is not a Developer
        self.assertEqual([e.id for e in result], [3, 2])

    @parametrize(
        'role,expected',
        [
            ('Engineering Manager', True),
            ('Team Lead', True),
            ('Developer', False),
            (None, False),
            ('', False),
        ],
    )
    def test_is_manager_like(self, role: str | None, expected: bool) -> None:  # noqa: FBT001
        self.assertEqual(is_manager_like(role), expected)
