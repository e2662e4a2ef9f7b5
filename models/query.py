from dataclasses import dataclass
from enum import Enum


class SortOrder(Enum):
    ASC = 'asc'
    DESC = 'desc'


@dataclass
class ViewQuery:
    search: str = ''
    role: str | None = None
    sort_by: str | None = None
    sort_order: SortOrder = SortOrder.ASC


@dataclass
class AdvancedSearchCriteria:
    search_term: str | None = None
    role: str | None = None
    min_salary: float | None = None
    max_salary: float | None = None
    has_manager: bool | None = None
