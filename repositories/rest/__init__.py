from .employee import RestEmployeeRepository
from .hierarchy import RestHierarchyRepository
from .util import StaticTokenProvider, TokenProvider

__all__ = ['RestEmployeeRepository', 'RestHierarchyRepository', 'StaticTokenProvider', 'TokenProvider']
