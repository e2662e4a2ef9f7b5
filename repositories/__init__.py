from .employee import EmployeeRepository
from .errors import BackendError, MalformedResponseError
from .hierarchy import HierarchyRepository

__all__ = ['EmployeeRepository', 'HierarchyRepository', 'BackendError', 'MalformedResponseError']
