from .controller import DirectoryController
from .hierarchy import CyclicManagementChainError, EmployeeNotFoundError
from .state import DirectoryState, DirectoryStateRegistry

__all__ = [
    'DirectoryController',
    'DirectoryState',
    'DirectoryStateRegistry',
    'CyclicManagementChainError',
    'EmployeeNotFoundError',
]
