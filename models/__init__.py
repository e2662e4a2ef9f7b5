from .employee import Employee, EmployeeDraft
from .hierarchy import DashboardSummary, HierarchyNode, HierarchyStatistics
from .mode import DirectoryMode
from .notification import Notification, NotificationLevel
from .picture import ProfilePicture
from .query import AdvancedSearchCriteria, SortOrder, ViewQuery
from .user import ROLE_ADMIN, CurrentUser

__all__ = [
    'Employee',
    'EmployeeDraft',
    'HierarchyNode',
    'HierarchyStatistics',
    'DashboardSummary',
    'DirectoryMode',
    'Notification',
    'NotificationLevel',
    'ProfilePicture',
    'AdvancedSearchCriteria',
    'SortOrder',
    'ViewQuery',
    'CurrentUser',
    'ROLE_ADMIN',
]
