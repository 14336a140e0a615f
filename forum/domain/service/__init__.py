"""Domain services."""

from .base import Service
from .hierarchy_service import HierarchyService
from .maintenance_service import MaintenanceService
from .post_service import PostService
from .thread_service import ThreadService
from .tree_query_service import TreeQueryService, take_root_trees

__all__ = [
    "HierarchyService",
    "MaintenanceService",
    "PostService",
    "Service",
    "ThreadService",
    "TreeQueryService",
    "take_root_trees",
]
