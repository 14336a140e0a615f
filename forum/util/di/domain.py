"""Domain layer DI providers."""

from dishka import Scope, provide

from forum.config import PathSettings
from forum.domain.repository import PostRepository, ThreadRepository
from forum.domain.service import (
    HierarchyService,
    MaintenanceService,
    PostService,
    ThreadService,
    TreeQueryService,
)
from forum.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Domain services provider.

    Services are REQUEST-scoped so they share the repositories (and the
    database session) of the request that uses them.
    """

    scope = Scope.REQUEST

    @provide
    def get_hierarchy_service(
        self, post_repository: PostRepository, path_settings: PathSettings
    ) -> HierarchyService:
        """Provide hierarchy service with the configured segment width."""
        return HierarchyService(
            post_repository=post_repository,
            segment_width=path_settings.segment_width,
        )

    @provide
    def get_tree_query_service(
        self, post_repository: PostRepository
    ) -> TreeQueryService:
        """Provide tree query service."""
        return TreeQueryService(post_repository=post_repository)

    @provide
    def get_post_service(
        self,
        post_repository: PostRepository,
        thread_repository: ThreadRepository,
        hierarchy_service: HierarchyService,
    ) -> PostService:
        """Provide post domain service."""
        return PostService(
            post_repository=post_repository,
            thread_repository=thread_repository,
            hierarchy_service=hierarchy_service,
        )

    @provide
    def get_thread_service(
        self,
        thread_repository: ThreadRepository,
        post_repository: PostRepository,
    ) -> ThreadService:
        """Provide thread domain service."""
        return ThreadService(
            thread_repository=thread_repository,
            post_repository=post_repository,
        )

    @provide
    def get_maintenance_service(
        self,
        thread_repository: ThreadRepository,
        post_repository: PostRepository,
    ) -> MaintenanceService:
        """Provide maintenance service."""
        return MaintenanceService(
            thread_repository=thread_repository,
            post_repository=post_repository,
        )
