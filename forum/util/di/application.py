"""Application layer DI providers."""

from dishka import Scope, provide

from forum.application.usecase.maintenance import ClearStoreUseCase, GetStatusUseCase
from forum.application.usecase.post import (
    CreatePostUseCase,
    GetPostUseCase,
    ListPostsUseCase,
    RemovePostUseCase,
    RestorePostUseCase,
    UpdatePostUseCase,
    VotePostUseCase,
)
from forum.application.usecase.thread import (
    CloseThreadUseCase,
    CreateThreadUseCase,
    GetThreadUseCase,
    ListThreadPostsUseCase,
    ListThreadsUseCase,
    OpenThreadUseCase,
    RemoveThreadUseCase,
    RestoreThreadUseCase,
    UpdateThreadUseCase,
    VoteThreadUseCase,
)
from forum.domain.service import (
    MaintenanceService,
    PostService,
    ThreadService,
    TreeQueryService,
)
from forum.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Application use cases provider - concrete, no mocks needed."""

    # Maintenance use cases
    @provide(scope=Scope.REQUEST)
    def get_clear_store_use_case(
        self, maintenance_service: MaintenanceService
    ) -> ClearStoreUseCase:
        """Provide clear store use case."""
        return ClearStoreUseCase(maintenance_service=maintenance_service)

    @provide(scope=Scope.REQUEST)
    def get_status_use_case(
        self, maintenance_service: MaintenanceService
    ) -> GetStatusUseCase:
        """Provide status use case."""
        return GetStatusUseCase(maintenance_service=maintenance_service)

    # Thread use cases
    @provide(scope=Scope.REQUEST)
    def get_create_thread_use_case(
        self, thread_service: ThreadService
    ) -> CreateThreadUseCase:
        """Provide create thread use case."""
        return CreateThreadUseCase(thread_service=thread_service)

    @provide(scope=Scope.REQUEST)
    def get_get_thread_use_case(
        self, thread_service: ThreadService
    ) -> GetThreadUseCase:
        """Provide get thread use case."""
        return GetThreadUseCase(thread_service=thread_service)

    @provide(scope=Scope.REQUEST)
    def get_list_threads_use_case(
        self, thread_service: ThreadService
    ) -> ListThreadsUseCase:
        """Provide list threads use case."""
        return ListThreadsUseCase(thread_service=thread_service)

    @provide(scope=Scope.REQUEST)
    def get_list_thread_posts_use_case(
        self, tree_query_service: TreeQueryService
    ) -> ListThreadPostsUseCase:
        """Provide list thread posts use case."""
        return ListThreadPostsUseCase(tree_query_service=tree_query_service)

    @provide(scope=Scope.REQUEST)
    def get_update_thread_use_case(
        self, thread_service: ThreadService
    ) -> UpdateThreadUseCase:
        """Provide update thread use case."""
        return UpdateThreadUseCase(thread_service=thread_service)

    @provide(scope=Scope.REQUEST)
    def get_close_thread_use_case(
        self, thread_service: ThreadService
    ) -> CloseThreadUseCase:
        """Provide close thread use case."""
        return CloseThreadUseCase(thread_service=thread_service)

    @provide(scope=Scope.REQUEST)
    def get_open_thread_use_case(
        self, thread_service: ThreadService
    ) -> OpenThreadUseCase:
        """Provide open thread use case."""
        return OpenThreadUseCase(thread_service=thread_service)

    @provide(scope=Scope.REQUEST)
    def get_vote_thread_use_case(
        self, thread_service: ThreadService
    ) -> VoteThreadUseCase:
        """Provide vote thread use case."""
        return VoteThreadUseCase(thread_service=thread_service)

    @provide(scope=Scope.REQUEST)
    def get_remove_thread_use_case(
        self, thread_service: ThreadService
    ) -> RemoveThreadUseCase:
        """Provide remove thread use case."""
        return RemoveThreadUseCase(thread_service=thread_service)

    @provide(scope=Scope.REQUEST)
    def get_restore_thread_use_case(
        self, thread_service: ThreadService
    ) -> RestoreThreadUseCase:
        """Provide restore thread use case."""
        return RestoreThreadUseCase(thread_service=thread_service)

    # Post use cases
    @provide(scope=Scope.REQUEST)
    def get_create_post_use_case(self, post_service: PostService) -> CreatePostUseCase:
        """Provide create post use case."""
        return CreatePostUseCase(post_service=post_service)

    @provide(scope=Scope.REQUEST)
    def get_get_post_use_case(self, post_service: PostService) -> GetPostUseCase:
        """Provide get post use case."""
        return GetPostUseCase(post_service=post_service)

    @provide(scope=Scope.REQUEST)
    def get_list_posts_use_case(
        self, post_service: PostService, tree_query_service: TreeQueryService
    ) -> ListPostsUseCase:
        """Provide list posts use case."""
        return ListPostsUseCase(
            post_service=post_service, tree_query_service=tree_query_service
        )

    @provide(scope=Scope.REQUEST)
    def get_update_post_use_case(self, post_service: PostService) -> UpdatePostUseCase:
        """Provide update post use case."""
        return UpdatePostUseCase(post_service=post_service)

    @provide(scope=Scope.REQUEST)
    def get_remove_post_use_case(self, post_service: PostService) -> RemovePostUseCase:
        """Provide remove post use case."""
        return RemovePostUseCase(post_service=post_service)

    @provide(scope=Scope.REQUEST)
    def get_restore_post_use_case(
        self, post_service: PostService
    ) -> RestorePostUseCase:
        """Provide restore post use case."""
        return RestorePostUseCase(post_service=post_service)

    @provide(scope=Scope.REQUEST)
    def get_vote_post_use_case(self, post_service: PostService) -> VotePostUseCase:
        """Provide vote post use case."""
        return VotePostUseCase(post_service=post_service)
