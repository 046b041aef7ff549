"""Application layer DI providers."""

from dishka import Scope, provide

from agora.application.usecase.analytics import (
    TopSubredditsUseCase,
    TrendingPostsUseCase,
    UserEngagementUseCase,
)
from agora.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    EditCommentUseCase,
    ListCommentsUseCase,
)
from agora.application.usecase.moderation import (
    BanUserUseCase,
    FlagUseCase,
    MuteUserUseCase,
    RemoveCommentUseCase,
)
from agora.application.usecase.notification import (
    ListNotificationsUseCase,
    MarkReadUseCase,
)
from agora.application.usecase.post import CreatePostUseCase, ListPostsUseCase
from agora.application.usecase.search import SearchUseCase
from agora.application.usecase.subreddit import (
    CheckNameUseCase,
    CreateSubredditUseCase,
    GetSubredditUseCase,
    SubscribeUseCase,
    UnsubscribeUseCase,
)
from agora.application.usecase.user import GetUserActivityUseCase, GetUserUseCase
from agora.application.usecase.vote import CastVoteUseCase
from agora.domain.service import (
    AnalyticsService,
    CommentService,
    ModerationService,
    NotificationService,
    PostService,
    SearchService,
    SubredditService,
    UserService,
    VoteService,
)
from agora.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Vote use cases
    @provide(scope=Scope.REQUEST)
    def get_cast_vote_use_case(self, vote_service: VoteService) -> CastVoteUseCase:
        """Provide cast vote use case."""
        return CastVoteUseCase(vote_service)

    # Subreddit use cases
    @provide(scope=Scope.REQUEST)
    def get_create_subreddit_use_case(
        self, subreddit_service: SubredditService
    ) -> CreateSubredditUseCase:
        """Provide create subreddit use case."""
        return CreateSubredditUseCase(subreddit_service)

    @provide(scope=Scope.REQUEST)
    def get_check_name_use_case(
        self, subreddit_service: SubredditService
    ) -> CheckNameUseCase:
        """Provide check name use case."""
        return CheckNameUseCase(subreddit_service)

    @provide(scope=Scope.REQUEST)
    def get_get_subreddit_use_case(
        self, subreddit_service: SubredditService
    ) -> GetSubredditUseCase:
        """Provide get subreddit use case."""
        return GetSubredditUseCase(subreddit_service)

    @provide(scope=Scope.REQUEST)
    def get_subscribe_use_case(
        self, subreddit_service: SubredditService
    ) -> SubscribeUseCase:
        """Provide subscribe use case."""
        return SubscribeUseCase(subreddit_service)

    @provide(scope=Scope.REQUEST)
    def get_unsubscribe_use_case(
        self, subreddit_service: SubredditService
    ) -> UnsubscribeUseCase:
        """Provide unsubscribe use case."""
        return UnsubscribeUseCase(subreddit_service)

    # Post use cases
    @provide(scope=Scope.REQUEST)
    def get_create_post_use_case(self, post_service: PostService) -> CreatePostUseCase:
        """Provide create post use case."""
        return CreatePostUseCase(post_service)

    @provide(scope=Scope.REQUEST)
    def get_list_posts_use_case(self, post_service: PostService) -> ListPostsUseCase:
        """Provide list posts use case."""
        return ListPostsUseCase(post_service)

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self, comment_service: CommentService
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(comment_service)

    @provide(scope=Scope.REQUEST)
    def get_list_comments_use_case(
        self, comment_service: CommentService
    ) -> ListCommentsUseCase:
        """Provide list comments use case."""
        return ListCommentsUseCase(comment_service)

    @provide(scope=Scope.REQUEST)
    def get_edit_comment_use_case(
        self, comment_service: CommentService
    ) -> EditCommentUseCase:
        """Provide edit comment use case."""
        return EditCommentUseCase(comment_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_comment_use_case(
        self, comment_service: CommentService
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(comment_service)

    # Moderation use cases
    @provide(scope=Scope.REQUEST)
    def get_flag_use_case(self, moderation_service: ModerationService) -> FlagUseCase:
        """Provide flag use case."""
        return FlagUseCase(moderation_service)

    @provide(scope=Scope.REQUEST)
    def get_ban_user_use_case(
        self, moderation_service: ModerationService
    ) -> BanUserUseCase:
        """Provide ban user use case."""
        return BanUserUseCase(moderation_service)

    @provide(scope=Scope.REQUEST)
    def get_mute_user_use_case(
        self, moderation_service: ModerationService
    ) -> MuteUserUseCase:
        """Provide mute user use case."""
        return MuteUserUseCase(moderation_service)

    @provide(scope=Scope.REQUEST)
    def get_remove_comment_use_case(
        self, moderation_service: ModerationService
    ) -> RemoveCommentUseCase:
        """Provide remove comment use case."""
        return RemoveCommentUseCase(moderation_service)

    # Notification use cases
    @provide(scope=Scope.REQUEST)
    def get_list_notifications_use_case(
        self, notification_service: NotificationService
    ) -> ListNotificationsUseCase:
        """Provide list notifications use case."""
        return ListNotificationsUseCase(notification_service)

    @provide(scope=Scope.REQUEST)
    def get_mark_read_use_case(
        self, notification_service: NotificationService
    ) -> MarkReadUseCase:
        """Provide mark notification read use case."""
        return MarkReadUseCase(notification_service)

    # User use cases
    @provide(scope=Scope.REQUEST)
    def get_get_user_use_case(self, user_service: UserService) -> GetUserUseCase:
        """Provide get user use case."""
        return GetUserUseCase(user_service)

    @provide(scope=Scope.REQUEST)
    def get_user_activity_use_case(
        self, user_service: UserService
    ) -> GetUserActivityUseCase:
        """Provide user activity use case."""
        return GetUserActivityUseCase(user_service)

    # Search and analytics use cases
    @provide(scope=Scope.REQUEST)
    def get_search_use_case(self, search_service: SearchService) -> SearchUseCase:
        """Provide search use case."""
        return SearchUseCase(search_service)

    @provide(scope=Scope.REQUEST)
    def get_top_subreddits_use_case(
        self, analytics_service: AnalyticsService
    ) -> TopSubredditsUseCase:
        """Provide top subreddits use case."""
        return TopSubredditsUseCase(analytics_service)

    @provide(scope=Scope.REQUEST)
    def get_trending_posts_use_case(
        self, analytics_service: AnalyticsService
    ) -> TrendingPostsUseCase:
        """Provide trending posts use case."""
        return TrendingPostsUseCase(analytics_service)

    @provide(scope=Scope.REQUEST)
    def get_user_engagement_use_case(
        self, analytics_service: AnalyticsService
    ) -> UserEngagementUseCase:
        """Provide user engagement use case."""
        return UserEngagementUseCase(analytics_service)
