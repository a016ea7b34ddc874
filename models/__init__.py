from .user import User, UserCreate, UserPublic
from .category import Category
from .reply import Reply, ReplyCreate, ReplyPublic
from .topic import Topic, TopicCreate, TopicUpdate, TopicPublic, TopicDetail, SubscriptionStatus
from .types import UUIDSet

__all__ = [
    "User", "UserCreate", "UserPublic",
    "Category",
    "Reply", "ReplyCreate", "ReplyPublic",
    "Topic", "TopicCreate", "TopicUpdate", "TopicPublic", "TopicDetail", "SubscriptionStatus",
    "UUIDSet",
]
