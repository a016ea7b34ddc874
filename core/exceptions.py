"""
Application exceptions.
"""


class ForumException(Exception):
    """Base exception for all forum exceptions."""
    pass


class NotFoundError(ForumException):
    """Raised when a requested record does not exist."""

    entity = "Record"

    def __init__(self, record_id):
        self.record_id = record_id
        super().__init__(f"{self.entity} {record_id} not found")


class TopicNotFoundError(NotFoundError):
    entity = "Topic"


class UserNotFoundError(NotFoundError):
    entity = "User"


class CategoryNotFoundError(NotFoundError):
    entity = "Category"


class AuthorNotLoadedError(ForumException):
    """Raised when a topic's author must be loaded before computing its authors."""

    def __init__(self, topic_id):
        self.topic_id = topic_id
        super().__init__(f"Author of topic {topic_id} is not loaded")
