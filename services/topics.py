import logging
import uuid
from datetime import datetime, timezone

from sqlalchemy.orm import selectinload
from sqlmodel import Session, select

from core.exceptions import CategoryNotFoundError, TopicNotFoundError, UserNotFoundError
from models import (
    Category,
    Reply,
    ReplyCreate,
    Topic,
    TopicCreate,
    TopicDetail,
    TopicUpdate,
    User,
    UserPublic,
)

logger = logging.getLogger(__name__)


def get_topic(session: Session, topic_id: uuid.UUID) -> Topic:
    topic = session.get(Topic, topic_id)
    if not topic:
        raise TopicNotFoundError(topic_id)
    return topic


def load_topic_detail(session: Session, topic_id: uuid.UUID) -> Topic:
    """Load a topic with its author, category, replies and reply authors attached"""
    query = (
        select(Topic)
        .where(Topic.id == topic_id)
        .options(
            selectinload(Topic.author),
            selectinload(Topic.category),
            selectinload(Topic.replies).selectinload(Reply.author),
        )
    )
    topic = session.exec(query).first()
    if not topic:
        raise TopicNotFoundError(topic_id)
    return topic


def _require_user(session: Session, user_id: uuid.UUID) -> User:
    user = session.get(User, user_id)
    if not user:
        raise UserNotFoundError(user_id)
    return user


def create_topic(session: Session, data: TopicCreate) -> Topic:
    """Create a topic, subscribing its author to it"""
    _require_user(session, data.author_id)
    if not session.get(Category, data.category_id):
        raise CategoryNotFoundError(data.category_id)

    topic = Topic.model_validate(data)
    topic.add_subscriber(topic.author_id)

    session.add(topic)
    session.commit()
    session.refresh(topic)

    logger.info(f"Topic {topic.id} created by {topic.author_id}")
    return topic


def update_topic(session: Session, topic_id: uuid.UUID, data: TopicUpdate) -> Topic:
    topic = get_topic(session, topic_id)
    for key, value in data.model_dump(exclude_unset=True).items():
        setattr(topic, key, value)
    topic.updated_at = datetime.now(timezone.utc)

    session.add(topic)
    session.commit()
    session.refresh(topic)

    logger.info(f"Topic {topic.id} updated")
    return topic


def create_reply(session: Session, topic_id: uuid.UUID, data: ReplyCreate) -> Reply:
    """Add a reply to a topic. Replying subscribes the reply author."""
    topic = get_topic(session, topic_id)
    _require_user(session, data.author_id)

    reply = Reply.model_validate(data, update={"topic_id": topic.id})
    topic.add_subscriber(reply.author_id)

    session.add_all([reply, topic])
    session.commit()
    session.refresh(reply)

    logger.info(f"Reply {reply.id} added to topic {topic.id}")
    return reply


def subscribe(session: Session, topic_id: uuid.UUID, user_id: uuid.UUID) -> Topic:
    topic = get_topic(session, topic_id)
    _require_user(session, user_id)

    topic.add_subscriber(user_id)
    session.add(topic)
    session.commit()
    session.refresh(topic)

    logger.info(f"User {user_id} subscribed to topic {topic_id}")
    return topic


def unsubscribe(session: Session, topic_id: uuid.UUID, user_id: uuid.UUID) -> Topic:
    # Unknown users are not an error here: removing an absent id is a no-op
    topic = get_topic(session, topic_id)

    topic.remove_subscriber(user_id)
    session.add(topic)
    session.commit()
    session.refresh(topic)

    logger.info(f"User {user_id} unsubscribed from topic {topic_id}")
    return topic


def build_topic_detail(topic: Topic) -> TopicDetail:
    """Serialize a loaded topic together with its participants and last activity"""
    topic_dict = topic.model_dump()
    topic_dict["last_update"] = topic.last_update()
    topic_dict["authors"] = [UserPublic.model_validate(user) for user in topic.authors()]
    return TopicDetail(**topic_dict)
