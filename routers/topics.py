import uuid

from fastapi import APIRouter, status

from models import (
    ReplyCreate,
    ReplyPublic,
    SubscriptionStatus,
    TopicCreate,
    TopicDetail,
    TopicPublic,
    TopicUpdate,
)
from dependencies import SessionDep
from services import topics as topic_service

router = APIRouter()


@router.post("", response_model=TopicPublic, status_code=status.HTTP_201_CREATED)
async def create_topic(topic: TopicCreate, session: SessionDep):
    """Open a new topic. The author is subscribed to it."""
    return topic_service.create_topic(session, topic)


@router.get("/{topic_id}", response_model=TopicDetail)
async def get_topic(topic_id: uuid.UUID, session: SessionDep) -> TopicDetail:
    """Get a topic with its participants and last activity time"""
    topic = topic_service.load_topic_detail(session, topic_id)
    return topic_service.build_topic_detail(topic)


@router.patch("/{topic_id}", response_model=TopicPublic)
async def update_topic(topic_id: uuid.UUID, topic: TopicUpdate, session: SessionDep):
    return topic_service.update_topic(session, topic_id, topic)


@router.post("/{topic_id}/replies", response_model=ReplyPublic, status_code=status.HTTP_201_CREATED)
async def create_reply(topic_id: uuid.UUID, reply: ReplyCreate, session: SessionDep):
    """Reply to a topic. The reply author is subscribed to it."""
    return topic_service.create_reply(session, topic_id, reply)


@router.get("/{topic_id}/subscribers/{user_id}", response_model=SubscriptionStatus)
async def get_subscription(topic_id: uuid.UUID, user_id: uuid.UUID, session: SessionDep):
    topic = topic_service.get_topic(session, topic_id)
    return SubscriptionStatus(topic_id=topic_id, user_id=user_id, subscribed=topic.is_subscribed(user_id))


@router.put("/{topic_id}/subscribers/{user_id}", response_model=SubscriptionStatus)
async def subscribe(topic_id: uuid.UUID, user_id: uuid.UUID, session: SessionDep):
    """Subscribe a user to a topic. Subscribing twice is harmless."""
    topic = topic_service.subscribe(session, topic_id, user_id)
    return SubscriptionStatus(topic_id=topic_id, user_id=user_id, subscribed=topic.is_subscribed(user_id))


@router.delete("/{topic_id}/subscribers/{user_id}", response_model=SubscriptionStatus)
async def unsubscribe(topic_id: uuid.UUID, user_id: uuid.UUID, session: SessionDep):
    """Unsubscribe a user from a topic. Unsubscribing twice is harmless."""
    topic = topic_service.unsubscribe(session, topic_id, user_id)
    return SubscriptionStatus(topic_id=topic_id, user_id=user_id, subscribed=topic.is_subscribed(user_id))
