import random
import logging
from datetime import datetime, timedelta, timezone
from sqlmodel import Session, SQLModel

from models import User, Category, Topic, Reply
from dependencies import engine

logger = logging.getLogger(__name__)

# Data pools
FIRST_NAMES = [
    "Juan", "María", "Alberto", "Lucía", "Pedro", "Ana", "Carlos", "Sofia",
    "John", "Emma", "Michael", "Sarah", "David", "Isabella", "James", "Laura"
]

LAST_NAMES = [
    "Domínguez", "García", "Rodríguez", "López", "Martínez", "González",
    "Smith", "Johnson", "Williams", "Brown", "Jones", "Miller", "Davis"
]

CATEGORIES = {
    "Programming": "Languages, tools and code review",
    "Hardware": "Builds, parts and repairs",
    "Gaming": "Anything played on a screen",
    "Off-topic": "Everything else",
}

TOPIC_TITLES = [
    "Vue.js or React for a first project?",
    "Favourite TypeScript features",
    "Best resources for learning Docker",
    "That bug that took me a week",
    "FastAPI in production",
    "Who's up for Valorant tonight?",
    "Mechanical keyboards worth it?",
]

REPLY_CONTENTS = [
    "Totally agree with this",
    "Not sure, I had the opposite experience",
    "Here's a link that helped me",
    "I'm in!",
    "Did you try turning it off and on again?",
    "Following, same question here",
    "Thanks, that solved it",
]


def random_date(start_date, end_date):
    time_between = end_date - start_date
    random_seconds = random.randrange(int(time_between.total_seconds()))
    return start_date + timedelta(seconds=random_seconds)


def create_test_data():
    SQLModel.metadata.create_all(engine)

    with Session(engine) as session:
        categories = [
            Category(title=title, description=description)
            for title, description in CATEGORIES.items()
        ]
        session.add_all(categories)

        users = []
        for _ in range(10):
            first_name = random.choice(FIRST_NAMES)
            last_name = random.choice(LAST_NAMES)
            username = f"{first_name.lower()}{random.randint(1, 999)}"
            users.append(User(
                username=username,
                email=f"{username}@example.com",
                full_name=f"{first_name} {last_name}",
            ))
        session.add_all(users)
        session.commit()

        start_date = datetime(2023, 1, 1, tzinfo=timezone.utc)
        end_date = datetime.now(timezone.utc)

        topics = []
        opened_at = []
        for title in TOPIC_TITLES:
            author = random.choice(users)
            created_at = random_date(start_date, end_date)
            topic = Topic(
                title=title,
                content=f"{title} Let's discuss.",
                author_id=author.id,
                category_id=random.choice(categories).id,
                created_at=created_at,
                updated_at=created_at,
            )
            topic.add_subscriber(author.id)
            topics.append(topic)
            opened_at.append(created_at)
        session.add_all(topics)
        session.commit()

        replies = []
        for topic, topic_created_at in zip(topics, opened_at):
            # Each topic gets 0-6 replies after it was opened
            for _ in range(random.randint(0, 6)):
                author = random.choice(users)
                created_at = random_date(topic_created_at, end_date)
                replies.append(Reply(
                    content=random.choice(REPLY_CONTENTS),
                    author_id=author.id,
                    topic_id=topic.id,
                    created_at=created_at,
                    updated_at=created_at,
                ))
                topic.add_subscriber(author.id)
            session.add(topic)
        session.add_all(replies)
        session.commit()

        logger.info(
            f"Test data created: {len(users)} users, {len(categories)} categories, "
            f"{len(topics)} topics, {len(replies)} replies"
        )


if __name__ == "__main__":
    create_test_data()
