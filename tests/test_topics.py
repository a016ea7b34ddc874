import uuid

import pytest
from fastapi import status


@pytest.fixture
def topic_json(client, author, category):
    response = client.post("/topics", json={
        "title": "Welcome",
        "content": "Say hello",
        "author_id": str(author.id),
        "category_id": str(category.id),
    })
    assert response.status_code == status.HTTP_201_CREATED
    return response.json()


def test_create_topic(topic_json, author):
    assert topic_json["title"] == "Welcome"
    assert topic_json["subscribers"] == [str(author.id)]
    assert "author" not in topic_json
    assert "replies" not in topic_json


@pytest.mark.parametrize("field", ["title", "content"])
def test_create_topic_requires_text(client, author, category, field):
    payload = {
        "title": "Welcome",
        "content": "Say hello",
        "author_id": str(author.id),
        "category_id": str(category.id),
    }
    payload[field] = "   "
    response = client.post("/topics", json=payload)
    assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY


def test_create_topic_unknown_category(client, author):
    response = client.post("/topics", json={
        "title": "Welcome",
        "content": "Say hello",
        "author_id": str(author.id),
        "category_id": str(uuid.uuid4()),
    })
    assert response.status_code == status.HTTP_404_NOT_FOUND


def test_get_missing_topic(client):
    response = client.get(f"/topics/{uuid.uuid4()}")
    assert response.status_code == status.HTTP_404_NOT_FOUND


def test_get_topic_detail(client, topic_json, author, other_user):
    for content in ("first", "second"):
        response = client.post(f"/topics/{topic_json['id']}/replies", json={
            "content": content,
            "author_id": str(other_user.id),
        })
        assert response.status_code == status.HTTP_201_CREATED

    response = client.get(f"/topics/{topic_json['id']}")
    assert response.status_code == status.HTTP_200_OK

    data = response.json()
    assert {user["id"] for user in data["authors"]} == {str(author.id), str(other_user.id)}
    assert set(data["subscribers"]) == {str(author.id), str(other_user.id)}
    assert data["last_update"]


def test_update_topic(client, topic_json):
    response = client.patch(f"/topics/{topic_json['id']}", json={"deleted": True})
    assert response.status_code == status.HTTP_200_OK
    assert response.json()["deleted"] is True
    assert response.json()["title"] == "Welcome"


def test_subscription_endpoints(client, topic_json, other_user):
    url = f"/topics/{topic_json['id']}/subscribers/{other_user.id}"

    assert client.get(url).json()["subscribed"] is False

    for _ in range(2):
        response = client.put(url)
        assert response.status_code == status.HTTP_200_OK
        assert response.json()["subscribed"] is True

    for _ in range(2):
        response = client.delete(url)
        assert response.status_code == status.HTTP_200_OK
        assert response.json()["subscribed"] is False


def test_subscribe_unknown_user(client, topic_json):
    response = client.put(f"/topics/{topic_json['id']}/subscribers/{uuid.uuid4()}")
    assert response.status_code == status.HTTP_404_NOT_FOUND


def test_health_check(client, settings):
    response = client.get("/health")
    assert response.status_code == status.HTTP_200_OK
    assert response.json()["status"] == "healthy"
    assert response.json()["version"] == settings.APP_VERSION


@pytest.mark.parametrize("field", ["title", "content", "deleted"])
def test_update_topic_rejects_null(client, topic_json, field):
    response = client.patch(f"/topics/{topic_json['id']}", json={field: None})
    assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY

    unchanged = client.get(f"/topics/{topic_json['id']}").json()
    assert unchanged["title"] == "Welcome"
    assert unchanged["deleted"] is False


def test_update_topic_rejects_blank_title(client, topic_json):
    response = client.patch(f"/topics/{topic_json['id']}", json={"title": "  "})
    assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
