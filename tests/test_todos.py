"""Todo API tests."""

import math

from src.models.enums import Priority
from src.models.todo import Todo


def test_list_todos_empty(client):
    """Test listing with no todos."""
    response = client.get("/api/todos")
    assert response.status_code == 200
    data = response.json()
    assert data["success"] is True
    assert data["data"] == []
    assert data["pagination"] == {
        "current_page": 1,
        "per_page": 10,
        "total": 0,
        "total_pages": 0,
    }


def test_list_todos_newest_first(client, category, make_todo):
    """Test that todos are listed newest first with their category."""
    make_todo("Test Todo 1", category_id=category.id, priority=Priority.HIGH)
    make_todo("Test Todo 2", category_id=category.id)

    response = client.get("/api/todos")
    assert response.status_code == 200
    todos = response.json()["data"]
    assert [t["title"] for t in todos] == ["Test Todo 2", "Test Todo 1"]
    assert todos[0]["category"]["name"] == "Work"


def test_pagination_window(client, make_todo):
    """Test that a page never exceeds the limit and the page count is right."""
    for i in range(7):
        make_todo(f"Todo {i}")

    for limit in (1, 2, 3, 5, 7, 10):
        response = client.get("/api/todos", params={"limit": limit, "page": 2})
        assert response.status_code == 200
        data = response.json()
        assert len(data["data"]) <= limit
        assert data["pagination"]["total"] == 7
        assert data["pagination"]["total_pages"] == math.ceil(7 / limit)
        assert data["pagination"]["per_page"] == limit
        assert data["pagination"]["current_page"] == 2


def test_pagination_pages_do_not_overlap(client, make_todo):
    """Test that consecutive pages cover every todo exactly once."""
    for i in range(5):
        make_todo(f"Todo {i}")

    seen = []
    for page in (1, 2, 3):
        response = client.get("/api/todos", params={"limit": 2, "page": page})
        seen.extend(t["id"] for t in response.json()["data"])

    assert len(seen) == 5
    assert len(set(seen)) == 5


def test_page_past_the_end(client, make_todo):
    """Test that a page beyond the last one is empty but keeps the total."""
    make_todo("Only one")

    response = client.get("/api/todos", params={"page": 5})
    assert response.status_code == 200
    data = response.json()
    assert data["data"] == []
    assert data["pagination"]["total"] == 1


def test_invalid_pagination_rejected(client):
    """Test that bad page/limit values are rejected instead of coerced."""
    for params in (
        {"page": "abc"},
        {"page": 0},
        {"page": -1},
        {"limit": 0},
        {"limit": -5},
        {"limit": "ten"},
        {"limit": 101},
        {"category_id": "abc"},
    ):
        response = client.get("/api/todos", params=params)
        assert response.status_code == 400, params
        assert response.json()["success"] is False


def test_out_of_range_query_values_rejected(client):
    """Test that integers too large for the id column are a bad request."""
    for params in ({"page": 10**20}, {"category_id": 10**20}, {"category_id": 2**31}):
        response = client.get("/api/todos", params=params)
        assert response.status_code == 400, params
        assert response.json()["success"] is False


def test_out_of_range_todo_id_rejected(client):
    """Test that every todo route rejects an id past the integer range."""
    todo_id = 10**20
    for response in (
        client.get(f"/api/todos/{todo_id}"),
        client.put(f"/api/todos/{todo_id}", json={"title": "Updated"}),
        client.patch(f"/api/todos/{todo_id}/toggle"),
        client.delete(f"/api/todos/{todo_id}"),
    ):
        assert response.status_code == 400
        assert response.json()["success"] is False


def test_create_todo_out_of_range_category(client, db):
    """Test that an oversized category id in the body is rejected."""
    response = client.post("/api/todos", json={"title": "Too big", "category_id": 10**20})
    assert response.status_code == 400
    assert db.query(Todo).count() == 0


def test_invalid_priority_filter_rejected(client):
    """Test that an unknown priority filter is rejected."""
    response = client.get("/api/todos", params={"priority": "urgent"})
    assert response.status_code == 400


def test_filter_conjunction(client, db, category, make_todo):
    """Test that filters combine with AND."""
    client.post(
        "/api/todos",
        json={"title": "Ship release", "priority": "high", "category_id": category.id},
    )
    make_todo("Other high", priority=Priority.HIGH)
    make_todo("Low in category", priority=Priority.LOW, category_id=category.id)

    response = client.get(
        "/api/todos", params={"priority": "high", "category_id": category.id}
    )
    titles = [t["title"] for t in response.json()["data"]]
    assert titles == ["Ship release"]

    response = client.get("/api/todos", params={"priority": "low"})
    titles = [t["title"] for t in response.json()["data"]]
    assert "Ship release" not in titles
    assert titles == ["Low in category"]


def test_filter_by_completed(client, make_todo):
    """Test filtering by completion status."""
    make_todo("Done", completed=True)
    make_todo("Open")

    done = client.get("/api/todos", params={"completed": "true"}).json()
    assert [t["title"] for t in done["data"]] == ["Done"]
    assert done["pagination"]["total"] == 1

    open_ = client.get("/api/todos", params={"completed": "false"}).json()
    assert [t["title"] for t in open_["data"]] == ["Open"]


def test_search_is_case_insensitive(client, make_todo):
    """Test that search matches title substrings regardless of case."""
    make_todo("Buy MILK")
    make_todo("Walk the dog")

    response = client.get("/api/todos", params={"search": "milk"})
    titles = [t["title"] for t in response.json()["data"]]
    assert titles == ["Buy MILK"]


def test_search_wildcards_are_literal(client, make_todo):
    """Test that LIKE wildcards in the search term match literally."""
    make_todo("100% done")
    make_todo("1000 lines")

    response = client.get("/api/todos", params={"search": "0%"})
    titles = [t["title"] for t in response.json()["data"]]
    assert titles == ["100% done"]


def test_get_todo(client, make_todo):
    """Test getting a todo by id."""
    todo = make_todo("Find me")

    response = client.get(f"/api/todos/{todo.id}")
    assert response.status_code == 200
    assert response.json()["data"]["title"] == "Find me"
    assert response.json()["data"]["category"] is None


def test_get_todo_not_found(client):
    """Test getting a missing todo."""
    response = client.get("/api/todos/99999")
    assert response.status_code == 404
    assert response.json() == {"success": False, "error": "Todo not found"}


def test_create_todo(client, category):
    """Test creating a todo."""
    response = client.post(
        "/api/todos",
        json={
            "title": "  Learn FastAPI  ",
            "description": "Study dependencies",
            "category_id": category.id,
            "priority": "high",
            "due_date": "2030-01-15T09:00:00Z",
        },
    )
    assert response.status_code == 201
    data = response.json()["data"]
    assert data["title"] == "Learn FastAPI"
    assert data["priority"] == "high"
    assert data["completed"] is False
    assert data["category"]["id"] == category.id
    assert data["due_date"].startswith("2030-01-15")


def test_create_todo_defaults(client):
    """Test creating a todo with default values."""
    response = client.post("/api/todos", json={"title": "Simple Todo"})
    assert response.status_code == 201
    data = response.json()["data"]
    assert data["completed"] is False
    assert data["priority"] == "medium"
    assert data["category_id"] is None
    assert data["due_date"] is None


def test_create_todo_without_title(client, db, category):
    """Test that a todo without a title is rejected and not saved."""
    response = client.post(
        "/api/todos", json={"description": "No title provided", "category_id": category.id}
    )
    assert response.status_code == 400
    assert response.json()["error"] == "Title is required"
    assert db.query(Todo).count() == 0


def test_create_todo_blank_title(client, db):
    """Test that a whitespace-only title is rejected."""
    response = client.post("/api/todos", json={"title": "   "})
    assert response.status_code == 400
    assert response.json()["error"] == "Title is required"
    assert db.query(Todo).count() == 0


def test_create_todo_unknown_category(client, db):
    """Test that a todo can't point at a missing category."""
    response = client.post("/api/todos", json={"title": "Orphan", "category_id": 99999})
    assert response.status_code == 400
    assert "does not exist" in response.json()["error"]
    assert db.query(Todo).count() == 0


def test_update_todo(client, category, make_todo):
    """Test updating a todo."""
    todo = make_todo("Original Title", category_id=category.id)

    response = client.put(
        f"/api/todos/{todo.id}", json={"title": "Updated Title", "completed": True}
    )
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["title"] == "Updated Title"
    assert data["completed"] is True
    assert data["category_id"] == category.id


def test_update_todo_clears_category(client, category, make_todo):
    """Test that an explicit null clears the category."""
    todo = make_todo("Categorized", category_id=category.id)

    response = client.put(f"/api/todos/{todo.id}", json={"category_id": None})
    assert response.status_code == 200
    assert response.json()["data"]["category_id"] is None
    assert response.json()["data"]["category"] is None


def test_update_todo_null_title_keeps_title(client, make_todo):
    """Test that a null title leaves the title unchanged."""
    todo = make_todo("Keep me", priority=Priority.HIGH)

    response = client.put(f"/api/todos/{todo.id}", json={"title": None, "priority": None})
    assert response.status_code == 200
    assert response.json()["data"]["title"] == "Keep me"
    assert response.json()["data"]["priority"] == "high"


def test_update_todo_unknown_category(client, db, category, make_todo):
    """Test that moving a todo to a missing category leaves it where it was."""
    todo = make_todo("Stays put", category_id=category.id)

    response = client.put(f"/api/todos/{todo.id}", json={"category_id": 99999})
    assert response.status_code == 400
    assert "does not exist" in response.json()["error"]

    db.expire_all()
    assert db.get(Todo, todo.id).category_id == category.id


def test_update_todo_not_found(client):
    """Test updating a missing todo."""
    response = client.put("/api/todos/99999", json={"title": "Updated"})
    assert response.status_code == 404
    assert response.json()["error"] == "Todo not found"


def test_toggle_todo_round_trip(client, make_todo):
    """Test that toggling twice restores the original state."""
    todo = make_todo("Toggle me")

    first = client.patch(f"/api/todos/{todo.id}/toggle")
    assert first.status_code == 200
    assert first.json()["data"]["completed"] is True

    second = client.patch(f"/api/todos/{todo.id}/toggle")
    assert second.status_code == 200
    assert second.json()["data"]["completed"] is False


def test_toggle_todo_not_found(client):
    """Test toggling a missing todo."""
    response = client.patch("/api/todos/99999/toggle")
    assert response.status_code == 404


def test_delete_todo(client, db, make_todo):
    """Test deleting a todo."""
    todo = make_todo("Todo to delete")

    response = client.delete(f"/api/todos/{todo.id}")
    assert response.status_code == 200
    assert response.json() == {"success": True, "message": "Todo deleted successfully"}
    assert client.get(f"/api/todos/{todo.id}").status_code == 404


def test_delete_todo_not_found(client):
    """Test deleting a missing todo."""
    response = client.delete("/api/todos/99999")
    assert response.status_code == 404
