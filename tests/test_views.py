# flake8: noqa
import sys
from pathlib import Path

# Ensure project root is on sys.path so `recipebook` can be imported when tests are run
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))  # noqa: E402

import pytest
from fastapi.testclient import TestClient  # noqa: E402

from recipebook.app import create_app
from recipebook.config import Settings
from recipebook.db import create_database


@pytest.fixture
def client():
    db = create_database("sqlite:///:memory:")
    app = create_app(Settings(database_url="sqlite:///:memory:", app_title="Recipe App"), database=db)
    with TestClient(app) as c:
        yield c
    db.dispose()


def test_home_page_shows_title(client):
    res = client.get("/")
    assert res.status_code == 200
    assert res.headers["content-type"].startswith("text/html")
    assert "<h1>Recipe App</h1>" in res.text


def test_recipes_page_lists_titles_and_form(client):
    client.post("/recipes", data={"title": "Tomato Soup", "ingredients": "tomato", "method": "simmer"})
    res = client.get("/recipes")
    assert res.status_code == 200
    assert "Tomato Soup" in res.text
    assert 'action="/recipes"' in res.text


def test_form_post_follows_redirect_to_list(client):
    res = client.post("/recipes", data={"title": "Flatbread", "ingredients": "flour, water", "method": "knead"})
    assert res.status_code == 200
    assert str(res.url).endswith("/recipes")
    assert "Flatbread" in res.text


def test_recipe_page_shows_details(client):
    client.post("/recipes", data={"title": "Omelette", "ingredients": "3 eggs", "method": "whisk and fry"})
    res = client.get("/recipes/1")
    assert res.status_code == 200
    assert "Omelette" in res.text
    assert "3 eggs" in res.text
    assert 'action="/recipes/1/edit"' in res.text


def test_recipe_page_for_missing_recipe(client):
    res = client.get("/recipes/12345")
    assert res.status_code == 200
    assert "Recipe not found" in res.text
