from fastapi.testclient import TestClient

from web.app import app


client = TestClient(app)


def test_index_page():
	resp = client.get("/")
	assert resp.status_code == 200
	assert 'id="code-input"' in resp.text
	assert 'id="output-section" class="hidden"' in resp.text


def test_static_stylesheet():
	resp = client.get("/static/style.css")
	assert resp.status_code == 200
	assert ".hidden" in resp.text


def test_page_api_is_mounted():
	resp = client.post("/analyze", json={"code": "function greet(name) {}"})
	assert resp.status_code == 200
	assert resp.json()["functions"][0]["name"] == "greet"
