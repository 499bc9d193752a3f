import pytest
from fastapi import FastAPI
from starlette.testclient import TestClient

from vitetags.static import IMMUTABLE_MAX_AGE, ManifestStaticFiles


@pytest.fixture
def client(production, tmp_path):
    """App serving a build directory with one hashed and one plain file."""
    (tmp_path / "assets").mkdir()
    (tmp_path / "assets" / "main.4889e940.js").write_text("console.log('main')", encoding="utf-8")
    (tmp_path / "robots.txt").write_text("User-agent: *", encoding="utf-8")

    app = FastAPI()
    app.mount("/dist", ManifestStaticFiles(directory=str(tmp_path), manifest=production, max_age=60), name="dist")
    return TestClient(app)


class TestManifestStaticFiles:
    def test_hashed_output_is_immutable(self, client):
        response = client.get("/dist/assets/main.4889e940.js")

        assert response.status_code == 200
        assert response.headers["Cache-Control"] == f"public, max-age={IMMUTABLE_MAX_AGE}, immutable"
        assert "Expires" in response.headers

    def test_other_files_get_short_max_age(self, client):
        response = client.get("/dist/robots.txt")

        assert response.status_code == 200
        assert response.headers["Cache-Control"] == "public, max-age=60"

    def test_missing_file(self, client):
        response = client.get("/dist/assets/nope.js")

        assert response.status_code == 404
