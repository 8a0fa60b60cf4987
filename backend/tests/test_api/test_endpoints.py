"""Tests for API endpoints."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from iconforge.config import Settings
from iconforge.dependencies import get_settings
from iconforge.main import app
from tests.conftest import HOME_SVG, MULTI_COLOR_SVG, SPRITE_TEXT


client = TestClient(app)


def test_health():
    response = client.get("/api/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["targets_registered"] == 12


def test_targets():
    response = client.get("/api/components/targets")
    assert response.status_code == 200
    ids = {t["id"] for t in response.json()}
    assert {"react", "vue-sfc", "react-native", "web-component"} <= ids
    rn = next(t for t in response.json() if t["id"] == "react-native")
    assert rn["body_modes"] == ["inline"]


def test_normalize():
    response = client.post("/api/svg/normalize", json={"svg": HOME_SVG})
    assert response.status_code == 200
    data = response.json()
    assert 'xmlns="http://www.w3.org/2000/svg"' in data["svg"]
    assert data["view_box"] == "0 0 24 24"
    assert "M12 2L2 7" in data["body"]


class TestAnimation:
    def test_presets(self):
        response = client.get("/api/animation/presets")
        assert "spin" in response.json()
        assert "draw" in response.json()

    def test_embed_detect_clean(self):
        embedded = client.post("/api/animation/embed", json={"svg": HOME_SVG, "type": "spin"}).json()["svg"]
        assert "@keyframes spin" in embedded

        detected = client.post("/api/animation/detect", json={"svg": embedded}).json()
        assert detected["animated"] is True
        assert detected["spec"]["type"] == "spin"

        cleaned = client.post("/api/animation/clean", json={"svg": embedded}).json()["svg"]
        assert "@keyframes" not in cleaned
        assert client.post("/api/animation/detect", json={"svg": cleaned}).json()["animated"] is False

    def test_embed_with_spec(self):
        spec = {"type": "pulse", "duration": 3, "iteration": 2}
        embedded = client.post(
            "/api/animation/embed", json={"svg": HOME_SVG, "type": "pulse", "spec": spec}
        ).json()["svg"]
        detected = client.post("/api/animation/detect", json={"svg": embedded}).json()["spec"]
        assert detected["duration"] == 3
        assert detected["iteration"] == 2

    def test_embed_empty_type(self):
        response = client.post("/api/animation/embed", json={"svg": HOME_SVG, "type": ""})
        assert response.status_code == 400


class TestGenerate:
    def test_single(self):
        response = client.post(
            "/api/components/generate",
            json={"icons": [{"name": "home", "svg": HOME_SVG}], "target": "react"},
        )
        assert response.status_code == 200
        [component] = response.json()["components"]
        assert component["filename"] == "Home.tsx"
        assert "#home" in component["source_text"]

    def test_batch_order(self):
        icons = [{"name": n, "svg": HOME_SVG} for n in ("zap", "arrow-left", "home")]
        response = client.post(
            "/api/components/generate",
            json={"icons": icons, "options": {"target": "vue-sfc"}},
        )
        assert [c["filename"] for c in response.json()["components"]] == [
            "Zap.vue",
            "ArrowLeft.vue",
            "Home.vue",
        ]

    def test_unknown_target(self):
        response = client.post(
            "/api/components/generate",
            json={"icons": [{"name": "home", "svg": HOME_SVG}], "target": "flutter"},
        )
        assert response.status_code == 400

    def test_react_native_sprite_rejected(self):
        response = client.post(
            "/api/components/generate",
            json={"icons": [{"name": "home", "svg": HOME_SVG}], "target": "react-native"},
        )
        assert response.status_code == 400

    def test_empty_icons(self):
        response = client.post("/api/components/generate", json={"icons": []})
        assert response.status_code == 422


def test_css_sheet():
    response = client.post(
        "/api/css/generate",
        json={
            "icons": [{"name": "home", "svg": HOME_SVG}, {"name": "palette", "svg": MULTI_COLOR_SVG}],
            "options": {"generate_types": True},
        },
    )
    assert response.status_code == 200
    data = response.json()
    assert data["class_names"] == ["icon-home", "icon-palette"]
    assert data["stats"]["total_icons"] == 2
    assert ".icon-home" in data["css"]
    assert data["type_definitions"]


@pytest.fixture
def workspace(tmp_path):
    """Point the output directory and the scan root at a fresh directory."""
    root = tmp_path / "workspace"
    root.mkdir()
    app.dependency_overrides[get_settings] = lambda: Settings(
        output_directory=str(root), workspace_root=str(root)
    )
    yield root
    app.dependency_overrides.clear()


class TestSprite:
    def test_update(self, workspace):
        path = workspace / "sprite.svg"
        path.write_text(SPRITE_TEXT, encoding="utf-8")
        response = client.post(
            "/api/sprite/update",
            json={"name": "home", "svg": '<svg viewBox="0 0 24 24"><circle r="4"/></svg>', "sprite_path": str(path)},
        )
        data = response.json()
        assert data["status"] == "updated"
        assert data["ok"] is True
        assert data["symbols"] == ["arrow", "home", "star"]
        assert "<circle" in path.read_text(encoding="utf-8")

    def test_update_missing_symbol(self, workspace):
        path = workspace / "sprite.svg"
        path.write_text(SPRITE_TEXT, encoding="utf-8")
        response = client.post(
            "/api/sprite/update",
            json={"name": "nope", "svg": HOME_SVG, "sprite_path": str(path)},
        )
        assert response.json()["status"] == "symbol_missing"
        assert response.json()["ok"] is False
        assert path.read_text(encoding="utf-8") == SPRITE_TEXT

    def test_add_creates_sprite(self, workspace):
        path = workspace / "new.svg"
        response = client.post(
            "/api/sprite/add",
            json={"icon": {"name": "home", "svg": HOME_SVG}, "sprite_path": str(path)},
        )
        data = response.json()
        assert data["status"] == "added"
        assert data["symbols"] == ["home"]
        assert path.exists()

    def test_relative_path_lands_in_output_directory(self, workspace):
        response = client.post(
            "/api/sprite/add",
            json={"icon": {"name": "home", "svg": HOME_SVG}, "sprite_path": "sprites/app.svg"},
        )
        assert response.json()["status"] == "added"
        assert (workspace / "sprites" / "app.svg").exists()

    @pytest.mark.parametrize("escape", ["../elsewhere/anything.svg", "ABSOLUTE"])
    def test_paths_outside_output_directory_rejected(self, workspace, escape):
        outside = workspace.parent / "elsewhere" / "anything.svg"
        sprite_path = str(outside) if escape == "ABSOLUTE" else escape
        for endpoint, payload in (
            ("/api/sprite/add", {"icon": {"name": "home", "svg": HOME_SVG}, "sprite_path": sprite_path}),
            ("/api/sprite/update", {"name": "home", "svg": HOME_SVG, "sprite_path": sprite_path}),
        ):
            assert client.post(endpoint, json=payload).status_code == 400
        assert not outside.parent.exists()


class TestUsages:
    def test_text(self):
        response = client.post("/api/usages/scan", json={"name": "home", "text": "a\n<Home />\n"})
        data = response.json()
        assert data["total"] == 1
        assert data["matches"][0]["line"] == 2

    def test_root(self, workspace):
        (workspace / "App.vue").write_text("<img src=\"home.svg\">\n", encoding="utf-8")
        response = client.post("/api/usages/scan", json={"name": "home", "root": str(workspace)})
        data = response.json()
        assert data["total"] == 1
        assert data["matches"][0]["matched_pattern"] == "home.svg"

    @pytest.mark.parametrize("root", ["..", "/"])
    def test_root_outside_workspace_rejected(self, workspace, root):
        (workspace.parent / "secret.ts").write_text("'home'\n", encoding="utf-8")
        response = client.post(
            "/api/usages/scan",
            json={"name": "home", "root": root, "include": ["*"]},
        )
        assert response.status_code == 400

    def test_requires_source(self):
        response = client.post("/api/usages/scan", json={"name": "home"})
        assert response.status_code == 400


def test_normalize_injects_root_id():
    response = client.post("/api/svg/normalize", json={"svg": HOME_SVG, "name": "home"})
    data = response.json()
    assert data["name"] == "home"
    assert 'id="ic-home"' in data["svg"]


class TestCatalog:
    def test_collections(self):
        ids = [c["id"] for c in client.get("/api/catalog/collections").json()]
        assert "lucide" in ids
        assert "mdi" in ids

    def test_collection(self):
        assert client.get("/api/catalog/collections/lucide").json()["license"] == "ISC"

    def test_unknown_collection(self):
        assert client.get("/api/catalog/collections/nope").status_code == 400
