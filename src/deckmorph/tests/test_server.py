"""Tests for deckmorph_mcp.server — MCP tool functions called directly."""

import json
import pytest

pytest.importorskip("mcp")

from deckmorph.core.state import SessionState
from deckmorph_mcp import server

DECK = [
    {
        "canvasElements": [{"id": "a", "type": "rect", "x": 0, "y": 0, "fill": "red"}],
        "duration": 2,
        "audio": {"url": "intro.mp3"},
    },
    {"canvasElements": [{"id": "b", "type": "rect", "x": 20, "y": 0}], "duration": 3},
]


@pytest.fixture(autouse=True)
def session(monkeypatch):
    state = SessionState()
    monkeypatch.setattr(server, "_session_state", state)
    return state


# ── Deck tools ──────────────────────────────────────────────────────────

class TestDeckTools:
    def test_load_slides(self, session):
        result = json.loads(server.load_slides(None, json.dumps(DECK)))
        assert result["status"] == "loaded"
        assert result["slide_count"] == 2
        assert len(session.slides) == 2

    def test_load_invalid_slides(self, session):
        result = server.load_slides(None, '[{"canvasElements": [{"type": "blob"}]}]')
        assert result.startswith("Error:")
        assert session.slides == []

    def test_load_slides_file(self, session, tmp_path):
        path = tmp_path / "deck.json"
        path.write_text(json.dumps(DECK))
        result = json.loads(server.load_slides_file(None, str(path)))
        assert result["slide_count"] == 2

    def test_load_missing_file(self, tmp_path):
        result = server.load_slides_file(None, str(tmp_path / "nope.json"))
        assert result.startswith("Error: File not found")

    def test_load_file_not_utf8(self, session, tmp_path):
        path = tmp_path / "deck.json"
        path.write_bytes(b"\xff\xfe\x00[")
        result = server.load_slides_file(None, str(path))
        assert result.startswith("Error loading slides:")
        assert session.slides == []


# ── Timeline tools ──────────────────────────────────────────────────────

class TestTimelineTools:
    def test_get_timeline_without_slides(self):
        assert server.get_timeline(None).startswith("No slides loaded")

    def test_get_timeline(self):
        server.load_slides(None, json.dumps(DECK))
        data = json.loads(server.get_timeline(None))
        assert len(data["timeline"]) == 2
        assert data["totalDuration"] == pytest.approx(8.0)
        morph = data["timeline"][1]["animations"][1]
        assert morph["type"] == "morph"
        assert morph["nodeAnimation"]["from"]["fill"] == "red"

    def test_get_audio_cues(self):
        server.load_slides(None, json.dumps(DECK))
        data = json.loads(server.get_audio_cues(None))
        assert data["audioCues"] == [
            {"url": "intro.mp3", "shouldBePlayedAt": 1.0, "start": None, "duration": 2.0},
        ]

    def test_preview_slide(self):
        server.load_slides(None, json.dumps(DECK))
        data = json.loads(server.preview_slide(None, 1))
        assert data["slideIndex"] == 1
        assert data["startTime"] == pytest.approx(4.0)
        assert [item["shape"]["id"] for item in data["items"]] == ["b"]

    def test_preview_slide_out_of_range(self):
        server.load_slides(None, json.dumps(DECK))
        assert server.preview_slide(None, 9).startswith("Error:")


# ── Configuration tools ─────────────────────────────────────────────────

class TestConfigurationTools:
    def test_list_presets(self):
        names = {p["name"] for p in json.loads(server.list_transition_presets(None))}
        assert names == {"default", "snappy", "cinematic"}

    def test_set_preset(self, session):
        result = json.loads(server.set_transition_preset(None, "snappy"))
        assert result["preset"] == "snappy"
        assert session.config.complete_slide_transition_duration == 1.5

    def test_set_unknown_preset(self, session):
        assert server.set_transition_preset(None, "warp").startswith("Error:")

    def test_session_status(self):
        server.load_slides(None, json.dumps(DECK))
        status = json.loads(server.get_session_status(None))
        assert status["slide_count"] == 2
        assert status["total_duration"] == pytest.approx(8.0)

    def test_new_session_reads_preset_from_env(self, monkeypatch):
        monkeypatch.setenv("DECKMORPH_PRESET", "cinematic")
        assert server._new_session().preset_name == "cinematic"

    def test_new_session_unknown_preset_falls_back(self, monkeypatch):
        monkeypatch.setenv("DECKMORPH_PRESET", "warp")
        assert server._new_session().preset_name == "default"

    def test_workflow_prompt_mentions_tools(self):
        prompt = server.transition_workflow()
        assert "load_slides" in prompt
        assert "get_timeline" in prompt
