import unittest
from unittest.mock import patch

from fastapi.testclient import TestClient

from chordsheet.app import app
from chordsheet.config import settings


class TestApi(unittest.TestCase):
    def setUp(self):
        self.client = TestClient(app)

    def test_health(self):
        resp = self.client.get("/health")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json(), {"status": "ok"})

    def test_keys(self):
        data = self.client.get("/keys").json()
        self.assertEqual(len(data["keys"]), 24)
        self.assertEqual(data["keys"][0], "C")
        self.assertEqual(data["keys"][-1], "Bm")

    def test_key_interval(self):
        resp = self.client.get("/keys/interval", params={"from_key": "Am", "to_key": "Cm"})
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["interval_semitones"], 3)

    def test_key_interval_invalid(self):
        resp = self.client.get("/keys/interval", params={"from_key": "H", "to_key": "C"})
        self.assertEqual(resp.status_code, 400)
        self.assertIn("from_key", resp.json()["detail"])

    def test_key_interval_lenient(self):
        with patch.object(settings, "strict_keys", False):
            resp = self.client.get("/keys/interval", params={"from_key": "H", "to_key": "C"})
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["interval_semitones"], 0)

    def test_transpose_chord_by_semitones(self):
        resp = self.client.post("/transpose/chord", json={"chord": "Am7", "semitones": 3})
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["transposed"], "Cm7")

    def test_transpose_chord_by_keys(self):
        resp = self.client.post(
            "/transpose/chord", json={"chord": "G", "from_key": "C", "to_key": "D"}
        )
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json(), {"chord": "G", "transposed": "A", "interval_semitones": 2})

    def test_transpose_chord_unknown_passes_through(self):
        resp = self.client.post("/transpose/chord", json={"chord": "H7", "semitones": 2})
        self.assertEqual(resp.json()["transposed"], "H7")

    def test_transpose_chord_needs_interval(self):
        resp = self.client.post("/transpose/chord", json={"chord": "G"})
        self.assertEqual(resp.status_code, 422)

    def test_transpose_chord_invalid_key(self):
        resp = self.client.post(
            "/transpose/chord", json={"chord": "G", "from_key": "C", "to_key": "Q"}
        )
        self.assertEqual(resp.status_code, 400)

    def test_transpose_chart(self):
        resp = self.client.post(
            "/transpose/chart",
            json={
                "content": "C        G        Am       F\nHere are the words",
                "from_key": "C",
                "to_key": "D",
            },
        )
        self.assertEqual(resp.status_code, 200)
        data = resp.json()
        self.assertEqual(data["content"], "D        A        Bm       G\nHere are the words")
        self.assertEqual(data["interval_semitones"], 2)

    def test_transpose_chart_requires_source_key(self):
        resp = self.client.post("/transpose/chart", json={"content": "C    G", "to_key": "D"})
        self.assertEqual(resp.status_code, 422)

    def test_transpose_chart_too_long(self):
        with patch.object(settings, "max_chart_chars", 5):
            resp = self.client.post(
                "/transpose/chart",
                json={"content": "C        G", "from_key": "C", "to_key": "D"},
            )
        self.assertEqual(resp.status_code, 413)

    def test_render_in_service_key(self):
        resp = self.client.post(
            "/charts/render",
            json={
                "content": "[Verse 1]\nC        G\nHere are the words",
                "default_key": "C",
                "service_key": "D",
            },
        )
        self.assertEqual(resp.status_code, 200)
        data = resp.json()
        self.assertEqual(data["key"], "D")
        self.assertEqual(data["original_key"], "C")
        self.assertEqual(data["interval_semitones"], 2)
        self.assertEqual(data["lines"][0], {
            "type": "section", "line": 0, "content": "[Verse 1]", "label": "Verse 1",
        })
        self.assertEqual(data["lines"][1], {
            "type": "chord-lyric-pair",
            "line": 1,
            "chords": "D        A",
            "lyrics": "Here are the words",
        })

    def test_render_target_key_overrides_service_key(self):
        resp = self.client.post(
            "/charts/render",
            json={
                "content": "C    G\nWords",
                "default_key": "C",
                "service_key": "D",
                "target_key": "C",
            },
        )
        data = resp.json()
        self.assertEqual(data["key"], "C")
        self.assertEqual(data["content"], "C    G\nWords")
        self.assertEqual(data["interval_semitones"], 0)

    def test_render_requires_default_key(self):
        resp = self.client.post("/charts/render", json={"content": "C    G\nWords"})
        self.assertEqual(resp.status_code, 422)

    def test_render_empty(self):
        resp = self.client.post("/charts/render", json={"content": ""})
        self.assertEqual(resp.status_code, 200)
        data = resp.json()
        self.assertEqual(data["key"], "C")
        self.assertEqual(data["lines"], [])

    def test_editor_palette(self):
        data = self.client.get("/editor/palette").json()
        self.assertIn("Gsus4", data["chords"])
        self.assertIn("Chorus", data["sections"])
        self.assertTrue(data["example"].startswith("[Verse 1]"))

    def test_editor_insert(self):
        resp = self.client.post("/editor/insert", json={"value": "C  ", "cursor": 3, "chord": "G"})
        self.assertEqual(resp.json(), {"value": "C  G  "})
        resp = self.client.post("/editor/insert", json={"value": "", "section": "Bridge"})
        self.assertEqual(resp.json(), {"value": "\n[Bridge]\n"})

    def test_editor_insert_needs_one_item(self):
        resp = self.client.post("/editor/insert", json={"value": "x", "chord": "G", "section": "Verse"})
        self.assertEqual(resp.status_code, 422)


if __name__ == "__main__":
    unittest.main()
