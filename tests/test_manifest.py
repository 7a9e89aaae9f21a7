import json
import tempfile
import unittest
from pathlib import Path

from arweave_deploy.manifest import ContentId, Manifest, ManifestStore


class TestManifestStore(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        self.path = Path(self._tmp.name) / "manifest.json"
        self.store = ManifestStore(self.path)

    def test_missing_file_gives_default(self):
        manifest = self.store.load()

        self.assertEqual(manifest.kind, "arweave/paths")
        self.assertEqual(manifest.version, "0.2.0")
        self.assertEqual(manifest.index.path, "")
        self.assertEqual(manifest.paths, {})

    def test_malformed_file_gives_default(self):
        self.path.write_text("{not json")
        self.assertEqual(self.store.load().paths, {})

        self.path.write_text(json.dumps({"paths": {"a.txt": "no id here"}}))
        self.assertEqual(self.store.load().paths, {})

    def test_defaults_are_not_shared(self):
        first = self.store.load()
        first.record("a.txt", ContentId("abc"))

        self.assertEqual(self.store.load().paths, {})

    def test_round_trip(self):
        manifest = Manifest()
        manifest.record("index-ab12.html", ContentId("tx-1"))
        manifest.record("assets/app.js", ContentId("tx-2"))
        manifest.index.path = "index-ab12.html"

        self.store.save(manifest)
        loaded = self.store.load()

        self.assertEqual(loaded.paths, manifest.paths)
        self.assertEqual(loaded.index.path, "index-ab12.html")

    def test_saved_document_layout(self):
        manifest = Manifest()
        manifest.record("about.html", ContentId("tx-9"))

        self.store.save(manifest)
        text = self.path.read_text()

        self.assertEqual(
            json.loads(text),
            {
                "manifest": "arweave/paths",
                "version": "0.2.0",
                "index": {"path": ""},
                "paths": {"about.html": {"id": "tx-9"}},
            },
        )
        self.assertIn("\n  ", text)

    def test_save_replaces_previous_content(self):
        self.path.write_text("x" * 4096)

        self.store.save(Manifest())

        self.assertEqual(json.loads(self.path.read_text())["paths"], {})


class TestEntryPoint(unittest.TestCase):
    def _manifest(self, *keys):
        manifest = Manifest()
        for i, key in enumerate(keys):
            manifest.record(key, ContentId(f"id-{i}"))
        return manifest

    def test_hashed_index_found(self):
        manifest = self._manifest("about.html", "index-ab12.html")
        self.assertEqual(manifest.find_entry_point(), "index-ab12.html")

    def test_match_is_case_insensitive(self):
        manifest = self._manifest("Index-AB12.HTML")
        self.assertEqual(manifest.find_entry_point(), "Index-AB12.HTML")

    def test_nested_hashed_index(self):
        manifest = self._manifest("docs/index-77.html")
        self.assertEqual(manifest.find_entry_point(), "docs/index-77.html")

    def test_no_match(self):
        manifest = self._manifest("index.html", "about.html", "myindex-1.htm")
        self.assertIsNone(manifest.find_entry_point())


if __name__ == "__main__":
    unittest.main()
