import json
import logging
import tempfile
import unittest
from pathlib import Path

from asset_paths.errors import ManifestLoadError
from asset_paths.manifest import JsonManifest, MappingManifest


def _write_json(path: Path, payload: object) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload), encoding="utf-8")


class MappingManifestTests(unittest.TestCase):
    def test_lookup_returns_entry_or_none(self) -> None:
        manifest = MappingManifest({"app.js": "app-0123abcd.js"})
        self.assertEqual("app-0123abcd.js", manifest.lookup("app.js"))
        self.assertIsNone(manifest.lookup("missing.js"))
        self.assertEqual(1, len(manifest))


class JsonManifestTests(unittest.TestCase):
    def test_load_reads_assets_table(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            path = Path(temp_dir) / "manifest.json"
            _write_json(
                path,
                {
                    "files": {"app-0123abcd.js": {"logical_path": "app.js"}},
                    "assets": {"app.js": "app-0123abcd.js"},
                },
            )

            with self.assertLogs("asset_paths.manifest", level=logging.INFO):
                manifest = JsonManifest.load(path)

        self.assertEqual("app-0123abcd.js", manifest.lookup("app.js"))
        self.assertEqual(str(path), manifest.source_file)

    def test_load_rejects_missing_file(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            with self.assertRaises(ManifestLoadError):
                JsonManifest.load(Path(temp_dir) / "manifest.json")

    def test_load_rejects_invalid_json(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            path = Path(temp_dir) / "manifest.json"
            path.write_text("{not json", encoding="utf-8")
            with self.assertRaises(ManifestLoadError):
                JsonManifest.load(path)

    def test_load_rejects_malformed_assets_table(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            path = Path(temp_dir) / "manifest.json"
            for payload in ([], {"assets": []}, {"assets": {"app.js": 1}}):
                with self.subTest(payload=payload):
                    _write_json(path, payload)
                    with self.assertRaises(ManifestLoadError):
                        JsonManifest.load(path)

    def test_manifest_without_assets_is_empty(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            path = Path(temp_dir) / "manifest.json"
            _write_json(path, {"files": {}})
            manifest = JsonManifest.load(path, logger=logging.getLogger("test"))

        self.assertEqual(0, len(manifest))


if __name__ == "__main__":
    unittest.main()
