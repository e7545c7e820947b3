import json
import logging
import tempfile
import unittest
from pathlib import Path

from app_config_schema import AssetSettings
from asset_paths.config import AssetPathConfig
from asset_paths.errors import AssetPathConfigurationError, ManifestLoadError
from asset_paths.manifest import JsonManifest
from asset_paths.pipeline import DirectoryPipeline

_LOGGER = logging.getLogger("test")


def _write_manifest(path: Path, assets: dict[str, str]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps({"assets": assets}), encoding="utf-8")


class AssetPathConfigTests(unittest.TestCase):
    def test_defaults(self) -> None:
        config = AssetPathConfig()
        self.assertFalse(config.digest)
        self.assertEqual("/assets", config.prefix)
        self.assertEqual("./public", config.public_path)
        self.assertFalse(config.has_lookup_backend)

    def test_rejects_invalid_values(self) -> None:
        for kwargs in ({"digest": "yes"}, {"prefix": None}, {"public_path": " "}):
            with self.subTest(kwargs=kwargs):
                with self.assertRaises(AssetPathConfigurationError):
                    AssetPathConfig(**kwargs)


class AssetPathConfigFromSettingsTests(unittest.TestCase):
    def test_explicit_manifest_and_source_dirs(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            root = Path(temp_dir)
            manifest_file = root / "build" / "manifest.json"
            _write_manifest(manifest_file, {"app.js": "app-1.js"})
            source_dir = root / "app" / "assets"
            source_dir.mkdir(parents=True)

            config = AssetPathConfig.from_settings(
                AssetSettings(
                    digest=True,
                    prefix="/static",
                    public_path=str(root / "public"),
                    manifest_file=str(manifest_file),
                    source_dirs=(str(source_dir),),
                ),
                logger=_LOGGER,
            )

        self.assertTrue(config.digest)
        self.assertEqual("/static", config.prefix)
        self.assertIsInstance(config.manifest, JsonManifest)
        self.assertEqual("app-1.js", config.manifest.lookup("app.js"))
        self.assertIsInstance(config.pipeline_lookup, DirectoryPipeline)

    def test_default_manifest_under_public_path_is_used(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            public = Path(temp_dir) / "public"
            _write_manifest(public / "assets" / "manifest.json", {"app.js": "app-2.js"})

            config = AssetPathConfig.from_settings(
                AssetSettings(public_path=str(public)),
                logger=_LOGGER,
            )

        self.assertEqual("app-2.js", config.manifest.lookup("app.js"))
        self.assertIsNone(config.pipeline_lookup)

    def test_missing_default_manifest_leaves_no_backend(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            with self.assertLogs(_LOGGER, level=logging.WARNING):
                config = AssetPathConfig.from_settings(
                    AssetSettings(public_path=temp_dir),
                    logger=_LOGGER,
                )

        self.assertFalse(config.has_lookup_backend)

    def test_missing_explicit_manifest_fails(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            with self.assertRaises(ManifestLoadError):
                AssetPathConfig.from_settings(
                    AssetSettings(manifest_file=str(Path(temp_dir) / "nope.json")),
                    logger=_LOGGER,
                )

    def test_missing_source_dir_fails(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            with self.assertRaises(AssetPathConfigurationError):
                AssetPathConfig.from_settings(
                    AssetSettings(
                        public_path=temp_dir,
                        source_dirs=(str(Path(temp_dir) / "missing"),),
                    ),
                    logger=_LOGGER,
                )


if __name__ == "__main__":
    unittest.main()
