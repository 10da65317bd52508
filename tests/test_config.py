import os
import tempfile
import unittest
import warnings

import yaml

from rubiks.core.config import (
    Config, CubeConfig, RunnerConfig, ViewConfig, create_default_config, load_config,
    validate_config,
)


class TestConfigObjects(unittest.TestCase):
    def test_defaults(self):
        config = Config()
        self.assertEqual(config.cube.size, 3)
        self.assertEqual(config.view.camera_offset, 5.0)
        self.assertIsNone(config.runner.seed)

    def test_from_dict_partial(self):
        config = Config.from_dict({"cube": {"size": 4}, "runner": {"seed": 3}})
        self.assertEqual(config.cube.size, 4)
        self.assertEqual(config.runner.seed, 3)
        self.assertEqual(config.view.screen_distance, 600.0)

    def test_round_trip(self):
        config = Config.from_dict({"view": {"yaw": 10.0}, "runner": {"session_name": "x"}})
        self.assertEqual(Config.from_dict(config.to_dict()), config)

    def test_invalid_values(self):
        with self.assertRaises(ValueError):
            CubeConfig(size=0)
        with self.assertRaises(ValueError):
            ViewConfig(screen_distance=-1)
        with self.assertRaises(ValueError):
            ViewConfig(camera_offset=1.0)
        with self.assertRaises(ValueError):
            ViewConfig(scaling=2.0, camera_offset=3.0)
        with self.assertRaises(ValueError):
            RunnerConfig(scramble_moves=-1)
        with self.assertRaises(ValueError):
            RunnerConfig(seed="abc")

    def test_close_camera_warns(self):
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            ViewConfig(camera_offset=2.0)
        self.assertEqual(len(caught), 1)


class TestConfigFiles(unittest.TestCase):
    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.path = os.path.join(self.tmp.name, "config.yaml")

    def tearDown(self):
        self.tmp.cleanup()

    def _write(self, text):
        with open(self.path, "w", encoding="utf-8") as f:
            f.write(text)

    def test_create_and_load_default(self):
        created = create_default_config(self.path)
        self.assertEqual(load_config(self.path), created)
        self.assertEqual(created.runner.seed, 0)

    def test_load(self):
        self._write("cube:\n  size: 2\nview:\n  pitch: -40\nrunner:\n  seed: 11\n")
        config = load_config(self.path)
        self.assertEqual(config.cube.size, 2)
        self.assertEqual(config.view.pitch, -40)
        self.assertEqual(config.runner.seed, 11)

    def test_missing_file(self):
        with self.assertRaises(FileNotFoundError):
            load_config(os.path.join(self.tmp.name, "missing.yaml"))

    def test_empty_file(self):
        self._write("")
        with self.assertRaises(ValueError):
            load_config(self.path)

    def test_not_a_mapping(self):
        self._write("- 1\n- 2\n")
        with self.assertRaises(ValueError):
            load_config(self.path)

    def test_unknown_key(self):
        self._write("cube:\n  colour: red\n")
        with self.assertRaises(ValueError):
            load_config(self.path)

    def test_malformed_yaml(self):
        self._write("cube: [1, 2\n")
        with self.assertRaises(yaml.YAMLError):
            load_config(self.path)


class TestValidateConfig(unittest.TestCase):
    def test_default_file_config_is_clean(self):
        config = Config(runner=RunnerConfig(seed=0))
        self.assertEqual(validate_config(config), [])

    def test_missing_seed_warns(self):
        issues = validate_config(Config())
        self.assertTrue(any(i.startswith("WARNING") and "seed" in i for i in issues))

    def test_errors(self):
        config = Config(runner=RunnerConfig(session_name="", seed=1))
        issues = validate_config(config)
        self.assertIn("ERROR: Session name is required", issues)

    def test_steep_pitch(self):
        config = Config(view=ViewConfig(pitch=120.0), runner=RunnerConfig(seed=1))
        self.assertEqual(len(validate_config(config)), 1)


if __name__ == "__main__":
    unittest.main()
