import unittest
from unittest import mock

from samegame_core.config import (
    GameConfig,
    config_from_env,
    debug_enabled,
    submit_timeout,
    submit_url,
)


class TestConfig(unittest.TestCase):
    def test_given_clean_env_when_loading_then_reference_board(self):
        with mock.patch.dict('os.environ', {}, clear=True):
            cfg = config_from_env()
            self.assertEqual(cfg, GameConfig(rows=15, cols=10, image_count=4, block_size=32))
            self.assertFalse(debug_enabled())
            self.assertEqual(submit_url(), '')
            self.assertEqual(submit_timeout(), 10.0)

    def test_given_overrides_when_loading_then_values_applied(self):
        env = {
            'SAMEGAME_ROWS': '8',
            'SAMEGAME_COLS': '6',
            'SAMEGAME_IMAGE_COUNT': '5',
            'SAMEGAME_BLOCK_SIZE': '48',
            'SAMEGAME_DEBUG': 'yes',
            'SAMEGAME_SUBMIT_URL': ' https://scores.example/exec ',
            'SAMEGAME_SUBMIT_TIMEOUT': '2.5',
        }
        with mock.patch.dict('os.environ', env, clear=True):
            cfg = config_from_env()
            self.assertEqual((cfg.rows, cfg.cols, cfg.image_count, cfg.block_size), (8, 6, 5, 48))
            self.assertTrue(debug_enabled())
            self.assertEqual(submit_url(), 'https://scores.example/exec')
            self.assertEqual(submit_timeout(), 2.5)

    def test_given_bad_board_values_when_loading_then_value_error(self):
        for env in ({'SAMEGAME_ROWS': 'ten'}, {'SAMEGAME_COLS': '0'}, {'SAMEGAME_IMAGE_COUNT': '-2'}):
            with mock.patch.dict('os.environ', env, clear=True):
                with self.assertRaises(ValueError):
                    config_from_env()

    def test_given_bad_timeout_when_loading_then_value_error(self):
        with mock.patch.dict('os.environ', {'SAMEGAME_SUBMIT_TIMEOUT': 'soon'}, clear=True):
            config_from_env()
            with self.assertRaises(ValueError):
                submit_timeout()


if __name__ == '__main__':
    unittest.main(verbosity=2)
