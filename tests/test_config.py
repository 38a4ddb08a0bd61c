import unittest

from demo_movie.core import DEFAULT_COMMANDS, MovieConfig


def make_config(**overrides):
    values = dict(
        demo_path="/demos/match.dem",
        game_dir="/game",
        raw_files_destination="/raw",
        output_destination="/out",
        output_filename="movie",
        start_tick=1000,
        end_tick=2000,
    )
    values.update(overrides)
    return MovieConfig(**values)


class MovieConfigTests(unittest.TestCase):
    def test_defaults(self):
        cfg = make_config()
        self.assertEqual(cfg.user_cfg, DEFAULT_COMMANDS)
        self.assertEqual(cfg.focus_steam_id, 0)
        self.assertFalse(cfg.use_virtualdub)

    def test_lists_are_normalized_to_tuples(self):
        cfg = make_config(blocked_steam_ids=[3, 1], highlight_steam_ids=[2], user_cfg=["a"])
        self.assertEqual(cfg.blocked_steam_ids, (3, 1))
        self.assertEqual(cfg.highlight_steam_ids, (2,))
        self.assertEqual(cfg.user_cfg, ("a",))

    def test_start_must_be_before_end(self):
        with self.assertRaises(ValueError):
            make_config(start_tick=2000, end_tick=2000)
        with self.assertRaises(ValueError):
            make_config(start_tick=3000, end_tick=2000)

    def test_negative_values_rejected(self):
        with self.assertRaises(ValueError):
            make_config(start_tick=-1)
        with self.assertRaises(ValueError):
            make_config(blocked_steam_ids=[5, -2])
        with self.assertRaises(ValueError):
            make_config(highlight_steam_ids=[-1])
        with self.assertRaises(ValueError):
            make_config(frame_rate=0)

    def test_config_is_immutable(self):
        cfg = make_config()
        with self.assertRaises(Exception):
            cfg.start_tick = 5


if __name__ == "__main__":
    unittest.main()
