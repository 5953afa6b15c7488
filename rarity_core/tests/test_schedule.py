"""Tests for emission schedule configuration."""

import os
import unittest
from unittest import mock

from rarity_core.schedule import (
    COIN_VALUE,
    DEFAULT_SCHEDULE,
    DIFFCHANGE_INTERVAL,
    SUBSIDY_HALVING_INTERVAL,
    EmissionSchedule,
    ScheduleError,
    SubsidySchedule,
)


class EmissionScheduleTests(unittest.TestCase):
    def test_default_constants(self) -> None:
        self.assertEqual(DEFAULT_SCHEDULE.halving_interval, 210_000)
        self.assertEqual(DEFAULT_SCHEDULE.diffchange_interval, 2_016)
        self.assertEqual(DEFAULT_SCHEDULE.initial_subsidy, 5_000_000_000)
        self.assertNotEqual(SUBSIDY_HALVING_INTERVAL % DIFFCHANGE_INTERVAL, 0)

    def test_subsidy_halves_each_epoch(self) -> None:
        self.assertEqual(DEFAULT_SCHEDULE.subsidy(0), 50 * COIN_VALUE)
        self.assertEqual(DEFAULT_SCHEDULE.subsidy(1), 25 * COIN_VALUE)
        self.assertEqual(DEFAULT_SCHEDULE.subsidy(4), 312_500_000)
        self.assertEqual(DEFAULT_SCHEDULE.subsidy(32), 1)
        self.assertEqual(DEFAULT_SCHEDULE.subsidy(33), 0)
        self.assertEqual(DEFAULT_SCHEDULE.subsidy(64), 0)

    def test_negative_epoch_rejected(self) -> None:
        with self.assertRaises(ScheduleError):
            DEFAULT_SCHEDULE.subsidy(-1)

    def test_parameters_must_be_positive(self) -> None:
        for kwargs in (
            {"halving_interval": 0},
            {"diffchange_interval": -2016},
            {"initial_subsidy": 0},
        ):
            with self.subTest(kwargs=kwargs):
                with self.assertRaises(ScheduleError):
                    EmissionSchedule(**kwargs)

    def test_to_dict(self) -> None:
        schedule = EmissionSchedule(halving_interval=10, diffchange_interval=3, initial_subsidy=64)
        self.assertEqual(
            schedule.to_dict(),
            {"halving_interval": 10, "diffchange_interval": 3, "initial_subsidy": 64},
        )

    def test_satisfies_subsidy_protocol(self) -> None:
        def first_block_reward(schedule: SubsidySchedule) -> int:
            return schedule.subsidy(0)

        self.assertEqual(first_block_reward(DEFAULT_SCHEDULE), 50 * COIN_VALUE)


class EmissionScheduleEnvTests(unittest.TestCase):
    def test_defaults_when_unset(self) -> None:
        with mock.patch.dict(os.environ, {}, clear=True):
            self.assertEqual(EmissionSchedule.from_env(), DEFAULT_SCHEDULE)

    def test_blank_values_fall_back(self) -> None:
        with mock.patch.dict(os.environ, {"RARITY_HALVING_INTERVAL": "  "}, clear=True):
            self.assertEqual(EmissionSchedule.from_env(), DEFAULT_SCHEDULE)

    def test_overrides(self) -> None:
        env = {
            "RARITY_HALVING_INTERVAL": "150",
            "RARITY_DIFFCHANGE_INTERVAL": " 144 ",
            "RARITY_INITIAL_SUBSIDY": "5000000000",
        }
        with mock.patch.dict(os.environ, env, clear=True):
            schedule = EmissionSchedule.from_env()
        self.assertEqual(schedule.halving_interval, 150)
        self.assertEqual(schedule.diffchange_interval, 144)
        self.assertEqual(schedule.initial_subsidy, 50 * COIN_VALUE)

    def test_invalid_values_fail_loudly(self) -> None:
        for env in (
            {"RARITY_HALVING_INTERVAL": "ten"},
            {"RARITY_DIFFCHANGE_INTERVAL": "2016.5"},
            {"RARITY_INITIAL_SUBSIDY": "-1"},
        ):
            with self.subTest(env=env):
                with mock.patch.dict(os.environ, env, clear=True):
                    with self.assertRaises(ScheduleError):
                        EmissionSchedule.from_env()


if __name__ == "__main__":
    unittest.main()
