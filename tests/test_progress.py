"""Tests for the decorative progress bar."""

import io
import random

import pytest

from advisory_scan.progress import ProgressIndicator


def test_run_reaches_total():
    indicator = ProgressIndicator(step=3, min_delay_ms=0, max_delay_ms=0, file=io.StringIO())

    indicator.run()

    assert indicator.progress == 100


def test_step_is_clamped_to_total():
    indicator = ProgressIndicator(step=40, min_delay_ms=0, max_delay_ms=0, file=io.StringIO())

    indicator.run()

    assert indicator.progress == 100


def test_background_thread_completes():
    indicator = ProgressIndicator(
        step=25, min_delay_ms=1, max_delay_ms=2, file=io.StringIO(), rng=random.Random(7)
    )

    indicator.start()
    indicator.wait(timeout=5)

    assert indicator.progress == 100
    assert not indicator.cancelled


def test_cancel_stops_early():
    indicator = ProgressIndicator(step=1, min_delay_ms=1000, max_delay_ms=1000, file=io.StringIO())

    indicator.start()
    indicator.cancel()

    assert indicator.cancelled
    assert indicator.progress < 100


def test_step_must_be_positive():
    with pytest.raises(ValueError):
        ProgressIndicator(step=0)
