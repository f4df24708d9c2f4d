"""
================================================================================
Visual Comparison
================================================================================

Screenshot-vs-baseline comparison with a pixel tolerance.

Playwright's Python API has no `to_have_screenshot`, so the suite keeps
baselines under `ui_testing/snapshots/` and compares them with Pillow:

    - A pixel counts as different when any RGBA channel differs by more
      than `threshold * 255`.
    - The comparison passes while the number of different pixels is at most
      `max_diff_pixels`.
    - A missing baseline is written from the actual screenshot and the
      comparison passes (with a warning), so the first run seeds baselines.
    - `visual.update_baselines` / `--update-snapshots` overwrites baselines.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import io
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import allure
from loguru import logger
from PIL import Image, ImageChops
from playwright.async_api import Locator, Page

from .config_loader import ConfigLoader
from .errors import VisualMismatchError


SNAPSHOT_DIR = Path(__file__).parent.parent / "snapshots"


@dataclass
class VisualResult:
    """Outcome of one baseline comparison."""
    name: str
    diff_pixels: int
    max_diff_pixels: int
    baseline_created: bool = False
    diff_path: Optional[Path] = None

    @property
    def passed(self) -> bool:
        return self.diff_pixels <= self.max_diff_pixels


def count_diff_pixels(
    actual: Image.Image,
    expected: Image.Image,
    threshold: float = 0.2,
) -> int:
    """
    Count pixels that differ between two images.

    Images of different size are entirely different: every pixel of the
    larger canvas counts.
    """
    if actual.size != expected.size:
        width = max(actual.width, expected.width)
        height = max(actual.height, expected.height)
        return width * height

    diff = ImageChops.difference(actual.convert("RGBA"), expected.convert("RGBA"))
    # Per-pixel maximum over the channels, then count values above the limit
    channel_max = diff.getchannel(0)
    for band in diff.split()[1:]:
        channel_max = ImageChops.lighter(channel_max, band)
    limit = int(threshold * 255)
    return sum(channel_max.histogram()[limit + 1:])


def compare_with_baseline(
    actual_png: bytes,
    name: str,
    max_diff_pixels: Optional[int] = None,
    threshold: Optional[float] = None,
    snapshot_dir: Optional[Path] = None,
    update: Optional[bool] = None,
) -> VisualResult:
    """
    Compare PNG bytes with the stored baseline `<snapshot_dir>/<name>.png`.

    Args:
        actual_png: Screenshot bytes
        name: Baseline name (without extension)
        max_diff_pixels: Allowed different pixels (config `visual.max_diff_pixels`)
        threshold: Per-channel tolerance 0..1 (config `visual.threshold`)
        snapshot_dir: Baseline directory (defaults to SNAPSHOT_DIR)
        update: Overwrite the baseline (config `visual.update_baselines`)

    Returns:
        VisualResult (not raising; see assert_matches_baseline)
    """
    config = ConfigLoader()
    if max_diff_pixels is None:
        max_diff_pixels = config.max_diff_pixels
    if threshold is None:
        threshold = config.diff_threshold
    if update is None:
        update = config.update_baselines

    snapshot_dir = snapshot_dir or SNAPSHOT_DIR
    snapshot_dir.mkdir(parents=True, exist_ok=True)
    baseline_path = snapshot_dir / f"{name}.png"

    if update or not baseline_path.exists():
        baseline_path.write_bytes(actual_png)
        logger.warning(f"Baseline written: {baseline_path}")
        return VisualResult(
            name=name,
            diff_pixels=0,
            max_diff_pixels=max_diff_pixels,
            baseline_created=True,
        )

    with Image.open(io.BytesIO(actual_png)) as actual, Image.open(baseline_path) as expected:
        diff_pixels = count_diff_pixels(actual, expected, threshold)
        result = VisualResult(
            name=name,
            diff_pixels=diff_pixels,
            max_diff_pixels=max_diff_pixels,
        )

        if not result.passed:
            result.diff_path = snapshot_dir / f"{name}-diff.png"
            if actual.size == expected.size:
                ImageChops.difference(
                    actual.convert("RGB"), expected.convert("RGB")
                ).save(result.diff_path)
            else:
                actual.save(result.diff_path)

    logger.debug(
        f"Visual compare '{name}': {diff_pixels} different pixels "
        f"(allowed {max_diff_pixels})"
    )
    return result


async def assert_matches_baseline(
    target: "Locator | Page",
    name: str,
    max_diff_pixels: Optional[int] = None,
    **kwargs,
) -> VisualResult:
    """
    Screenshot a locator or page and compare it with its baseline.

    Raises:
        VisualMismatchError: When more than `max_diff_pixels` pixels differ
    """
    with allure.step(f"Compare screenshot with baseline: {name}"):
        actual_png = await target.screenshot(animations="disabled")
        result = compare_with_baseline(
            actual_png, name, max_diff_pixels=max_diff_pixels, **kwargs
        )

        if not result.passed:
            allure.attach(
                actual_png,
                name=f"{name} (actual)",
                attachment_type=allure.attachment_type.PNG,
            )
            if result.diff_path and result.diff_path.exists():
                allure.attach.file(
                    str(result.diff_path),
                    name=f"{name} (diff)",
                    attachment_type=allure.attachment_type.PNG,
                )
            raise VisualMismatchError(
                f"Screenshot '{name}' differs from baseline by "
                f"{result.diff_pixels} pixels (allowed {result.max_diff_pixels})"
            )

    return result


__all__ = [
    "SNAPSHOT_DIR",
    "VisualResult",
    "count_diff_pixels",
    "compare_with_baseline",
    "assert_matches_baseline",
]
