"""Pick the link with the lowest expected delay from observed response times."""

from __future__ import annotations

import argparse
import math
import random
from bisect import insort
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

Cdf = List[Tuple[float, float]]


class Link:
    """Response-time history and empirical distribution per public key."""

    def __init__(self) -> None:
        self.history: Dict[str, List[float]] = {}
        self.cdfs: Dict[str, Cdf] = {}

    def update_history(self, public_key: str, response_time: float) -> None:
        """Record a response time for a key and refresh its distribution."""
        self.history.setdefault(public_key, []).append(response_time)
        self._update_cdf(public_key)

    def _update_cdf(self, public_key: str) -> None:
        history = self.history.get(public_key)
        if history is None:
            return
        ordered = sorted(history)
        total = len(ordered)
        self.cdfs[public_key] = [
            (delay, rank / total) for rank, delay in enumerate(ordered, start=1)
        ]

    def __repr__(self) -> str:
        return f"Link(history={self.history!r})"


def sample_cdf(cdf: Sequence[Tuple[float, float]]) -> float:
    """Draw a delay from a distribution, using a fixed seed for determinism."""
    if not cdf:
        raise ValueError("cannot sample an empty distribution")
    p = random.Random(0).random()
    for delay, prob in cdf:
        if p <= prob:
            return delay
    return cdf[-1][0]


def estimate_expected_delay(cdf: Sequence[Tuple[float, float]], num_samples: int) -> float:
    """Average of ``num_samples`` draws from the distribution."""
    if num_samples == 0:
        return math.nan
    return sum(sample_cdf(cdf) for _ in range(num_samples)) / num_samples


def select_best_link(
    links: Mapping[int, Link], public_key: str, num_samples: int
) -> Optional[int]:
    """Return the id of the link with the lowest expected delay for a key."""
    best_link: Optional[int] = None
    best_delay = float("inf")
    for link_id, link in links.items():
        cdf = link.cdfs.get(public_key)
        if cdf is None:
            continue
        expected = estimate_expected_delay(cdf, num_samples)
        if expected < best_delay:
            best_delay = expected
            best_link = link_id
    return best_link


def _demo_links() -> Dict[int, Link]:
    samples = {
        1: [("public_key_1", 1.0), ("public_key_1", 1.5),
            ("public_key_2", 2.0), ("public_key_2", 2.5)],
        2: [("public_key_1", 3.0), ("public_key_1", 3.5),
            ("public_key_2", 4.0), ("public_key_2", 4.5)],
        3: [("public_key_1", 1.2), ("public_key_1", 1.3),
            ("public_key_2", 2.2), ("public_key_2", 2.3)],
    }
    links: Dict[int, Link] = {}
    for link_id, observations in samples.items():
        link = links[link_id] = Link()
        for key, delay in observations:
            link.update_history(key, delay)
    return links


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the link selection on sample data."""
    parser = argparse.ArgumentParser(
        description="Select the best link for a public key from sample data."
    )
    parser.parse_args(argv)
    select_best_link(_demo_links(), "public_key_1", 1000)
    return 0