"""Sharded equity runs across worker processes."""

import logging
import threading
from concurrent.futures import FIRST_COMPLETED, ProcessPoolExecutor, wait
from dataclasses import dataclass
from random import Random
from typing import Sequence

import numpy as np
from tqdm import tqdm

from poker.cards import Card
from poker.errors import SimulationCancelled
from poker.validation import validate_cards
from simulation.equity import DEFAULT_TRIALS, EquityResult, EquitySimulator, TiePolicy

logger = logging.getLogger(__name__)

# How often the parent checks the cancel event while shards run
CANCEL_POLL_SECONDS = 0.05


@dataclass(frozen=True)
class Shard:
    """One worker's share of a run."""

    hole_cards: tuple[Card, ...]
    community: tuple[Card, ...]
    trials: int
    seed: int
    tie_policy: TiePolicy


def split_trials(trials: int, workers: int) -> list[int]:
    """Split trials into near-equal positive chunks (at most one per trial)."""
    if trials <= 0:
        raise ValueError(f"trials must be positive, got {trials}")
    if workers <= 0:
        raise ValueError(f"workers must be positive, got {workers}")
    workers = min(workers, trials)
    chunk, extra = divmod(trials, workers)
    return [chunk + (1 if i < extra else 0) for i in range(workers)]


def shard_seeds(seed: int | None, count: int) -> list[int]:
    """Per-shard seeds drawn from one root generator."""
    rng = np.random.default_rng(seed)
    return [int(value) for value in rng.integers(0, 2**63 - 1, size=count)]


def run_shard(shard: Shard, cancel: threading.Event | None = None) -> EquityResult:
    """Worker entry point; must stay importable at module level for pickling."""
    simulator = EquitySimulator(
        trials=shard.trials,
        tie_policy=shard.tie_policy,
        rng=Random(shard.seed),
    )
    return simulator.run(shard.hole_cards, shard.community, cancel=cancel)


def run_parallel(
    hole_cards: Sequence[Card],
    community: Sequence[Card],
    trials: int = DEFAULT_TRIALS,
    workers: int = 1,
    seed: int | None = None,
    tie_policy: TiePolicy = TiePolicy.STRICT,
    show_progress: bool = False,
    cancel: threading.Event | None = None,
) -> EquityResult:
    """Run ``trials`` split over ``workers`` processes and sum the counts.

    Trials share no state, so each shard gets its own deck and random stream.
    Input is validated once, before any process is started.

    Raises:
        InvalidCardCount, DuplicateCards: before any shard starts
        SimulationCancelled: ``cancel`` was set; unfinished shards are dropped
    """
    hole, board = validate_cards(hole_cards, community)
    tie_policy = TiePolicy(tie_policy)

    sizes = split_trials(trials, workers)
    seeds = shard_seeds(seed, len(sizes))
    shards = [
        Shard(hole_cards=hole, community=board, trials=size, seed=shard_seed, tie_policy=tie_policy)
        for size, shard_seed in zip(sizes, seeds)
    ]
    logger.debug("Running %d trials in %d shard(s)", trials, len(shards))

    total = EquityResult(wins=0, ties=0, losses=0, tie_policy=tie_policy)

    if cancel is not None and cancel.is_set():
        raise SimulationCancelled(0)

    # A single shard runs in-process and checks the event between trials
    if len(shards) == 1:
        return total.merge(run_shard(shards[0], cancel=cancel))

    executor = ProcessPoolExecutor(max_workers=len(shards))
    progress = tqdm(total=len(shards), desc="Simulating", unit="shards", disable=not show_progress)
    cancelled = False
    try:
        pending = {executor.submit(run_shard, shard) for shard in shards}
        while pending:
            if cancel is not None and cancel.is_set():
                cancelled = True
                for future in pending:
                    future.cancel()
                logger.info("Parallel run cancelled after %d trials", total.trials)
                raise SimulationCancelled(total.trials)

            timeout = CANCEL_POLL_SECONDS if cancel is not None else None
            done, pending = wait(pending, timeout=timeout, return_when=FIRST_COMPLETED)
            for future in done:
                total = total.merge(future.result())
                progress.update(1)
    finally:
        progress.close()
        executor.shutdown(wait=not cancelled, cancel_futures=True)

    return total
