#!/usr/bin/env python3
from __future__ import annotations

import logging
import math
import statistics as stats
import time
from dataclasses import dataclass
from typing import List, Tuple

from ttt_engine.game import replay
from ttt_engine.reachable import reachable_states
from ttt_engine.settings import configure_logging

DRAW_GAME = [1, 2, 3, 5, 6, 4, 7, 9, 8]


def ci95(values: List[float]) -> Tuple[float, float]:
    if not values:
        return (float("nan"), float("nan"))
    m = stats.fmean(values)
    s = stats.pstdev(values) if len(values) > 1 else 0.0
    z = 1.96
    half = z * (s / math.sqrt(len(values)))
    return m, half


@dataclass
class Config:
    rounds: int = 10
    replays_per_round: int = 10_000


def main() -> int:
    configure_logging()
    cfg = Config()
    replay_times: List[float] = []
    enum_times: List[float] = []
    for _ in range(cfg.rounds):
        t0 = time.perf_counter()
        for _ in range(cfg.replays_per_round):
            replay(DRAW_GAME)
        t1 = time.perf_counter()
        replay_times.append((t1 - t0) / cfg.replays_per_round)
        t2 = time.perf_counter()
        states = reachable_states()
        t3 = time.perf_counter()
        enum_times.append(t3 - t2)
    m_replay, h_replay = ci95(replay_times)
    m_enum, h_enum = ci95(enum_times)
    logging.info("full-game replay: mean=%.2fus ± %.2fus (95%% CI, N=%d)",
                 m_replay * 1e6, h_replay * 1e6, cfg.rounds)
    logging.info("reachable_states (%d boards): mean=%.4fs ± %.4fs (95%% CI, N=%d)",
                 len(states), m_enum, h_enum, cfg.rounds)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
