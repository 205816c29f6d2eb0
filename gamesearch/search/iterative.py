"""Iterative deepening alpha-beta and its wall-clock bounded driver."""

from __future__ import annotations

import itertools
import logging
import multiprocessing as mp
import sys
import time
from dataclasses import dataclass
from multiprocessing.connection import Connection
from typing import Any, Generic, Iterator, Optional, TypeVar

from gamesearch.errors import BudgetTooSmallError
from gamesearch.games.turn_based_game import Game
from .bounded import alpha_beta_depth_search
from .utils import root_successors

logger = logging.getLogger(__name__)

S = TypeVar("S")
A = TypeVar("A")

_RESULT = "result"
_ERROR = "error"
_DONE = "done"


def iterative_alpha_beta(
    game: Game[S, A],
    state: S,
    start_depth: int = 0,
    max_depth: Optional[int] = None,
) -> Iterator[A]:
    """
    Yield ``alpha_beta_depth_search(game, state, d)`` for d = start_depth, ...

    Every element is searched from scratch. The sequence is infinite unless
    ``max_depth`` is given; calling the function again starts over.
    """
    if max_depth is None:
        depths: Iterator[int] = itertools.count(start_depth)
    else:
        depths = iter(range(start_depth, max_depth + 1))
    for depth in depths:
        yield alpha_beta_depth_search(game, state, depth)


@dataclass
class DeepeningResult(Generic[A]):
    move: A
    depth: Optional[int]  # None when the fallback move was used
    elapsed: float
    timed_out: bool


def _deepening_worker(
    conn: Connection,
    game: Game[Any, Any],
    state: Any,
    max_depth: Optional[int],
) -> None:
    """Search ever deeper, sending each finished depth's move down ``conn``."""
    try:
        for depth, move in enumerate(iterative_alpha_beta(game, state, max_depth=max_depth)):
            conn.send((_RESULT, depth, move))
        conn.send((_DONE, None, None))
    except Exception as exc:  # reported to and re-raised by the parent
        try:
            conn.send((_ERROR, None, exc))
        except Exception:
            conn.send((_ERROR, None, RuntimeError(repr(exc))))
    finally:
        conn.close()


def _mp_context() -> Any:
    """
    Fork on Linux, so the worker inherits the game object instead of
    unpickling it. Elsewhere fork is unsafe (macOS) or missing (Windows) and
    spawn is used, which requires the game and state to be picklable.
    """
    if sys.platform.startswith("linux"):
        return mp.get_context("fork")
    return mp.get_context("spawn")


def time_limited_search(
    game: Game[S, A],
    state: S,
    seconds: Optional[float] = None,
    *,
    deadline: Optional[float] = None,
    fallback: Optional[A] = None,
    max_depth: Optional[int] = None,
) -> DeepeningResult[A]:
    """
    Deepest iterative-deepening result that completes before a deadline.

    The search runs in a separate process. Each completed depth is published
    as a whole message, so only fully computed moves are ever seen here.
    When the deadline passes, the process is terminated and whatever it was
    computing is thrown away.

    Args:
        game: rules of the game; must be picklable off Linux.
        state: root state.
        seconds: time budget, used when ``deadline`` is not given.
        deadline: absolute ``time.monotonic()`` value to stop at.
        fallback: move to return if not even depth 0 finishes.
        max_depth: stop early once this depth is complete.

    Raises:
        NoLegalMovesError: if ``state`` has no legal moves.
        BudgetTooSmallError: if no depth completed and there is no fallback.
        ValueError: if neither a positive ``seconds`` nor ``deadline`` is given.
    """
    start = time.monotonic()
    if deadline is None:
        if seconds is None or seconds <= 0:
            raise ValueError(f"Time limit must be positive, got {seconds!r}")
        deadline = start + seconds
    root_successors(game, state)

    ctx = _mp_context()
    recv_conn, send_conn = ctx.Pipe(duplex=False)
    proc = ctx.Process(
        target=_deepening_worker,
        args=(send_conn, game, state, max_depth),
        daemon=True,
    )
    proc.start()
    send_conn.close()

    best_move: Optional[A] = None
    best_depth: Optional[int] = None
    timed_out = False
    try:
        while True:
            remaining = deadline - time.monotonic()
            if remaining <= 0 or not recv_conn.poll(remaining):
                timed_out = True
                break
            try:
                tag, depth, payload = recv_conn.recv()
            except EOFError:
                raise RuntimeError("Search worker exited without reporting a result") from None
            if tag == _ERROR:
                raise payload
            if tag == _DONE:
                break
            best_move, best_depth = payload, depth
            logger.debug("Depth %d complete after %.3fs: %r", depth, time.monotonic() - start, payload)
    finally:
        if proc.is_alive():
            proc.terminate()
        proc.join()
        recv_conn.close()

    elapsed = time.monotonic() - start
    if timed_out:
        logger.info(
            "Search cancelled after %.3fs; deepest completed depth: %s", elapsed, best_depth
        )

    if best_depth is None:
        if fallback is None:
            raise BudgetTooSmallError(seconds if seconds is not None else deadline - start)
        logger.warning("No depth completed in time, using fallback move %r", fallback)
        return DeepeningResult(move=fallback, depth=None, elapsed=elapsed, timed_out=timed_out)

    return DeepeningResult(move=best_move, depth=best_depth, elapsed=elapsed, timed_out=timed_out)


def time_limited_alpha_beta(
    game: Game[S, A],
    state: S,
    seconds: float,
    fallback: Optional[A] = None,
) -> A:
    """Move from the deepest alpha-beta search that fits in ``seconds``."""
    return time_limited_search(game, state, seconds, fallback=fallback).move
