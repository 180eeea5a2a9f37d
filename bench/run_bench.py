from __future__ import annotations

import argparse
import csv
import logging
import os
import time
from dataclasses import dataclass
from typing import Callable, Optional

from egcommit import (
    Commitment,
    DecryptionKey,
    SeededRandom,
    available_groups,
    make_group,
    system_random,
)
from egcommit.codec import ciphertext_len, commitment_len, open_len
from egcommit.interfaces import RandomSource

logger = logging.getLogger("bench")

FIELDNAMES = [
    "group",
    "op",
    "warmup",
    "rep",
    "elapsed_ns",
    "element_len_bytes",
    "scalar_len_bytes",
    "ciphertext_len_bytes",
    "commitment_len_bytes",
    "open_len_bytes",
]


@dataclass(frozen=True)
class BenchConfig:
    group: str
    warmup: int
    reps: int
    out: str
    seed: Optional[bytes]


def _timed_ns(fn: Callable[[], object]) -> int:
    t0 = time.perf_counter_ns()
    fn()
    return time.perf_counter_ns() - t0


def _rng(cfg: BenchConfig) -> RandomSource:
    # a fixed seed makes runs repeatable; timings are unaffected
    if cfg.seed is None:
        return system_random
    return SeededRandom(cfg.seed)


def run(cfg: BenchConfig) -> None:
    group = make_group(cfg.group)
    rng = _rng(cfg)
    sizes = {
        "element_len_bytes": group.element_len,
        "scalar_len_bytes": group.scalar_len,
        "ciphertext_len_bytes": ciphertext_len(group),
        "commitment_len_bytes": commitment_len(group),
        "open_len_bytes": open_len(group),
    }

    out_dir = os.path.dirname(cfg.out)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)

    logger.info(
        "benchmarking %s: %d warmup + %d measured reps -> %s",
        group.name,
        cfg.warmup,
        cfg.reps,
        cfg.out,
    )

    with open(cfg.out, "w", newline="") as f:
        w = csv.DictWriter(f, fieldnames=FIELDNAMES)
        w.writeheader()

        for i in range(cfg.warmup + cfg.reps):
            is_warmup = 1 if i < cfg.warmup else 0
            rep = i if is_warmup else i - cfg.warmup

            def _row(op: str, elapsed_ns: int) -> None:
                w.writerow(
                    {
                        "group": group.name,
                        "op": op,
                        "warmup": is_warmup,
                        "rep": rep,
                        "elapsed_ns": elapsed_ns,
                        **sizes,
                    }
                )

            h = {}

            # ------------------------------------------------------------
            # ElGamal encryption
            # ------------------------------------------------------------
            def _do_keygen():
                h["dk"] = DecryptionKey.new(rng, group)
                h["ek"] = h["dk"].encryption_key()

            _row("KeyGen", _timed_ns(_do_keygen))
            dk, ek = h["dk"], h["ek"]

            m1 = group.random_element(rng)
            m2 = group.random_element(rng)

            def _do_encrypt():
                h["ct1"] = ek.encrypt(m1, rng)

            _row("Encrypt", _timed_ns(_do_encrypt))
            ct1 = h["ct1"]
            ct2 = ek.encrypt(m2, rng)

            def _do_decrypt():
                h["pt"] = dk.decrypt(ct1)

            _row("Decrypt", _timed_ns(_do_decrypt))

            def _do_rerandomise():
                h["fresh"] = ek.rerandomise(ct1, rng)

            _row("Rerandomise", _timed_ns(_do_rerandomise))

            def _do_hom_add():
                h["sum"] = ct1 + ct2

            _row("HomAdd", _timed_ns(_do_hom_add))

            # ------------------------------------------------------------
            # Commitments
            # ------------------------------------------------------------
            m = group.random_scalar(rng)

            def _do_commit():
                h["open"], h["commitment"] = Commitment.commit(m, rng)

            _row("Commit", _timed_ns(_do_commit))
            opening, commitment = h["open"], h["commitment"]

            def _do_verify():
                h["ok"] = commitment.verify(opening)

            _row("Verify", _timed_ns(_do_verify))
            ok = h["ok"]

            def _do_commit_rerandomise():
                h["new_open"] = commitment.rerandomise(opening, rng)

            _row("CommitRerandomise", _timed_ns(_do_commit_rerandomise))

            # ------------------------------------------------------------
            # Correctness check (measured reps only)
            # ------------------------------------------------------------
            if not is_warmup:
                assert h["pt"] == m1
                assert dk.decrypt(h["fresh"]) == m1
                assert dk.decrypt(h["sum"]) == m1 + m2
                assert ok
                assert commitment.verify(h["new_open"])

    logger.info("wrote %d rows to %s", 8 * (cfg.warmup + cfg.reps), cfg.out)


def main() -> None:
    ap = argparse.ArgumentParser(description="ElGamal encryption / commitment benchmark harness.")

    ap.add_argument("--group", choices=list(available_groups()), default="ed25519", help="Group to benchmark")
    ap.add_argument("--warmup", type=int, default=20)
    ap.add_argument("--reps", type=int, default=200)
    ap.add_argument("--out", type=str, default="bench/outputs/out.csv")
    ap.add_argument("--seed", type=str, default=None, help="Hex seed for deterministic randomness")
    ap.add_argument("--log-level", type=str, default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = ap.parse_args()

    logging.basicConfig(level=args.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    cfg = BenchConfig(
        group=args.group,
        warmup=args.warmup,
        reps=args.reps,
        out=args.out,
        seed=bytes.fromhex(args.seed) if args.seed is not None else None,
    )
    run(cfg)


if __name__ == "__main__":
    main()
