"""
CLI argument parsing for the moeadkit command.
"""
from __future__ import annotations

import argparse
from typing import Any, Sequence

from moeadkit.engine.algorithm.components.neighborhoods import SimilarityMeasure
from moeadkit.engine.config.loader import load_config_file
from moeadkit.foundation.problem import PROBLEMS


def _positive_int(value: str) -> int:
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"expected an integer, got {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {parsed}")
    return parsed


# Config-file aware parser: values from --config become defaults, CLI flags override them.
def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    pre_parser = argparse.ArgumentParser(add_help=False)
    pre_parser.add_argument(
        "--config",
        help="Path to a YAML/JSON MOEA/D configuration. CLI arguments override file values.",
    )
    pre_args, _ = pre_parser.parse_known_args(argv)
    file_cfg: dict[str, Any] = load_config_file(pre_args.config) if pre_args.config else {}

    def _default(key: str, fallback):
        return file_cfg.get(key, fallback)

    parser = argparse.ArgumentParser(
        prog="moeadkit",
        description="Run decomposition-based multi-objective optimization (MOEA/D) on a benchmark problem.",
        parents=[pre_parser],
    )
    parser.add_argument("--problem", choices=sorted(PROBLEMS), default=_default("problem", "zdt1"))
    parser.add_argument("--n-var", type=_positive_int, default=_default("n_var", 12), help="Decision variables.")
    parser.add_argument(
        "--n-obj", type=_positive_int, default=_default("n_obj", None), help="Objectives (dtlz2 only; zdt1 has 2)."
    )
    parser.add_argument("--num-problems", type=_positive_int, default=_default("num_problems", 20))
    parser.add_argument(
        "--neighborhood-size",
        type=_positive_int,
        default=_default("neighborhood_size", None),
        help="Neighborhood size T (default: min(10, num-problems)).",
    )
    parser.add_argument("--number-of-parents", type=_positive_int, default=_default("number_of_parents", 2))
    parser.add_argument("--new-individuals", type=_positive_int, default=_default("new_individuals", 1))
    parser.add_argument("--overfill", type=_positive_int, default=_default("overfill", 10))
    parser.add_argument("--generations", type=_positive_int, default=_default("generations", 250))
    parser.add_argument(
        "--similarity",
        choices=[m.value for m in SimilarityMeasure],
        default=_default("similarity", SimilarityMeasure.EUCLIDEAN.value),
    )
    parser.add_argument("--seed", type=int, default=_default("seed", 0))
    parser.add_argument("--output", default=_default("output", None), help="Write the archive front to this CSV file.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every generation.")
    args = parser.parse_args(argv)
    args.file_config = file_cfg
    return args


__all__ = ["parse_args"]
