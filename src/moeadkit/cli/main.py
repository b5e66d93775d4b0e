from __future__ import annotations

import logging
from pathlib import Path
from typing import Sequence

import numpy as np

from moeadkit.api import optimize_moead
from moeadkit.engine.algorithm.config import MOEADConfig
from moeadkit.foundation.exceptions import InvalidArgumentError, MOEADKitError
from moeadkit.foundation.problem import make_problem

from .parser import parse_args


def _configure_cli_logging(level: int = logging.INFO) -> None:
    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(message)s"))
        root.addHandler(handler)
    root.setLevel(level)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    _configure_cli_logging(logging.DEBUG if args.verbose else logging.INFO)
    log = logging.getLogger("moeadkit.cli")

    problem_kwargs = {"n_var": args.n_var}
    if args.problem == "dtlz2" and args.n_obj is not None:
        problem_kwargs["n_obj"] = args.n_obj
    try:
        problem = make_problem(args.problem, **problem_kwargs)
        if args.n_obj is not None and args.n_obj != problem.n_obj:
            raise InvalidArgumentError(
                f"Problem '{args.problem}' has {problem.n_obj} objectives, got --n-obj {args.n_obj}.",
                "Drop --n-obj or pick a problem with a configurable objective count (dtlz2)",
                {"problem": args.problem, "n_obj": args.n_obj},
            )
        settings = {
            "num_objectives": problem.n_obj,
            "num_problems": args.num_problems,
            "neighborhood_size": args.neighborhood_size,
            "number_of_parents": args.number_of_parents,
            "new_individuals": args.new_individuals,
            "overfill": args.overfill,
            "similarity": args.similarity,
            "generations": args.generations,
        }
        # an unset neighborhood size falls back to min(10, num_problems)
        cfg = MOEADConfig.from_dict(
            {
                **args.file_config,
                **{key: value for key, value in settings.items() if value is not None},
            }
        )
        result = optimize_moead(problem, cfg, seed=args.seed)
    except (MOEADKitError, ValueError) as exc:
        log.error("%s", exc)
        return 2

    front = result["archive"]["F"]
    log.info(
        "%s: %d generations, %d evaluations, %d replacements, archive size %d.",
        args.problem,
        result["generations"],
        result["evaluations"],
        result["replacements"],
        front.shape[0],
    )
    if args.output:
        out_path = Path(args.output)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        np.savetxt(out_path, front, delimiter=",")
        log.info("Archive front written to %s", out_path)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
