import argparse
import logging
import sys
from typing import Optional, Sequence

from .experiment import compare_orderings, load_result_from_file
from .heuristics import heuristics_registry_dict
from .plotting import plot_orders
from .utils import max_iter_from_k

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )


def _baseline_names():
    return [name for name in heuristics_registry_dict if name != "NearestNeighbor"]


def _run_compare(args) -> int:
    max_iter = args.max_iter if args.max_iter is not None else max_iter_from_k(args.k)
    names = _baseline_names()
    logger.info("M=%d, k=%d, max_iter=%d", args.grid, args.k, max_iter)
    summary = compare_orderings(
        M=args.grid,
        k=args.k,
        order_fn=[heuristics_registry_dict[name] for name in names],
        order_name=names,
        max_iter=max_iter,
        seed=args.seed,
        folder=args.folder,
    )
    for name, result in summary.items():
        logger.info(
            "%s vs nearest neighbor: worst ratio %.4f, mean ratio %.4f",
            name, result["worst_ratio"], result["mean_ratio"],
        )
    return 0


def _run_show(args) -> int:
    try:
        data = load_result_from_file(args.grid, args.k, args.heuristic, args.folder)
    except FileNotFoundError:
        logger.error("No saved result for M=%d, k=%d, heuristic=%s in %s",
                     args.grid, args.k, args.heuristic, args.folder)
        return 1
    title = (
        f"{args.heuristic} vs nearest neighbor\n"
        f"M = {args.grid}, k = {args.k} | ratio = {data['ratio']:.4f}"
    )
    plot_orders(
        data["points"],
        path_orders=[data["heur_order"], data["nn_order"]],
        labels=[f"{args.heuristic} order", "Nearest neighbor"],
        title=title,
    )
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Compare short-path orderings on grid subsets")
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (default: INFO)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    compare = sub.add_parser("compare", help="Compare baseline orderings with nearest neighbor")
    compare.add_argument("--grid", type=int, required=True, help="Grid size M (MxM points)")
    compare.add_argument("--k", type=int, required=True, help="Points per random subset")
    compare.add_argument("--max-iter", type=int, default=None, help="Number of random subsets")
    compare.add_argument("--seed", type=int, default=42, help="Random seed (default: 42)")
    compare.add_argument("--folder", default=None, help="Save worst cases to this folder")

    show = sub.add_parser("show", help="Plot a saved worst case")
    show.add_argument("--grid", type=int, required=True)
    show.add_argument("--k", type=int, required=True)
    show.add_argument("--heuristic", default="Hilbert", choices=_baseline_names())
    show.add_argument("--folder", default="results")

    args = parser.parse_args(argv)
    _configure_logging(args.log_level)

    try:
        if args.command == "compare":
            return _run_compare(args)
        return _run_show(args)
    except ValueError as exc:
        logger.error("%s", exc)
        return 1


if __name__ == "__main__":
    sys.exit(main())
