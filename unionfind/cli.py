"""
命令列介面

子命令:
    filter    讀取站點對，輸出非冗餘者與最終分量數
    simulate  隨機連通模擬，輸出邊數的平均與標準差
    variants  列出可用的 forest 實作
"""

import argparse
import logging
import sys
import time
from collections.abc import Sequence
from contextlib import nullcontext
from pathlib import Path
from typing import TextIO

import numpy as np

from unionfind.core import TrialProgressBar, UnionFindError
from unionfind.features.connectivity_filter import ConnectivityFilter, read_input
from unionfind.features.simulation import ConnectivitySimulator, reference_edges
from unionfind.forests import ForestRegistry
from unionfind.settings import settings


logger = logging.getLogger(__name__)


def _positive_int(value: str) -> int:
    """argparse 型別：正整數"""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {value!r}") from None
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be a positive integer: {value}")
    return number


def _non_negative_int(value: str) -> int:
    """argparse 型別：非負整數（亂數種子）"""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {value!r}") from None
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be a non-negative integer: {value}")
    return number


def _elapsed_ms(start: float) -> float:
    return (time.perf_counter() - start) * 1000


def build_parser() -> argparse.ArgumentParser:
    """建立命令列解析器"""
    parser = argparse.ArgumentParser(
        prog="unionfind",
        description="Union-find connectivity filter and Erdős–Rényi simulator",
    )
    parser.add_argument("--debug", action="store_true", help="enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    variants = ForestRegistry.list_names()

    filter_parser = subparsers.add_parser(
        "filter",
        help="print pairs that add new connectivity, then the component count",
    )
    filter_parser.add_argument(
        "input",
        nargs="?",
        default="-",
        help="input file: site count followed by pairs (default: stdin)",
    )
    filter_parser.add_argument(
        "--variant",
        choices=variants,
        default=settings.default_variant,
        help="forest implementation (default: %(default)s)",
    )
    filter_parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="only print the component count",
    )
    filter_parser.set_defaults(handler=run_filter)

    simulate_parser = subparsers.add_parser(
        "simulate",
        help="add random edges until connected; report mean/stddev of edge counts",
    )
    simulate_parser.add_argument("n", type=_positive_int, help="number of sites")
    simulate_parser.add_argument("trials", type=_positive_int, help="number of trials")
    simulate_parser.add_argument(
        "--variant",
        choices=variants,
        default=settings.default_variant,
        help="forest implementation (default: %(default)s)",
    )
    simulate_parser.add_argument(
        "--seed",
        type=_non_negative_int,
        default=settings.simulation_seed,
        help="random seed for reproducible runs",
    )
    simulate_parser.add_argument(
        "--no-progress",
        action="store_true",
        help="disable the progress bar",
    )
    simulate_parser.set_defaults(handler=run_simulate)

    variants_parser = subparsers.add_parser("variants", help="list forest implementations")
    variants_parser.set_defaults(handler=run_variants)

    return parser


def _filter_stream(stream: TextIO, args: argparse.Namespace) -> int:
    n, pairs = read_input(stream)
    forest = ForestRegistry.create(args.variant, n)
    connectivity_filter = ConnectivityFilter(forest)

    for p, q in connectivity_filter.filter(pairs):
        if not args.quiet:
            print(f"{p} {q}")

    logger.info(
        "%d of %d pairs accepted",
        connectivity_filter.accepted_count,
        connectivity_filter.seen_count,
    )
    return connectivity_filter.count()


def run_filter(args: argparse.Namespace) -> int:
    """執行 filter 子命令"""
    start = time.perf_counter()

    if args.input == "-":
        components = _filter_stream(sys.stdin, args)
    else:
        with Path(args.input).open(encoding="utf-8") as stream:
            components = _filter_stream(stream, args)

    print(f"{components} components")
    print(f"elapsed time = {_elapsed_ms(start):.0f} ms")
    return 0


def run_simulate(args: argparse.Namespace) -> int:
    """執行 simulate 子命令"""
    start = time.perf_counter()
    rng = np.random.default_rng(args.seed)
    show_progress = settings.show_progress and not args.no_progress

    progress = TrialProgressBar(total=args.trials) if show_progress else nullcontext()
    with progress as bar:
        simulator = ConnectivitySimulator(
            rng,
            variant=args.variant,
            progress_callback=bar.update if bar is not None else None,
        )
        result = simulator.run_trials(args.n, args.trials)

    print(f"1/2 n ln n = {reference_edges(args.n)}")
    print(f"mean = {result.mean}")
    print(f"stddev = {result.stddev}")
    print(f"elapsed time = {_elapsed_ms(start):.0f} ms")
    return 0


def run_variants(args: argparse.Namespace) -> int:
    """執行 variants 子命令"""
    for info in ForestRegistry.list_variants():
        marker = "*" if info.name == settings.default_variant else " "
        print(f"{marker} {info.name:<18} {info.description}")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """
    主程式

    Args:
        argv: 命令列參數，預設為 sys.argv[1:]

    Returns:
        退出碼 (0: 成功, 1: 輸入或參數錯誤, 130: 中斷)
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    level = logging.DEBUG if args.debug else settings.log_level
    logging.basicConfig(level=level, format="%(message)s")

    try:
        return args.handler(args)

    except KeyboardInterrupt:
        print("\n已中斷操作", file=sys.stderr)
        return 130

    except (UnionFindError, KeyError, OSError) as exc:
        print(f"錯誤: {exc}", file=sys.stderr)
        logger.debug("處理時發生錯誤", exc_info=True)
        return 1
