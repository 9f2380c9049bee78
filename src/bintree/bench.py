"""Benchmark harness for tree insertion."""

import timeit
from collections.abc import Callable, Sequence

import click

from bintree.tree import BinaryTree

BALANCED = (50, 25, 75, 13, 37, 63, 87)

# name -> (description, values inserted before each clear)
SCENARIOS: dict[str, tuple[str, tuple[int, ...]]] = {
    "insert-single": ("insert single element and clear", (50,)),
    "balanced": ("create 3 layered balanced tree and clear", BALANCED),
    "balanced-duplicates": (
        "create 3 layered balanced tree, then duplicate all, and clear",
        BALANCED + BALANCED,
    ),
    "worst-case": (
        "create 10 element worst case tree and clear",
        tuple(range(10)),
    ),
}


def _make_workload(values: Sequence[int]) -> Callable[[], None]:
    # one tree is reused across iterations, so only insert and clear are timed
    tree: BinaryTree[int] = BinaryTree()

    def workload() -> None:
        for value in values:
            tree.insert(value)
        tree.clear()

    return workload


def run_scenario(name: str, number: int = 10_000, repeat: int = 5) -> float:
    """Return the best time per iteration of the scenario, in seconds."""
    try:
        _, values = SCENARIOS[name]
    except KeyError:
        raise ValueError(
            f"unknown scenario {name!r}, expected one of {', '.join(SCENARIOS)}"
        ) from None
    if number < 1 or repeat < 1:
        raise ValueError(f"{number=} and {repeat=} must both be at least 1")
    timer = timeit.Timer(_make_workload(values))
    return min(timer.repeat(repeat=repeat, number=number)) / number


def _format_time(seconds: float) -> str:
    for unit, scale in (("s", 1.0), ("ms", 1e-3), ("us", 1e-6)):
        if seconds >= scale:
            return f"{seconds / scale:.3f} {unit}"
    return f"{seconds / 1e-9:.1f} ns"


@click.command()
@click.option(
    "-n",
    "--number",
    type=click.IntRange(1, None),
    default=10_000,
    metavar="NUM",
    help="iterations per timing run",
)
@click.option(
    "-r",
    "--repeat",
    type=click.IntRange(1, None),
    default=5,
    metavar="NUM",
    help="timing runs per scenario; the fastest is reported",
)
@click.option(
    "-s",
    "--scenario",
    "scenarios",
    type=click.Choice(list(SCENARIOS)),
    multiple=True,
    help="scenario to run (repeatable); default: all of them",
)
def main(number: int, repeat: int, scenarios: tuple[str, ...]) -> None:
    """[bintree] times insertion into, and clearing of, binary search trees."""
    selected = scenarios or tuple(SCENARIOS)
    width = max(len(SCENARIOS[name][0]) for name in selected)
    plural = "" if number == 1 else "s"
    print(f"best of {repeat}, {number} iteration{plural} each")
    for name in selected:
        description, _ = SCENARIOS[name]
        per_iteration = run_scenario(name, number=number, repeat=repeat)
        print(f"{description:<{width}}  {_format_time(per_iteration)}")


if __name__ == "__main__":
    main()
