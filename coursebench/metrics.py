"""Timing runs that compare loop-based and recursive containers."""

from __future__ import annotations

import argparse
import random
import time
from collections.abc import Callable
from typing import Any, Optional

from .queues import ArrayQueue, LinkedQueue, RecursiveArrayQueue, RecursiveLinkedQueue
from .stacks import ArrayStack, LinkedStack, RecursiveArrayStack, RecursiveLinkedStack

_DEFAULTS = {
    "stack-array": (10_000_000, 40_000),
    "stack-linked": (30_000, 30_000),
    "queue-array": (30_000_000, 40_000),
    "queue-linked": (40_000, 0),
}


def timed(action: Callable[[], Any]) -> float:
    """Run ``action`` once and return the elapsed wall time in seconds."""
    start = time.perf_counter()
    action()
    return time.perf_counter() - start


def fill_random(container: Any, count: int, rng: random.Random) -> None:
    """Add ``count`` random values in ``[0, 100)`` to a stack or a queue."""
    add = container.push if hasattr(container, "push") else container.enqueue
    for _ in range(count):
        add(rng.randrange(100))


def _ms(seconds: float) -> str:
    return f"{int(seconds * 1_000)} milliseconds"


def _us(seconds: float) -> str:
    return f"{int(seconds * 1_000_000)} microseconds"


def _rng(rng: Optional[random.Random]) -> random.Random:
    return rng if rng is not None else random.Random()


def stack_array_report(n: int = 10_000_000, m: int = 40_000, rng: Optional[random.Random] = None) -> str:
    """Time pushes and copies on the loop and recursive array stacks."""
    rng = _rng(rng)
    stacks = {"loop": ArrayStack(n), "recursive": RecursiveArrayStack(n)}
    sources = {"loop": ArrayStack(m), "recursive": RecursiveArrayStack(m)}
    targets = {"loop": ArrayStack(0), "recursive": RecursiveArrayStack(0)}
    for source in sources.values():
        fill_random(source, m, rng)

    lines = [f"Push {n} elements"]
    for version, stack in stacks.items():
        elapsed = timed(lambda: fill_random(stack, n, rng))
        lines.append(f"\tPush with {version} version: {_ms(elapsed)}")
    lines.append(f"Copy stack ({m} elements)")
    for version, target in targets.items():
        elapsed = timed(lambda: target.copy_from(sources[version]))
        lines.append(f"\tCopy stack with {version} version: {_us(elapsed)}")

    for group in (stacks, sources, targets):
        for container in group.values():
            container.clear()
    return "\n".join(lines)


def stack_linked_report(n: int = 30_000, m: int = 30_000, rng: Optional[random.Random] = None) -> str:
    """Time pushes, copies and releases on the loop and recursive linked stacks."""
    rng = _rng(rng)
    stacks = {"loop": LinkedStack(), "recursive": RecursiveLinkedStack()}
    sources = {"loop": LinkedStack(), "recursive": RecursiveLinkedStack()}
    targets = {"loop": LinkedStack(), "recursive": RecursiveLinkedStack()}
    for source in sources.values():
        fill_random(source, m, rng)

    lines = [f"Push {n} elements"]
    for version, stack in stacks.items():
        elapsed = timed(lambda: fill_random(stack, n, rng))
        lines.append(f"\tPush with {version} version: {_us(elapsed)}")
    lines.append(f"Copy stack ({m} elements)")
    for version, target in targets.items():
        elapsed = timed(lambda: target.copy_from(sources[version]))
        lines.append(f"\tCopy stack with {version} version: {_us(elapsed)}")
    lines.append(f"Release stack {n} elements")
    for version, stack in stacks.items():
        elapsed = timed(stack.clear)
        lines.append(f"\tRelease with {version} version: {_us(elapsed)}")

    for group in (sources, targets):
        for container in group.values():
            container.clear()
    return "\n".join(lines)


def queue_array_report(n: int = 30_000_000, m: int = 40_000, rng: Optional[random.Random] = None) -> str:
    """Time enqueues and copies on the loop and recursive array queues."""
    rng = _rng(rng)
    queues = {"loop": ArrayQueue(n), "recursive": RecursiveArrayQueue(n)}
    sources = {"loop": ArrayQueue(m), "recursive": RecursiveArrayQueue(m)}
    targets = {"loop": ArrayQueue(0), "recursive": RecursiveArrayQueue(0)}
    for source in sources.values():
        fill_random(source, m, rng)

    lines = [f"Enqueue {n} elements"]
    for version, queue in queues.items():
        elapsed = timed(lambda: fill_random(queue, n, rng))
        lines.append(f"\tEnqueue with {version} version: {_ms(elapsed)}")
    lines.append(f"Copy queue ({m} elements)")
    for version, target in targets.items():
        elapsed = timed(lambda: target.copy_from(sources[version]))
        lines.append(f"\tCopy queue with {version} version: {_us(elapsed)}")

    for group in (queues, sources, targets):
        for container in group.values():
            container.clear()
    return "\n".join(lines)


def queue_linked_report(n: int = 40_000, rng: Optional[random.Random] = None) -> str:
    """Time enqueues and releases on the loop and recursive linked queues."""
    rng = _rng(rng)
    queues = {"loop": LinkedQueue(), "recursive": RecursiveLinkedQueue()}

    lines = [f"Enqueue {n} elements"]
    for version, queue in queues.items():
        elapsed = timed(lambda: fill_random(queue, n, rng))
        lines.append(f"\tEnqueue with {version} version: {_us(elapsed)}")
    lines.append("Release time")
    for version, queue in queues.items():
        elapsed = timed(queue.clear)
        lines.append(f"\tRelease with {version} version: {_us(elapsed)}")
    return "\n".join(lines)


def main(argv=None) -> int:
    """Print the timing report for the chosen container family."""
    parser = argparse.ArgumentParser(description="Compare loop and recursive containers.")
    parser.add_argument("structure", choices=sorted(_DEFAULTS), help="container family to time")
    parser.add_argument("-n", type=int, default=None, help="number of elements to add")
    parser.add_argument("-m", type=int, default=None, help="number of elements to copy")
    parser.add_argument("--seed", type=int, default=None, help="seed for the random values")
    args = parser.parse_args(argv)

    default_n, default_m = _DEFAULTS[args.structure]
    n = args.n if args.n is not None else default_n
    m = args.m if args.m is not None else default_m
    if n < 0 or m < 0:
        parser.error("element counts must not be negative")
    rng = random.Random(args.seed)

    if args.structure == "stack-array":
        report = stack_array_report(n, m, rng)
    elif args.structure == "stack-linked":
        report = stack_linked_report(n, m, rng)
    elif args.structure == "queue-array":
        report = queue_array_report(n, m, rng)
    else:
        report = queue_linked_report(n, rng)
    print(report)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())