"""Interactive text menus for driving a stack or a queue by hand."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, TextIO

from .queues import (
    ArrayQueue,
    QueueEmptyError,
    QueueFullError,
    RecursiveLinkedQueue,
)
from .stacks import (
    RecursiveArrayStack,
    RecursiveLinkedStack,
    StackEmptyError,
    StackFullError,
)

_RULE = "-----------"
_CONTAINER_ERRORS = (StackFullError, StackEmptyError, QueueFullError, QueueEmptyError)


class _EndOfInput(Exception):
    """Input ran out where the session cannot go on without it."""


class Structure(Enum):
    """The kinds of container a menu session can manage."""

    STACK_ARRAY = "stack-array"
    STACK_LINKED = "stack-linked"
    QUEUE_ARRAY = "queue-array"
    QUEUE_LINKED = "queue-linked"


@dataclass(frozen=True)
class _Spec:
    noun: str
    title: str
    factory: Callable[..., Any]
    bounded: bool
    add_name: str
    remove_name: str
    add_verb: str
    remove_verb: str
    removed_label: str
    farewell_at_end: bool


_SPECS = {
    Structure.STACK_ARRAY: _Spec(
        noun="stack",
        title="Stack",
        factory=RecursiveArrayStack,
        bounded=True,
        add_name="Push",
        remove_name="Pop",
        add_verb="pushing",
        remove_verb="poping",
        removed_label="Popped value",
        farewell_at_end=True,
    ),
    Structure.STACK_LINKED: _Spec(
        noun="stack",
        title="Stack",
        factory=RecursiveLinkedStack,
        bounded=False,
        add_name="Push",
        remove_name="Pop",
        add_verb="pushing",
        remove_verb="poping",
        removed_label="Popped value",
        farewell_at_end=False,
    ),
    Structure.QUEUE_ARRAY: _Spec(
        noun="queue",
        title="Queue",
        factory=ArrayQueue,
        bounded=True,
        add_name="Enqueue",
        remove_name="Dequeue",
        add_verb="enqueueing",
        remove_verb="dequeueing",
        removed_label="Front value",
        farewell_at_end=False,
    ),
    Structure.QUEUE_LINKED: _Spec(
        noun="queue",
        title="Queue",
        factory=RecursiveLinkedQueue,
        bounded=False,
        add_name="Enqueue",
        remove_name="Dequeue",
        add_verb="enqueueing",
        remove_verb="dequeueing",
        removed_label="Front value",
        farewell_at_end=False,
    ),
}


def _token_stream(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


class MenuSession:
    """A question-and-answer session that edits one container."""

    def __init__(self, structure: Structure, stdin: TextIO, stdout: TextIO) -> None:
        self.structure = Structure(structure)
        self._spec = _SPECS[self.structure]
        self._tokens = _token_stream(stdin)
        self._out = stdout
        self.container: Optional[Any] = None

    def _write(self, text: str) -> None:
        self._out.write(text)

    def _next_token(self) -> Optional[str]:
        return next(self._tokens, None)

    def _read_int(self) -> int:
        """Read an integer; missing or malformed input counts as 0."""
        token = self._next_token()
        if token is None:
            return 0
        try:
            return int(token)
        except ValueError:
            return 0

    def _read_size(self) -> int:
        spec = self._spec
        self._write(f"\n=: Enter {spec.noun} max size: ")
        while True:
            token = self._next_token()
            if token is None:
                raise _EndOfInput
            try:
                size = int(token)
            except ValueError:
                size = 0
            if size >= 1:
                break
            self._write(f"!: Invalid {spec.noun} max size.\n=: Enter again: ")
        self._write("\n")
        return size

    def _show_state(self) -> None:
        spec = self._spec
        if self.container is None:
            self._write(f"{_RULE}\n| {spec.title} is not initialized.\n{_RULE}\n")
            return
        self._write(f"{_RULE}\n")
        if spec.bounded:
            self._write(f"| {spec.title} max size: {self.container.max_size}\n")
            self._write(f"| {spec.title} size: {len(self.container)}\n")
        self._write(f"| {spec.title} elements: {self.container}\n{_RULE}\n")

    def _read_choice(self) -> int:
        spec = self._spec
        self._write(f">>> {spec.title} Lib\n")
        self._write(f"1. {spec.add_name}\n")
        self._write(f"2. {spec.remove_name}\n")
        self._write("0. Exit\n\n")
        self._write("=: Enter your choice: ")
        choice = self._read_int()
        self._write("\n")
        return choice

    def _ensure_initialized(self) -> bool:
        if self.container is not None:
            return True
        spec = self._spec
        self._write(f"!: {spec.title} is not initialized.\n")
        self._write(f"?: Do you want to initialize the {spec.noun}? Yes(1) - No(0)\n")
        if self._read_int() == 0:
            return False
        if spec.bounded:
            self.container = spec.factory(self._read_size())
        else:
            self.container = spec.factory()
        return True

    def _add(self) -> None:
        spec = self._spec
        if not self._ensure_initialized():
            self._write(f"!: Please init the {spec.noun} before {spec.add_verb}.\n")
            return
        self._write("=: Enter value to be pushed: ")
        value = self._read_int()
        add = self.container.push if spec.noun == "stack" else self.container.enqueue
        try:
            add(value)
        except _CONTAINER_ERRORS as exc:
            self._write(f"!: {exc}\n")

    def _remove(self) -> None:
        spec = self._spec
        if not self._ensure_initialized():
            self._write(f"!: Please init the {spec.noun} before {spec.remove_verb}.\n")
            return
        remove = self.container.pop if spec.noun == "stack" else self.container.dequeue
        try:
            value = remove()
        except _CONTAINER_ERRORS as exc:
            self._write(f"!: {exc}\n")
        else:
            self._write(f">>> {spec.removed_label}: {value}\n")

    def _loop(self) -> None:
        spec = self._spec
        while True:
            self._show_state()
            choice = self._read_choice()
            if choice == 0:
                if not spec.farewell_at_end:
                    self._write("Have a nice day!\n")
                return
            if choice == 1:
                self._add()
            elif choice == 2:
                self._remove()
            else:
                self._write("Invalid choice.\n")
            self._write("\n?: Continue: Yes(1) - No(0)\n")
            if self._read_int() == 0:
                return

    def run(self) -> int:
        """Run the session until the user leaves; returns the exit status."""
        try:
            self._loop()
        except _EndOfInput:
            self._write("\n")
        if self.container is not None:
            self.container.clear()
        if self._spec.farewell_at_end:
            self._write("Have a nice day!\n")
        return 0


def main(argv=None) -> int:
    """Start an interactive session on standard input and output."""
    parser = argparse.ArgumentParser(description="Drive a stack or a queue from a text menu.")
    parser.add_argument(
        "structure",
        nargs="?",
        default=Structure.STACK_ARRAY.value,
        choices=[s.value for s in Structure],
        help="which container to manage",
    )
    args = parser.parse_args(argv)
    return MenuSession(Structure(args.structure), sys.stdin, sys.stdout).run()


if __name__ == "__main__":
    raise SystemExit(main())