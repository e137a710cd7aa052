"""Interactive management of a fixed-size table of functions."""

from __future__ import annotations

import argparse
import sys
import warnings
from collections import deque
from collections.abc import Iterator
from contextlib import contextmanager
from typing import TextIO

from funcarray.functions import Function, Logarithmic, Polynomial, Power, _fmt

DEFAULT_SIZE = 10


class TableFullError(Exception):
    """Raised when a function is added to a table with no free slot."""


class FunctionTable:
    """A fixed number of slots, each empty or holding one function."""

    def __init__(self, size: int = DEFAULT_SIZE) -> None:
        if size < 0:
            raise ValueError("table size cannot be negative")
        self._slots: list[Function | None] = [None] * size

    def __len__(self) -> int:
        return len(self._slots)

    def __getitem__(self, index: int) -> Function | None:
        if not 0 <= index < len(self._slots):
            raise IndexError(f"slot {index} out of range")
        return self._slots[index]

    def is_empty(self) -> bool:
        """True when no slot holds a function."""
        return all(slot is None for slot in self._slots)

    def first_free(self) -> int | None:
        """Index of the first empty slot, or None when the table is full."""
        return next((i for i, slot in enumerate(self._slots) if slot is None), None)

    def add(self, function: Function) -> int:
        """Store ``function`` in the first empty slot and return its index."""
        index = self.first_free()
        if index is None:
            raise TableFullError("the table is full")
        self._slots[index] = function
        return index

    def remove(self, index: int) -> Function:
        """Empty slot ``index`` and return the function it held."""
        function = self[index]
        if function is None:
            raise KeyError(f"slot {index} is empty")
        self._slots[index] = None
        return function

    def clear(self) -> None:
        """Empty every slot."""
        self._slots = [None] * len(self._slots)

    def items(self) -> Iterator[tuple[int, Function]]:
        """Yield ``(index, function)`` for every occupied slot, in order."""
        for index, slot in enumerate(self._slots):
            if slot is not None:
                yield index, slot


class Console:
    """A text menu driving a :class:`FunctionTable` over a pair of streams."""

    def __init__(
        self,
        table: FunctionTable,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
    ) -> None:
        self.table = table
        self._in = stdin if stdin is not None else sys.stdin
        self._out = stdout if stdout is not None else sys.stdout
        self._tokens: deque[str] = deque()

    # -- low level input/output -------------------------------------------

    def _write(self, text: str = "") -> None:
        self._out.write(text)

    def _line(self, text: str = "") -> None:
        self._out.write(text + "\n")

    def _error(self, message: str) -> None:
        self._line()
        self._line(f"***ERROR*** -- {message}")

    def _next_token(self) -> str:
        while not self._tokens:
            line = self._in.readline()
            if not line:
                raise EOFError("input exhausted")
            self._tokens.extend(line.split())
        return self._tokens.popleft()

    def _read_int(self) -> int | None:
        try:
            return int(self._next_token())
        except ValueError:
            return None

    def _read_float(self) -> float:
        while True:
            token = self._next_token()
            try:
                return float(token)
            except ValueError:
                self._line()
                self._line("Invalid number, retry: ")

    @contextmanager
    def _reporting_warnings(self, owner: str) -> Iterator[None]:
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            yield
        for warning in caught:
            self._line()
            self._line(f"WARNING -- {owner} --{warning.message}")

    # -- menu -----------------------------------------------------------------

    def run(self) -> None:
        """Show the menu until the user exits or input runs out."""
        self._line()
        self._line(
            "This is a program to manage an array of Function "
            "(polynomial, power and logarithmic)."
        )
        actions = {
            1: self.visualize,
            2: self.insert,
            3: self.delete,
            4: self.delete_all,
            5: self.select,
        }
        try:
            while True:
                self._line()
                self._line("0- Exit from menu.")
                self._line("1- Visualize function list.")
                self._line("2- Insert function.")
                self._line("3- Delete a function.")
                self._line("4- Delete all functions.")
                self._line("5- Select a function.")
                choice = self.control(0, 5)
                if choice == 0:
                    self._line()
                    self._line("Exiting the menu...")
                    break
                actions[choice]()
        except EOFError:
            pass
        finally:
            self.delete_all()

    def _report_empty(self) -> bool:
        if self.table.is_empty():
            self._error("No function available!")
            return True
        return False

    def visualize(self) -> None:
        """Print every stored function with its ID."""
        if self._report_empty():
            return
        for index, function in self.table.items():
            self._line()
            self._line(f" FUNCTION ID = {index} ----- ")
            self._line(function.describe())

    def _build_function(self) -> Function | None:
        self._line()
        self._line("Select the type of function: ")
        self._line("0- Polynomial")
        self._line("1- Power")
        self._line("2- Logarithmic")
        kind = self.control(0, 2)
        if kind == 0:
            self._line()
            self._line("How many coefficients?")
            count = int(self._read_float())
            coefficients = []
            for position in range(count):
                self._line()
                self._line(f"Insert the coefficient in position number {position}:")
                coefficients.append(self._read_float())
            try:
                return Polynomial(coefficients)
            except ValueError as exc:
                self._error(str(exc))
                return None
        if kind == 1:
            self._line()
            self._write("Insert the exponent: ")
            exponent = self._read_float()
            self._line()
            self._write("Insert the constant k: ")
            k = self._read_float()
            return Power(k, exponent)
        self._line()
        self._write("Insert the base: ")
        base = self._read_float()
        self._line()
        self._write("Insert the coefficient k: ")
        k = self._read_float()
        with self._reporting_warnings("Logarithmic"):
            return Logarithmic(base, k)

    def insert(self) -> None:
        """Ask for a new function and store it once the user confirms it."""
        if self.table.first_free() is None:
            self._error("The array is full!")
            return
        while True:
            function = self._build_function()
            if function is None:
                return
            if self.check(function):
                self.table.add(function)
                return

    def delete(self) -> None:
        """Ask for an ID and remove that function once the user confirms."""
        if self._report_empty():
            return
        while True:
            index = self.get_id()
            function = self.table[index]
            assert function is not None
            if self.check(function):
                self.table.remove(index)
                return

    def delete_all(self) -> None:
        """Remove every function."""
        self.table.clear()

    def select(self) -> None:
        """Ask for an ID and a value of x, then print the function's value."""
        if self._report_empty():
            return
        index = self.get_id()
        function = self.table[index]
        assert function is not None
        self._line()
        self._line(function.describe())
        self._line()
        self._line("Insert the value of x: ")
        x = self._read_float()
        with self._reporting_warnings(type(function).__name__):
            result = function.value(x)
        self._line()
        self._line(f"F({_fmt(x)}) = {_fmt(result)}")

    def get_id(self) -> int:
        """Read the ID of an occupied slot, retrying until one is given."""
        self._line()
        self._line("Insert 1 to visualize the functions list or 0 to continue: ")
        if self.control(0, 1):
            self.visualize()
        self._line()
        self._line("Insert the ID of the function: ")
        while True:
            index = self._read_int()
            if index is not None and 0 <= index < len(self.table) and self.table[index] is not None:
                return index
            self._line()
            self._line("Invalid option, retry: ")

    def control(self, low: int, high: int) -> int:
        """Read an integer in ``[low, high]``, retrying until one is given."""
        while True:
            value = self._read_int()
            if value is not None and low <= value <= high:
                return value
            self._line()
            self._line("Invalid option, retry: ")

    def check(self, function: Function) -> bool:
        """Show ``function`` and ask the user to confirm it."""
        self._line()
        self._line("Check of the new function: ")
        self._line(function.describe())
        self._line()
        self._line("Insert 1 to complete or 0 to retry: ")
        return bool(self.control(0, 1))


def main(argv: list[str] | None = None) -> int:
    """Run the interactive menu on standard input and output."""
    parser = argparse.ArgumentParser(
        description="Manage a table of polynomial, power and logarithmic functions."
    )
    parser.add_argument(
        "--size", type=int, default=DEFAULT_SIZE, help="number of slots in the table"
    )
    args = parser.parse_args(argv)
    Console(FunctionTable(args.size), sys.stdin, sys.stdout).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())