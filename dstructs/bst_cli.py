"""Interactive menu for a binary search tree, read from and written to text streams."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator
from typing import Optional, TextIO

from dstructs.bst import BinarySearchTree

MENU = (
    "Here are your choices.\n"
    "1. Insert an item into your tree.\n"
    "2. Delete an item from your tree.\n"
    "3. Search for an item in your tree.\n"
    "4. Print the sum of the nodes in your tree.\n"
    "5. Print out an inorder traversal of your tree.\n"
    "7. Call Q6.\n"
    "6. Quit.\n"
)

QUIT = 6
LAST_CHOICE = 7


class _IntReader:
    """Reads whitespace-separated integers from a text stream."""

    def __init__(self, stream: TextIO) -> None:
        self._tokens = self._split(stream)

    @staticmethod
    def _split(stream: TextIO) -> Iterator[str]:
        for line in stream:
            yield from line.split()

    def read(self) -> int:
        token = next(self._tokens, None)
        if token is None:
            raise EOFError("input exhausted")
        try:
            return int(token)
        except ValueError:
            raise ValueError(f"expected an integer, got {token!r}") from None


def run(stdin: TextIO, stdout: TextIO) -> BinarySearchTree:
    """Run the menu loop until the user quits or input ends; return the tree."""
    tree = BinarySearchTree(allow_duplicates=True)
    reader = _IntReader(stdin)
    out = stdout.write

    try:
        while True:
            out(MENU)
            choice = reader.read()
            if choice == QUIT or choice > LAST_CHOICE:
                break

            if choice == 1:
                out("What value would you like to insert?")
                tree.insert(reader.read())
            elif choice == 2:
                out("What value would you like to delete?\n")
                value = reader.read()
                if value in tree:
                    tree.delete(value)
                else:
                    out("Sorry that value isn't in the tree to delete.\n")
            elif choice == 3:
                out("What value would you like to search for?\n")
                value = reader.read()
                if value in tree:
                    out(f" Found {value} in the tree.\n")
                else:
                    out(f" Did not find {value} in the tree.\n")
            elif choice == 4:
                out(f"The sum of the nodes in your tree is {tree.total()}.\n")
            elif choice == 5:
                out("Here is an inorder traversal of your tree: ")
                out("".join(f"{value} " for value in tree))
                out("\n")
            elif choice == 7:
                out("enter a value for q6: ")
                found: Optional[int] = tree.first_greater(reader.read())
                out(f"Q6: {'none' if found is None else found}\n")

        out("Which ranked item would you like to find?\n")
        rank = reader.read()
        try:
            out(f"The item is {tree.kth_smallest(rank)}\n")
        except IndexError:
            out(f"There is no item of rank {rank}.\n")
    except EOFError:
        pass

    return tree


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="dstructs-bst", description="Interactive binary search tree menu."
    )
    parser.parse_args(argv)
    run(sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())