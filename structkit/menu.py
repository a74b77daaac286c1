"""Interactive text menu for building and editing a linked list."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator
from typing import Optional, TextIO

from structkit.linked_list import LinkedList

_MAIN_MENU = (
    "1.Create Linked list\n"
    "2.Display Linked list\n"
    "3.Insert into Linked list\n"
    "4.Delete Node in Linked list\n"
    "5.Search in Linked list\n"
    "6.Reverse the Linked list\n"
    "7.Exit\n"
    "Enter Your choice : "
)

_INSERT_MENU = (
    "1.Insert node at begining of list\n"
    "2.Insert node at specific position in list\n"
    "3.Insert node at End of list\n"
    "4.previous menu\n"
    "Enter Choice : "
)

_DELETE_MENU = (
    "1.Delete node at begining of list\n"
    "2.Delete node at specific position in list\n"
    "3.Delete node at End of list\n"
    "4.previous menu\n"
    "Enter Choice : "
)


class _EndOfInput(Exception):
    pass


class _BadInput(Exception):
    pass


class _Session:
    def __init__(self, stdin: TextIO, stdout: TextIO) -> None:
        self._tokens = self._token_stream(stdin)
        self._out = stdout
        self.items = LinkedList()

    @staticmethod
    def _token_stream(stdin: TextIO) -> Iterator[str]:
        for line in stdin:
            yield from line.split()

    def write(self, text: str) -> None:
        self._out.write(text)

    def ask(self, prompt: str) -> int:
        self.write(prompt)
        try:
            token = next(self._tokens)
        except StopIteration:
            raise _EndOfInput from None
        try:
            return int(token)
        except ValueError:
            raise _BadInput(token) from None

    def create(self) -> None:
        count = self.ask("Enter no of node to be created :")
        for index in range(count):
            self.items.append(self.ask(f"Enter Data for node {index} :"))
        self.write("List created\n" if count > 0 else "List not created\n")

    def display(self) -> None:
        if not self.items:
            self.write("List is empty\n")
            return
        self.write(f"Linked List \n{self.items}\n")

    def insert(self) -> None:
        choice = self.ask(_INSERT_MENU)
        if choice == 1:
            self.items.insert_beginning(self.ask("Enter data for node :"))
        elif choice == 2:
            value = self.ask("Enter data for node :")
            position = self.ask("Enter postition for node:")
            try:
                self.items.insert_at(value, position)
            except IndexError:
                self.write("Invalid Position Entered\n")
        elif choice == 3:
            self.items.append(self.ask("Enter data for node :"))

    def delete(self) -> None:
        choice = self.ask(_DELETE_MENU)
        if choice == 1:
            if not self.items:
                self.write("List is empty\n")
            else:
                self.items.delete_first()
                self.write("First Node Deleted\n")
        elif choice == 2:
            position = self.ask("Enter postition for node:")
            try:
                self.items.delete_at(position)
            except IndexError:
                self.write("Invalid position\n")
        elif choice == 3:
            if not self.items:
                self.write("List is empty\n")
            else:
                self.items.delete_last()
                self.write("Last Node Deleted\n")

    def search(self) -> None:
        value = self.ask("Enter Data to be searched :")
        try:
            position = self.items.index(value)
        except ValueError:
            self.write("Data Not found\n")
        else:
            self.write(f"Data Found at position : {position}\n")

    def reverse(self) -> None:
        if not self.items:
            self.write("List is empty\n")
            return
        self.items.reverse()
        self.write("List Reversed\n")


def run(stdin: TextIO, stdout: TextIO) -> LinkedList:
    """Run the menu until Exit or end of input; return the resulting list."""
    session = _Session(stdin, stdout)
    actions = {
        1: session.create,
        2: session.display,
        3: session.insert,
        4: session.delete,
        5: session.search,
        6: session.reverse,
    }
    while True:
        try:
            choice = session.ask(_MAIN_MENU)
            if choice == 7:
                break
            action = actions.get(choice)
            if action is None:
                session.write("Invalid Entry\n")
            else:
                action()
        except _BadInput:
            session.write("Invalid Entry\n")
        except _EndOfInput:
            session.write("\n")
            break
    return session.items


def main(argv: Optional[list[str]] = None) -> int:
    """Start the interactive linked-list menu on standard input and output."""
    parser = argparse.ArgumentParser(description="Interactive linked list menu.")
    parser.parse_args(argv)
    run(sys.stdin, sys.stdout)
    return 0