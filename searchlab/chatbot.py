"""A keyword-driven customer support chatbot."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

_GREETING = "Hello! How can I help you today?"
_PRICE = "Our products range from $10 to $100. Do you want more details?"
_FAREWELL = "Thank you for visiting. Have a great day!"
_HELP = "You can ask me about product prices, availability, or say 'bye' to end chat."
_UNKNOWN = "I'm sorry, I didn't understand that. Type 'help' to see what you can ask."

_REPLIES = {
    "hi": _GREETING,
    "hello": _GREETING,
    "price": _PRICE,
    "cost": _PRICE,
    "bye": _FAREWELL,
    "exit": _FAREWELL,
    "help": _HELP,
}

_FAREWELLS = frozenset({"bye", "exit"})


def respond(user_input: str) -> str:
    """The chatbot's reply to one line of input, matched case-insensitively."""
    return _REPLIES.get(user_input.lower(), _UNKNOWN)


def is_farewell(user_input: str) -> bool:
    """Whether the input ends the conversation."""
    return user_input.lower() in _FAREWELLS


def main(argv: Sequence[str] | None = None) -> int:
    """Chat on standard input until the user says goodbye or input ends."""
    parser = argparse.ArgumentParser(description="Customer support chatbot.")
    parser.parse_args(argv)
    print("Welcome to Customer Support Chatbot!")
    print("Type 'help' to see available options.")
    while True:
        try:
            user_input = input("\nYou: ")
        except EOFError:
            print()
            break
        print(f"Chatbot: {respond(user_input)}")
        if is_farewell(user_input):
            break
    return 0