"""Small building blocks: greetings, sums, string repetition, shapes, a dictionary and a wallet."""

__version__ = "0.1.0"