"""
dibble - quick and local word definitions.

Looks a word up in a pre-sharded JSON dictionary installed on the local
machine and prints its definition to the terminal.
"""

__version__ = "1.2"
