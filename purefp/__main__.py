"""Allows `python -m purefp`."""

from purefp.cli import run

if __name__ == "__main__":
    run()
