"""Main entry point for the Zen Gomoku CLI."""

from .cli import run

if __name__ == "__main__":
    run()
