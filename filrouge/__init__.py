"""Game logic for a Mastermind board and a memory card game."""

__version__ = "0.1.0"
__all__ = ["mastermind", "memory"]