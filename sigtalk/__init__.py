"""Receiving text sent bit by bit over SIGUSR1 and SIGUSR2, with small text helpers."""

__version__ = "0.1.0"