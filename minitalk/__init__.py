"""Send text between processes bit by bit over SIGUSR1 and SIGUSR2, with a small printf."""

__version__ = "1.0.0"
__all__ = ["convert", "conversions", "printf", "protocol", "server", "client"]