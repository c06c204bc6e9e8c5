"""Small utilities: string helpers, URI parsing, clocks, a timer wheel and threads."""

__version__ = "2.0.0"
__all__ = ["strings", "uri", "clock", "timer", "thread"]