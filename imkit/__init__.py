"""Object protocol, error state, logging, option/result types and containers."""

__version__ = "0.1.0"

__all__ = [
    "box",
    "core",
    "errors",
    "interfaces",
    "linkedlist",
    "log",
    "modlog",
    "option",
    "panic",
    "params",
    "strbuf",
    "textio",
    "wrap",
]