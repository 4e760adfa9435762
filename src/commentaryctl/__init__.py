__version__ = "0.1.0"

__all__ = [
    "__version__",
    "check",
    "cli",
    "config",
    "core",
    "document",
    "region",
    "render",
    "report",
    "resolve",
    "update",
]
