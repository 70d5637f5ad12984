"""Plan package-mirror switches for operating systems and software ecosystems."""

__version__ = "0.1.0"