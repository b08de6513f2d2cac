"""Models, XML reading and writing, and validation for FinCEN Form 8300 and CTR activities."""

__version__ = "0.1.0"