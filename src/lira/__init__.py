"""Lira agent dispatch service.

Runs registered agents against their model backends (language models or the
quantum oracle), one at a time or as concurrent batches.
"""

__version__ = "0.1.0"
