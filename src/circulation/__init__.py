"""Circulation

A lending-catalog circulation service. Patrons place holds on available
items and later check them out; the circulation desk keeps each item's
status in step with the lifecycle of its hold through domain events.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
