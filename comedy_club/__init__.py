"""
ContainerComedy Club joke service.

Serves random jokes from MongoDB, counts how often each one was shown and
keeps a short-lived Redis snapshot of every served joke.
"""

__version__ = "0.1.0"
