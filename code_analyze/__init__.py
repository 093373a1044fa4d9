"""code-analyze: line-level static pattern analyzer."""

__version__ = "1.0.0"
