"""lintkit — static-analysis utilities that emit SARIF."""

__version__ = "0.1.0"
