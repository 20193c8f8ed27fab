"""Vehicle total-cost-of-ownership engine: loans, APR, and cost comparison."""

__version__ = "1.0.0"
