"""
HR Service.

Positions and employees with uniqueness, referential-integrity and
request-correlation rules, served over FastAPI.
"""

__version__ = "1.0.0"
