"""
MUN Admin - Model UN conference administration service.

A REST API over an in-memory record store covering delegate registration,
committees and portfolios, evaluation scoring and award auto-assignment,
plus the conference plumbing (tasks, logistics, marketing, sponsorships,
updates) the organiser dashboard consumes.
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
