"""
InvestWise - Source Package

A console application for tracking a personal asset portfolio:
sign up, log in, add/remove/edit assets, calculate zakat and
export a plain-text report.

DESIGN PRINCIPLES:
1. Whole-collection storage (load, mutate in memory, rewrite)
2. Components are built once and passed explicitly
3. Fail early, fail visibly
4. Every user action is auditable
5. Storage layer is swappable
"""

__version__ = "1.0.0"
__author__ = "InvestWise Team"
