"""
BizPlan package

This package computes the multi-year financial projection of a small
business plan.  It separates the domain records (the plan the user fills
in), the calculation engine, the fiscal/financial parameter tables and
the console rendering into distinct subpackages.
"""

__all__ = ["core", "domain", "data", "ui"]
