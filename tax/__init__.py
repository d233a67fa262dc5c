"""Bracket tables and tax-rate lookups."""

from .brackets import Bracket, marginal_rate, progressive_amount, validate_brackets

__all__ = ["Bracket", "marginal_rate", "progressive_amount", "validate_brackets"]
