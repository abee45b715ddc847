"""Monetary domain package.

This package contains classes for handling monetary amounts and currencies: `Currency`
definitions, the read-only `CurrencyRegistry` of known codes, and `Money` stored as
integer minor units.
"""
