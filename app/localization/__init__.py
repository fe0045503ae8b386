"""Fluent localization toolkit.

Turns per-language Fluent catalogs into a validated accessor surface and
the runtime bundles that serve it, falling back to a default language.
"""
