"""
Error-to-HTTP mapping for FXFolio.

Portfolio errors and request validation failures become small
``{"error": ...}`` bodies; internal details stay in the logs.
"""
