"""
Infrastructure adapters for the portfolio bounded context.

In-memory repositories, simulated market feeds and the notification sender.
"""
