"""
Infrastructure layer package.

In-memory repositories, the seeded demo dataset, market simulators
and the webhook notification sender.
"""
