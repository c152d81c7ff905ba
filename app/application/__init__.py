"""
Application layer package.

One use case per dashboard operation: each takes its ports in the
constructor and exposes ``execute``. Depends on domain ports only.
"""
