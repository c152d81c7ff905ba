"""
Domain layer package.

Portfolio entities, the scoring, forecasting and valuation services,
and the repository and adapter ports they are written against.
Nothing here imports FastAPI or touches IO.
"""
