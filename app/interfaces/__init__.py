"""
HTTP surface of FXFolio.

Routers translate JSON to use case inputs and entities back to camelCase
responses. Validation lives in the schemas, error mapping in
``app.shared.errors``.
"""
