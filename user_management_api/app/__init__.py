"""
Application package initializer.

The project is split into small layers: ``core`` (configuration,
logging, errors, database access), ``schemas`` (pydantic models),
``repositories`` (data access), ``services`` (validation and business
rules) and ``api`` (HTTP routes).  Services never import the API
layer, so they can be used without FastAPI running.
"""
