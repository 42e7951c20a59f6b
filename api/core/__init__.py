"""
Shared, cross-cutting code for the API.

`core/` holds the small building blocks the app is wired from
(DB pool, settings, logging, error responses). Keep resource-specific SQL and
business logic in the resource package (e.g. `test_projects/`).
"""
