"""
Shared, cross-cutting code for the API.

`core/` should contain small building blocks that multiple features use
(DB wiring, settings, logging, identifiers, error kinds). Keep
feature-specific SQL and business logic in the corresponding package
(e.g. `store/`, `users/`, `posts/`).
"""
