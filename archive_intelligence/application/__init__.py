"""
Application Layer

Use cases exposed to callers. Coordinates the archive domain services
and handles cross-cutting concerns like logging correlation and input
coercion.
"""
