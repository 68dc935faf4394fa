"""
PromoGame Server Package.

This package contains the web server for the game promotion: registration,
login, payment submission, admin review of payments and game settings.

Subpackages:
    api: FastAPI route definitions and endpoint logic.
    core: Settings and constants.
    services: Business logic and request dependencies.
    middleware: Request logging.
    exception_handlers: Error rendering.
"""
