"""PromoGame.

Backend for a web-based game promotion. Players register, submit proof of a
UPI payment, and get game chances once an administrator approves it. The
administrator also tunes the game's speed and precision settings.

Core subpackages
----------------

- ``promogame.core``: logging, monitoring, domain models, errors and the
  storage layer. Storage is either a direct SQL connection to the managed
  Postgres (``core.database``) or the hosted REST data API
  (``core.store.rest``), both behind the same repository interfaces.
- ``promogame.server``: the FastAPI application, routers and service layer.
"""
