"""Server-wide constants."""

PROJECT_NAME = "PromoGame"
VERSION = "1.0.0"
API_PREFIX = "/api"
