"""Version 1 routers, mounted under ``/api``."""
