"""Core building blocks shared by the server: logging, models, errors and storage."""
