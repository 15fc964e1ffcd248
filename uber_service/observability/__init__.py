"""Structured logging for the service.

structlog renders one JSON object per line on stdout; uvicorn's own loggers
share the same handler.
"""
