"""Shared infrastructure used by datasources.

  - http: requests session with retry/backoff and a default timeout
"""
