"""
Shared service utilities.

- http.py - requests session factory (timeout, user agent, retry policy)
"""
