"""Routing — pattern compilation and per-route URL matchers.

Patterns are compiled once, at registration time, into anchored regular
expressions; matching a URL is a plain function call afterwards.
"""
