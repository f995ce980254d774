"""Routing — versioned route tables.

Controllers are registered per API version, resolved with
version-to-version inheritance, emitted as flat route entries, and
compiled into an immutable lookup structure when the app freezes.
"""
