"""
Version 1 of the API.

Breaking changes to request or response shapes belong in a new
version subpackage (e.g. ``v2``).
"""
