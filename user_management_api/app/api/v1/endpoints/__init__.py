"""
Domain routers for API v1.  Each module exposes a ``router`` that is
mounted by ``api/v1/router.py``.
"""
