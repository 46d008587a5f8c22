"""
HTTP layer.

Routers live in versioned subpackages (``v1``).  Shared pieces used by
every version, i.e. service lookup and error rendering, live next to
this file.
"""
