"""
API package containing the routers.

``router`` at the package level includes every endpoint module; it is
mounted on the application by ``main.create_app``.
"""
