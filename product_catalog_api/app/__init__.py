"""
Application package initializer.

The code is layered: ``api`` holds the versioned HTTP endpoints,
``services`` the business façade, ``repositories`` the persistence
gateways and ``schemas`` the pydantic models shared between them.
``core`` carries configuration, logging, storage bootstrap, the error
taxonomy and the abstract interfaces each layer depends on.

No application instance is created at import time; build one with
``create_app`` from ``main`` so configuration is always explicit.
"""
