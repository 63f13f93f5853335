"""Allow ``python -m project_management`` to start the server."""

from .server.app import main

main()
