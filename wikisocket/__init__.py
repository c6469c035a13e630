"""Wiki collaboration backend.

This package serves the wiki's real-time client protocol over WebSockets.
Each connection owns one session (anonymous until login) and sends named
commands that are validated, permission-checked and answered with a
single response event.

Architecture Overview:
    - server.py: FastAPI application entry point
    - config/: Configuration modules (environment-based)
    - handlers/: Session lifecycle, permission gate, command router,
      aggregation chains, WebSocket transport
    - commands/: One module per command family
    - collaborators/: Contracts for the Users, Discussions and Settings
      services plus in-memory implementations
    - runtime/: Startup wiring of shared services
    - state/: Session and settings dataclasses

Example:
    Start the server with uvicorn:

    $ uvicorn wikisocket.server:app --host 0.0.0.0 --port 8080

Environment Variables:
    Optional:
        - WIKI_COMMUNITY_NAME, WIKI_WELCOME_MESSAGE: community settings
        - WIKI_PUBLIC_ACCESS: 'true' lets anonymous sessions read discussions
        - WIKI_PORT: listen port used by ``python -m wikisocket``
        - WIKI_EMAIL_ADDRESS, WIKI_SITE_ADDRESS: server-side mail settings
        - APP_LOG_LEVEL: logging level (default: INFO)
"""
