"""Run the API server with the hourly schedule."""

import uvicorn


def serve(host: str = "0.0.0.0", port: int = 8000, reload: bool = False) -> None:
    """Start the HTTP API and the scheduled refresh in the foreground.

    Args:
        host: Host to bind to.
        port: Port to listen on.
        reload: Restart on code changes (development only).
    """
    uvicorn.run(
        "fng.application.api.rest.app:create_app",
        factory=True,
        host=host,
        port=port,
        reload=reload,
    )
