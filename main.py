#!/usr/bin/env python3
"""
zfsquery - read-only ZFS query service
Main entry point for the FastAPI service.
"""

from zfsquery.config import get_config

# Loads .env and reads the environment once
config = get_config()


def main():
    """Main entry point for the zfsquery API service."""
    import uvicorn
    from zfsquery.main import app

    host, port = config.server.host, config.server.port
    print("Starting zfsquery API service...")
    print(f"Access the API at: http://{host}:{port}")
    if config.server.enable_docs:
        print(f"API documentation at: http://{host}:{port}/docs")
    print("Press Ctrl+C to stop the service")

    uvicorn.run(
        app,
        host=host,
        port=port,
        log_level=config.log_level.lower()
    )


if __name__ == "__main__":
    main()
