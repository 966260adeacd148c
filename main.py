#!/usr/bin/env python3
import logging
import os

import uvicorn
from webstore.app import create_app
from webstore.core.database import LOG_LEVEL, init_db

logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

# Create the FastAPI app
app = create_app()


if __name__ == "__main__":
    init_db()

    host = os.getenv("WEBSTORE_HOST", "127.0.0.1")
    port = int(os.getenv("WEBSTORE_PORT", "8000"))
    reload_enabled = os.getenv("WEBSTORE_DEV_MODE", "false").lower() == "true"

    print(f"Starting WebStore reports on {host}:{port}")
    uvicorn.run("main:app", host=host, port=port, reload=reload_enabled)
