#!/usr/bin/env python3
"""Start the stud wall framing API server."""

import uvicorn

from wallframe.config import get_settings

if __name__ == "__main__":
    settings = get_settings()
    uvicorn.run(
        "wallframe.api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
        reload_dirs=["wallframe"],
        log_level=settings.log_level.lower(),
    )
