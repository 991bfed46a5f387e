#!/usr/bin/env python3
"""
Gallery Admin backend starter.

Runs the FastAPI app from the project root so `gallery_admin` imports resolve.
Pass --demo to force the local demo store for every request.
"""

import uvicorn
import os
import sys

if __name__ == "__main__":
    script_dir = os.path.dirname(os.path.abspath(__file__))
    os.chdir(script_dir)
    sys.path.insert(0, script_dir)

    if "--demo" in sys.argv[1:]:
        # Read by gallery_admin.database at import time
        os.environ["DEMO_MODE"] = "true"

    port = int(os.getenv("PORT", "8000"))

    print(f"Starting Gallery Admin API from: {script_dir}")
    print(f"Server will be available at: http://localhost:{port}")
    print(f"API docs will be available at: http://localhost:{port}/docs")

    uvicorn.run(
        "gallery_admin.main:app",
        host="0.0.0.0",
        port=port,
        reload=True,
        reload_dirs=["./gallery_admin"],
    )
