from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

import uvicorn


def main():
    root = Path(__file__).resolve().parent.parent
    if str(root) not in sys.path:
        sys.path.insert(0, str(root))
    from app.deps import get_app_cfg, get_log_level

    cfg = get_app_cfg()
    server_cfg = cfg.get("server", {})
    logging.basicConfig(level=get_log_level(cfg))
    uvicorn.run(
        "app.main:app",
        host=server_cfg.get("host", "127.0.0.1"),
        port=int(os.getenv("PORT") or server_cfg.get("port", 3001)),
        reload=False,
    )


if __name__ == "__main__":
    main()
