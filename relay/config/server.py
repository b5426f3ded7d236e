"""HTTP listener configuration (env-resolved constants only)."""

from __future__ import annotations

import os
from pathlib import Path

HOST: str = (os.getenv("HOST") or "").strip() or "0.0.0.0"

_PORT_RAW = (os.getenv("PORT") or "").strip()
try:
    PORT: int = int(_PORT_RAW) if _PORT_RAW else 3000
except Exception:
    PORT = 3000
if PORT <= 0 or PORT > 65535:
    PORT = 3000

# Static frontend assets. Only mounted when the directory exists.
_PUBLIC_DIR_RAW = (os.getenv("PUBLIC_DIR") or "").strip()
PUBLIC_DIR: Path = Path(_PUBLIC_DIR_RAW).expanduser() if _PUBLIC_DIR_RAW else Path("public")

__all__ = [
    "HOST",
    "PORT",
    "PUBLIC_DIR",
]
