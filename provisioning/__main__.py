"""Serve the provisioning API with uvicorn: ``python -m provisioning``."""
from __future__ import annotations

import uvicorn

from provisioning.core.config import get_settings


def run_server(host: str | None = None, port: int | None = None, reload: bool = False) -> None:
    settings = get_settings()
    uvicorn.run(
        "provisioning.app:create_app",
        factory=True,
        host=host or settings.host,
        port=port or settings.port,
        reload=reload,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run_server(reload=get_settings().app_env == "dev")
