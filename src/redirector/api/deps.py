from fastapi import Request

from redirector.components.redirects import Configuration


# --- Configuration ---
def get_config(request: Request) -> Configuration:
    """Redirect configuration installed on the application at startup."""
    config: Configuration | None = getattr(request.app.state, "redirect_config", None)
    if config is None:
        raise RuntimeError("Redirect configuration has not been loaded")
    return config
