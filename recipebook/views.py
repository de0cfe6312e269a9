from pathlib import Path
from typing import Any, Dict, Union

from fastapi import Request
from fastapi.templating import Jinja2Templates


class ViewRenderer:
    """Render a named view (``<name>.html``) with a data payload."""

    def __init__(self, directory: Union[str, Path]):
        self.templates = Jinja2Templates(directory=str(directory))

    def render(self, request: Request, view: str, payload: Dict[str, Any]):
        return self.templates.TemplateResponse(request, f"{view}.html", payload)


def get_renderer(request: Request) -> ViewRenderer:
    return request.app.state.renderer
