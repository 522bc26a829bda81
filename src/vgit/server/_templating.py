"""Jinja environment shared by the HTML pages and error handlers."""

from fastapi.templating import Jinja2Templates

from vgit.browse import build_display_path, entry_display_path
from vgit.utils import get_templates_dir

templates = Jinja2Templates(directory=get_templates_dir())
templates.env.globals["entry_href"] = entry_display_path
templates.env.globals["display_path"] = build_display_path
