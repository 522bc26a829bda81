"""vgit web server.

Serves the HTML browse pages and a small JSON API:

- ``GET /`` repository listing
- ``GET /{repo}`` root of the default branch
- ``GET /{repo}/tree/{ref}/{path}`` directory listing
- ``GET /{repo}/blob/{ref}/{path}`` file view
- ``GET /{repo}/raw/{ref}/{path}`` raw file bytes
- ``GET /{repo}/branches`` branch list
- ``GET /api/health`` and ``GET /api/repositories``
"""

from ._app import HEALTH_PATH, create_app

__all__ = ["HEALTH_PATH", "create_app"]
