"""HTML browse pages.

Handlers are plain functions so FastAPI runs each one in its worker thread
pool; every store call below them blocks.
"""

from urllib.parse import quote

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse, Response

from vgit.server._dependencies import BrowserDep
from vgit.server._templating import templates

router = APIRouter(include_in_schema=False)


@router.get("/", response_class=HTMLResponse)
def get_index(request: Request, browser: BrowserDep) -> HTMLResponse:
    view = browser.list_repositories()
    return templates.TemplateResponse(request=request, name="index.html", context={"view": view})


@router.get("/{repo}", response_class=HTMLResponse)
def get_repository(request: Request, repo: str, browser: BrowserDep) -> HTMLResponse:
    view = browser.browse_root(repo)
    return templates.TemplateResponse(request=request, name="tree.html", context={"view": view})


@router.get("/{repo}/branches", response_class=HTMLResponse)
def get_branches(request: Request, repo: str, browser: BrowserDep) -> HTMLResponse:
    view = browser.list_branches(repo)
    return templates.TemplateResponse(
        request=request, name="branches.html", context={"view": view}
    )


@router.get("/{repo}/tree/{ref_path:path}", response_class=HTMLResponse)
def get_tree(request: Request, repo: str, ref_path: str, browser: BrowserDep) -> HTMLResponse:
    view = browser.browse_tree(repo, ref_path)
    return templates.TemplateResponse(request=request, name="tree.html", context={"view": view})


@router.get("/{repo}/blob/{ref_path:path}", response_class=HTMLResponse)
def get_blob(request: Request, repo: str, ref_path: str, browser: BrowserDep) -> HTMLResponse:
    view = browser.view_blob(repo, ref_path)
    return templates.TemplateResponse(request=request, name="blob.html", context={"view": view})


@router.get("/{repo}/raw/{ref_path:path}")
def get_raw(repo: str, ref_path: str, browser: BrowserDep) -> Response:
    view = browser.view_raw(repo, ref_path)
    media_type = "application/octet-stream" if view.is_binary else "text/plain; charset=utf-8"
    return Response(
        content=view.data,
        media_type=media_type,
        headers={"Content-Disposition": f"inline; filename*=UTF-8''{quote(view.filename)}"},
    )
