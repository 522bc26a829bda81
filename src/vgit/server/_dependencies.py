from typing import Annotated, cast

from fastapi import Depends, Request

from vgit.browse import RepositoryBrowser


def get_browser(request: Request) -> RepositoryBrowser:
    return cast("RepositoryBrowser", request.app.state.browser)


BrowserDep = Annotated[RepositoryBrowser, Depends(get_browser)]
