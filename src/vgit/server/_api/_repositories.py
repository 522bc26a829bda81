from fastapi import APIRouter

from vgit.server._dependencies import BrowserDep
from vgit.server._schemas import RepositoriesResponse, RepositoryResponse

router = APIRouter(prefix="", tags=["repositories"])


@router.get("/repositories")
def get_repositories(browser: BrowserDep) -> RepositoriesResponse:
    view = browser.list_repositories()
    return RepositoriesResponse(
        repositories=[
            RepositoryResponse(
                name=summary.name,
                description=summary.description,
                last_activity=summary.last_activity,
                last_activity_human=summary.last_activity_human,
            )
            for summary in view.repositories
        ]
    )
