from pathlib import Path

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import FileResponse

router = APIRouter(tags=["pages"])


def _page(request: Request, filename: str) -> FileResponse:
    path = Path(request.app.state.static_dir) / filename
    if not path.is_file():
        raise HTTPException(status_code=404, detail="Page not found")
    return FileResponse(path, media_type="text/html")


@router.get("/home", include_in_schema=False)
def home(request: Request):
    return _page(request, "home.html")


@router.get("/login", include_in_schema=False)
def login_page(request: Request):
    return _page(request, "login.html")


@router.get("/index", include_in_schema=False)
def index(request: Request):
    return _page(request, "index.html")
