"""
Demo endpoints - one route per status class the access log colors
"""
from fastapi import APIRouter
from fastapi.responses import PlainTextResponse, RedirectResponse, Response

from prettylog.formatting import MEGABYTE

router = APIRouter(tags=["demo"])


@router.get("/", response_class=PlainTextResponse)
async def hello():
    return "Hello, World!"


@router.get("/redirect")
async def redirect():
    return RedirectResponse("/", status_code=301)


@router.get("/unauthorized")
async def unauthorized():
    return PlainTextResponse("Unauthorized", status_code=401)


@router.post("/post")
async def post():
    """Return a 1MB response"""
    return Response(content=bytes(MEGABYTE), media_type="application/octet-stream")
