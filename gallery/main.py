# gallery/main.py
import errno
import os
import re
import socket
import sys
from typing import Optional

import uvicorn
from brotli_asgi import BrotliMiddleware  # https://github.com/fullonic/brotli-asgi
from fastapi import FastAPI, HTTPException, Query, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from gallery import config, schemas, search_engine, static_files
from gallery.errors import GalleryError, MethodNotAllowedError
from gallery.logger import get_logger

logger = get_logger()

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}
PREFLIGHT_MAX_AGE = "86400"

# docs live under /api so every other path reaches the static handler
app = FastAPI(title="Image Gallery API",
              description="API for browsing and searching a folder of images",
              version="1.0.0",
              docs_url="/api/docs",
              redoc_url=None,
              openapi_url="/api/openapi.json")


def error_response(message: str, status_code: int = 500) -> JSONResponse:
    return JSONResponse(content={"error": message}, status_code=status_code)


def parse_page(raw: Optional[str]) -> int:
    """Leading integer of ``raw``, floored at 1; anything unparsable is page 1."""
    match = re.match(r"\s*([+-]?\d+)", raw or "")
    page = int(match.group(1)) if match else 1
    return max(1, page)


@app.middleware("http")
async def dispatch(request: Request, call_next):
    if request.method == "OPTIONS":
        return Response(status_code=204,
                        headers={**CORS_HEADERS, "Access-Control-Max-Age": PREFLIGHT_MAX_AGE})

    if request.method != "GET":
        err = MethodNotAllowedError()
        logger.error(f"{request.method} {request.url.path}: {err.message}")
        response = error_response(err.message, err.status_code)
    else:
        try:
            response = await call_next(request)
        except Exception as e:
            logger.error(f"Unhandled error for {request.url.path}: {e}", exc_info=True)
            response = error_response("Internal server error")

    response.headers.update(CORS_HEADERS)
    return response


# compress JSON payloads for clients that accept br, falling back to gzip
app.add_middleware(BrotliMiddleware)


@app.exception_handler(GalleryError)
async def gallery_error_handler(request: Request, exc: GalleryError):
    logger.error(f"{request.url.path}: {exc.message}")
    return error_response(exc.message, exc.status_code)


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return error_response(str(exc.detail), exc.status_code)


@app.get("/api/images", response_model=schemas.ImagePage)
async def list_images(
    q: str = Query("", description="Case-insensitive substring of the filename"),
    page: Optional[str] = Query(None, description="Page number, starting from 1"),
):
    """List images in the assets folder, filtered by ``q`` and paginated."""
    page_number = parse_page(page)
    try:
        data = await run_in_threadpool(
            search_engine.list_images, config.ASSETS_DIR, q, page_number, config.PAGE_SIZE
        )
    except OSError as e:
        logger.error(f"Error listing images: {e}")
        raise HTTPException(status_code=500, detail="Internal server error")
    logger.info(f"Retrieved page {page_number} for query '{q}', total matches: {data.total_images}")
    return data


@app.get("/api/image/random", response_model=schemas.ImageEntry,
         responses={404: {"model": schemas.ErrorBody}})
async def random_image(q: str = Query("", description="Optional filename filter")):
    try:
        return await run_in_threadpool(search_engine.pick_random, config.ASSETS_DIR, q)
    except GalleryError:
        raise
    except OSError as e:
        logger.error(f"Error picking random image: {e}")
        raise HTTPException(status_code=500, detail="Internal server error")


@app.get("/{url_path:path}", include_in_schema=False)
async def static_file(url_path: str):
    try:
        content, content_type = await run_in_threadpool(
            static_files.read_static, url_path, config.PUBLIC_DIR, config.ASSETS_DIR
        )
    except GalleryError:
        raise
    except OSError as e:
        logger.error(f"Error reading /{url_path}: {e}")
        raise HTTPException(status_code=500, detail="Internal server error")
    # content type goes in verbatim so text types get no charset suffix
    return Response(content=content,
                    headers={"Content-Type": content_type,
                             "Cache-Control": static_files.CACHE_CONTROL})


def initialize_directories():
    """Create the assets and public directories if they don't exist."""
    for directory in (config.ASSETS_DIR,
                      config.PUBLIC_DIR,
                      os.path.join(config.PUBLIC_DIR, "css"),
                      os.path.join(config.PUBLIC_DIR, "js")):
        os.makedirs(directory, exist_ok=True)
    logger.info("Directories initialized successfully")


def bind_socket(host: str, port: int) -> socket.socket:
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
    try:
        sock.bind((host, port))
    except OSError as e:
        sock.close()
        if e.errno == errno.EADDRINUSE:
            logger.critical(f"Port {port} is already in use. Please try a different port.")
        else:
            logger.critical(f"Server error: {e}")
        sys.exit(1)
    return sock


def main():
    initialize_directories()
    sock = bind_socket(config.HOST, config.PORT)

    logger.info(f"Server running at http://localhost:{config.PORT}")
    logger.info(f"Serving images from: {os.path.abspath(config.ASSETS_DIR)}")
    logger.info(f"Serving static files from: {os.path.abspath(config.PUBLIC_DIR)}")

    server = uvicorn.Server(uvicorn.Config(app, log_level=config.LOG_LEVEL.lower()))
    server.run(sockets=[sock])


if __name__ == "__main__":
    main()
