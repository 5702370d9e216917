import time

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from maxwell.controllers.config import CORS_ORIGINS, MAX_BODY_BYTES, PORT, logger
from maxwell.routes.circuit_analyzer import router as circuit_analyzer_router
from maxwell.routes.relay import router as relay_router
from maxwell.routes.study_buddy import router as study_buddy_router
from maxwell.routes.views import router as views_router


app = FastAPI(
    title="Maxwell Backend API",
    description="Circuit analysis and circuit-theory quizzes backed by a vision-language model",
    version="1.0.0",
)


@app.middleware("http")
async def logging_middleware(request: Request, call_next):
    start_time = time.time()

    logger.info(f"Incoming request: {request.method} {request.url}")

    content_length = request.headers.get("content-length")
    if content_length and content_length.isdigit():
        body_size = int(content_length)
    elif request.method in ("POST", "PUT", "PATCH"):
        # Chunked uploads carry no Content-Length; the body read here is
        # cached on the request and replayed to the route.
        body_size = len(await request.body())
    else:
        body_size = 0

    if body_size > MAX_BODY_BYTES:
        logger.warning(f"Rejected request body of {body_size} bytes")
        return JSONResponse(status_code=413, content={"error": "Request body too large"})

    response = await call_next(request)

    process_time = time.time() - start_time
    logger.info(
        f"Request completed: {request.method} {request.url} - Status: {response.status_code} - Time: {process_time:.4f}s"
    )

    return response


app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
)


@app.get("/")
def read_root():
    logger.info("Health check endpoint accessed")
    return {"status": "Maxwell backend is running"}


app.include_router(relay_router)
app.include_router(circuit_analyzer_router)
app.include_router(study_buddy_router)
app.include_router(views_router)


def run():
    logger.info(f"Proxy server running on http://localhost:{PORT}")
    uvicorn.run(
        "maxwell.main:app",
        host="0.0.0.0",
        port=PORT,
        reload=False,
        log_level="info",
        access_log=True,
    )


if __name__ == "__main__":
    run()
