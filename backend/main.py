from dotenv import load_dotenv
load_dotenv()

from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.datastructures import Headers
from starlette.exceptions import HTTPException as StarletteHTTPException

from routes import chat

ALLOWED_HEADERS = [
    "X-CSRF-Token", "X-Requested-With", "Accept", "Accept-Version",
    "Content-Length", "Content-MD5", "Content-Type", "Date", "X-Api-Version",
]


class PreflightCORSMiddleware(CORSMiddleware):
    """Answers every preflight with an empty 200 and the fixed Allow-* headers."""

    def preflight_response(self, request_headers: Headers) -> Response:
        headers = dict(self.preflight_headers)
        if self.preflight_explicit_allow_origin:
            headers["Access-Control-Allow-Origin"] = request_headers["origin"]
        return Response(status_code=200, headers=headers)


app = FastAPI(title="Gemini Proxy API", version="0.1.0")

app.add_middleware(
    PreflightCORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["POST", "OPTIONS"],
    allow_headers=ALLOWED_HEADERS,
)

app.include_router(chat.router)


# ---------- Error bodies ----------

@app.exception_handler(StarletteHTTPException)
async def http_error(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_error(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=400,
        content={"error": 'The "messages" field is required and must be a non-empty array.'},
    )


@app.get("/")
def health():
    return {"status": "ok", "service": "gemini-proxy"}
