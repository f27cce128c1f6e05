import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field, StrictStr, field_validator

from code_reviewer.constants import REVIEW_FAILED_MESSAGE
from code_reviewer.dependencies import build_review_service, get_review_service, get_settings
from code_reviewer.errors import ReviewError, ReviewFailedError
from code_reviewer.service import ReviewService

settings = get_settings()

logging.basicConfig(level=settings.LOG_LEVEL)


@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.review_service = build_review_service(get_settings())
    logging.info("Review service initialized.")
    yield


app = FastAPI(
    title="Code Review API",
    description="An API endpoint to review code snippets using the Gemini LLM.",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class ReviewRequest(BaseModel):
    code: StrictStr = Field(..., description="The code snippet to be reviewed.")

    @field_validator("code")
    @classmethod
    def code_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Code must be a non-empty string")
        return value


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    errors = [
        {"loc": error["loc"], "msg": error["msg"], "type": error["type"]}
        for error in exc.errors()
    ]
    return JSONResponse(status_code=400, content={"errors": jsonable_encoder(errors)})


@app.exception_handler(ReviewError)
async def review_error_handler(request: Request, exc: ReviewError):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception):
    logging.exception(f"Error in {request.url.path} route: {exc}")
    return JSONResponse(status_code=500, content={"error": REVIEW_FAILED_MESSAGE})


@app.get("/", tags=["Health"])
async def root():
    return {"status": "ok"}


@app.post("/get-review", tags=["Review"], response_model=str)
async def get_review(
    request_data: ReviewRequest,
    service: ReviewService = Depends(get_review_service),
):
    try:
        return await service.get_review(request_data.model_dump())
    except ReviewError:
        raise
    except Exception as e:
        # Handlers for Exception run outside CORSMiddleware
        logging.exception(f"Error in /get-review route: {e}")
        raise ReviewFailedError() from e
