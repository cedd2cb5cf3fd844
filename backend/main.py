"""Standalone server entry point for LearnSmart PDF Summarizer API."""
import logging
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from config import PORT, CORS_ORIGINS
from errors import MethodError, UpstreamError, ValidationError, LLMError
from models.api import SummarizeRequest, SummarizeResponse, ErrorResponse, HealthResponse
from models.summary import SummaryResult
from services.llm_client import LLMClient
from services.summarizer import SummarizationService

# Initialize logging
logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title="LearnSmart PDF Summarizer",
    description="Summarizes text extracted from PDF documents using the Groq API",
    version="1.0.0"
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Initialized on startup, one per process
summarization_service: SummarizationService = None


@app.on_event("startup")
async def startup_event():
    """Initialize services on startup."""
    global summarization_service

    logger.info("Initializing LearnSmart PDF Summarizer services...")

    try:
        summarization_service = SummarizationService(llm_client=LLMClient())
        logger.info("Initialized SummarizationService")
    except Exception as e:
        logger.error(f"Failed to initialize services: {e}", exc_info=True)
        raise


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render routing errors with the ``{"error": ...}`` body."""
    if exc.status_code == MethodError.status_code:
        message = MethodError.public_message
    elif exc.status_code == ValidationError.status_code:
        # Undecodable bodies
        message = ValidationError.public_message
    else:
        message = str(exc.detail)
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": message},
        headers=getattr(exc, "headers", None)
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed or non-JSON bodies are treated as missing text."""
    logger.info(f"Rejected malformed summarize body: {exc.errors()}")
    return JSONResponse(
        status_code=ValidationError.status_code,
        content={"error": ValidationError.public_message}
    )


@app.get("/")
async def root():
    """Health check endpoint."""
    return {"status": "ok", "message": "LearnSmart PDF Summarizer API"}


@app.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    """Detailed health check."""
    return HealthResponse(
        status="healthy",
        service="learnsmart-pdf-summarizer",
        version="1.0.0"
    )


@app.post(
    "/api/summarize",
    response_model=SummarizeResponse,
    responses={
        400: {"model": ErrorResponse},
        405: {"model": ErrorResponse},
        500: {"model": ErrorResponse}
    }
)
def summarize_endpoint(request: SummarizeRequest):
    """
    Summarize extracted document text.

    Args:
        request: SummarizeRequest with the document text

    Returns:
        200 with the summary, 400 when no text was provided, or 500 when the
        summary could not be generated
    """
    if summarization_service is None:
        logger.error("Summarize called before services were initialized")
        result = SummaryResult.failure(UpstreamError(LLMError(
            code="CONFIGURATION_ERROR",
            message="Summarization service is not initialized"
        )))
    else:
        result = summarization_service.summarize(request.text)

    if not result.ok:
        return JSONResponse(status_code=result.status_code, content=result.to_body())

    return SummarizeResponse(summary=result.summary)


if __name__ == "__main__":
    import uvicorn
    logger.info(f"Starting LearnSmart PDF Summarizer API on port {PORT}")
    uvicorn.run(app, host="0.0.0.0", port=PORT)
