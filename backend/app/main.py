"""FastAPI backend application."""
from typing import Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
import uvicorn

from backend.agents.prompt_builder import build_prompt
from backend.app.brand_registry import BrandRegistry
from backend.app.config import get_settings
from backend.app.constants import FRAMEWORK_DETAILS, LANGUAGE_LABELS, pillar_label, tone_label
from backend.app.copy_generator import CopyGenerator
from backend.app.errors import GENERIC_GENERATION_ERROR, GenerationError
from backend.app.logger import logger, LOG_FILE
from backend.app.models import (
    BrandCreateRequest,
    BrandListResponse,
    BrandProfile,
    BuiltPrompt,
    ContentPillar,
    ContentRequest,
    Framework,
    FrameworkOption,
    GenerateRequest,
    GeneratedResponse,
    LabelledOption,
    Language,
    OptionsResponse,
    Tone,
)

app = FastAPI(
    title="CopyCraft API",
    description="API for generating framework-driven marketing copy with Gemini",
    version="0.1.0"
)

# CORS for the Streamlit frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Global services (initialized on startup)
copy_generator: Optional[CopyGenerator] = None
brand_registry: Optional[BrandRegistry] = None


@app.on_event("startup")
async def startup_event():
    """Initialize services on startup."""
    global copy_generator, brand_registry
    copy_generator = CopyGenerator()
    brand_registry = BrandRegistry()


def _registry() -> BrandRegistry:
    if brand_registry is None:
        raise HTTPException(status_code=503, detail="Service not ready")
    return brand_registry


def _resolve_request(request: GenerateRequest) -> ContentRequest:
    brand = None
    if request.brand is None and request.brand_id:
        brand = _registry().get(request.brand_id)
        if brand is None:
            raise HTTPException(status_code=404, detail=f"Brand not found: {request.brand_id}")
    return request.to_content_request(brand)


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": "CopyCraft API",
        "version": "0.1.0",
        "endpoints": ["/options", "/brands", "/prompt", "/generate"]
    }


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "llm_configured": bool(copy_generator and copy_generator.enabled),
    }


@app.get("/options", response_model=OptionsResponse)
async def options(lang: Language = Language.EN):
    """Selectable values for the form, labelled in ``lang``."""
    return OptionsResponse(
        frameworks=[
            FrameworkOption(
                value=fw,
                title=FRAMEWORK_DETAILS[fw.value]["title"],
                description=FRAMEWORK_DETAILS[fw.value]["description"],
            )
            for fw in Framework
        ],
        pillars=[LabelledOption(value=p.value, label=pillar_label(p, lang)) for p in ContentPillar],
        tones=[LabelledOption(value=t.value, label=tone_label(t, lang)) for t in Tone],
        languages=[LabelledOption(value=code, label=label) for code, label in LANGUAGE_LABELS.items()],
    )


@app.get("/brands", response_model=BrandListResponse)
def list_brands():
    """List registered brand profiles."""
    registry = _registry()
    return BrandListResponse(brands=registry.list(), selected_brand_id=registry.selected_id)


@app.post("/brands", response_model=BrandProfile, status_code=201)
def add_brand(request: BrandCreateRequest):
    """Register a brand profile and select it."""
    return _registry().add(request.to_profile())


@app.delete("/brands/{brand_id}", status_code=204)
def delete_brand(brand_id: str):
    """Remove a brand profile."""
    if not _registry().delete(brand_id):
        raise HTTPException(status_code=404, detail=f"Brand not found: {brand_id}")


@app.post("/prompt", response_model=BuiltPrompt)
def preview_prompt(request: GenerateRequest):
    """Return the prompt that /generate would send, without calling the model."""
    return build_prompt(_resolve_request(request))


@app.post("/generate", response_model=GeneratedResponse)
def generate_copy(request: GenerateRequest):
    """Generate marketing copy for a content request."""
    if copy_generator is None:
        raise HTTPException(status_code=503, detail="Service not ready")
    content_request = _resolve_request(request)
    try:
        return copy_generator.generate_response(content_request)
    except GenerationError as e:
        logger.error(f"Error generating copy: {e}")
        raise HTTPException(status_code=500, detail=GENERIC_GENERATION_ERROR)


def main():
    """Main entry point for running the backend server."""
    settings = get_settings()
    logger.info("Starting CopyCraft API server...")
    logger.info(f"Log file: {LOG_FILE.absolute()}")
    uvicorn.run(
        "backend.app.main:app",
        host=settings.host,
        port=settings.port,
        reload=True,
        log_level="warning"
    )


if __name__ == "__main__":
    main()
