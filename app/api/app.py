from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.errors import register_error_handlers
from app.api.routes import router
from app.config.settings import Settings
from app.processor.processor import Processor, build_processor


def create_app(settings: Settings, processor: Processor | None = None) -> FastAPI:
    """Build the HTTP application around an explicitly wired Processor."""
    app = FastAPI(
        title="Biomarker Service",
        description="Extracts biomarkers from lab reports and evaluates them against reference ranges",
        version="1.0.0",
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.state.settings = settings
    app.state.processor = processor if processor is not None else build_processor(settings)
    register_error_handlers(app)
    app.include_router(router)
    return app
