"""
Municipal Draft Engine - FastAPI Application

Main entry point for the drafting backend.

Architecture:
- Form layer / drafting collaborator → DraftRecord
- DraftRecord + DocumentType → Layout → DraftDocument (section nodes)
- DraftDocument → HtmlBackend → print-ready HTML

The drafting collaborator (generative AI) is injected on
app.state.drafting_service; without it the assist endpoints answer 503.
"""
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import API_HOST, API_PORT, CORS_ALLOW_ORIGINS, LOG_LEVEL
from .routers import drafts_router

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)

# Create FastAPI app
app = FastAPI(
    title="Municipal Draft Engine",
    description="""
    Municipal Draft Engine - Secretariat Document Generator

    Renders municipal letters, orders, memos, note sheets, proposals,
    publication notices, house tax bills and demand notices from
    structured form data into print-ready HTML.

    ## Pipeline
    1. **Form / Assistant**: structured fields → DraftRecord
    2. **Layout**: DraftRecord + DocumentType → section nodes
    3. **Backend**: section nodes → A4 HTML

    ## Key Principles
    - Rendering is deterministic (same record → same markup)
    - Unknown catalog ids degrade, never fail
    - Bill arithmetic is computed before rendering, never inside it
    """,
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc"
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ALLOW_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# No collaborator by default; deployments assign one at startup
app.state.drafting_service = None

# Include routers
app.include_router(drafts_router)


@app.get("/")
async def root():
    """Root endpoint - API information."""
    return {
        "name": "Municipal Draft Engine",
        "version": "1.0.0",
        "description": "Municipal Secretariat Document Generator",
        "docs": "/docs",
        "pipeline": {
            "input": "DraftRecord - form or assistant output",
            "layout": "DraftDocument - ordered section nodes",
            "output": "HTML - print-ready A4 markup",
        },
    }


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "version": "1.0.0"}


# For running with: python -m app.main
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=API_HOST, port=API_PORT)
