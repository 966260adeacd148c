from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware


def create_app():

    app = FastAPI(
        title="WebStore Reports",
        docs_url="/api/docs",
        redoc_url="/api/redoc",
        openapi_url="/api/openapi.json"
    )

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # In production, replace with specific origins
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Import and include routers
    from webstore.reporting.router import router as report_router

    # Include API routes
    app.include_router(report_router, prefix="/api")

    return app
