from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from bracket_lens.routers import lens

app = FastAPI(
    title="Bracket Lens Server",
    description="API for bracket tokenizing, matching and explanation.",
    version="1.0.0"
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Allow all origins for local development
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(lens.router)

@app.get("/api-status")
async def root():
    return {"message": "Bracket Lens Server is running. Visit /docs for API documentation."}
