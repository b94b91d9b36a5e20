import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Ensure environment variables are loaded at import time
from config import env
from presentation.api import signup_router, text_generation_router

logging.basicConfig(level=env.get_log_level(), format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")

# Reject bad settings before serving requests
env.validate_settings()

app = FastAPI(title="AI Response API", version="1.0.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=[env.get_frontend_url()],
    allow_credentials=True,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)

# Include routers
app.include_router(signup_router)
app.include_router(text_generation_router)


@app.get("/")
async def root():
    return {"message": "AI Response API"}


@app.get("/health")
async def health_check():
    return {"status": "healthy", "openai_configured": bool(env.get_openai_api_key())}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
