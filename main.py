from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging
import os
from dotenv import load_dotenv

from db import init_db
from recommendation.routes import router as recommendation_router
from recommendation.logic.tier_weights import validate_tier_weights

load_dotenv()

logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO").upper())
logging.info("App starting with DATABASE_URL")

app = FastAPI(title="Career Matching API")

CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Fail fast on a mis-summed tier weight table
validate_tier_weights()
init_db()


@app.get("/health", tags=["health"], summary="Service health check")
def health():
    return {"status": "ok"}


app.include_router(recommendation_router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host="0.0.0.0", port=int(os.getenv("PORT", 8000)))
