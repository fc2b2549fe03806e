import logging
import time
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from app.core.config import settings
from app.routers import health, wardrobe, outfits, calendar, inspirations, preferences, weather, recommendations, ai, challenges
from app.routers import auth as auth_router

logging.basicConfig(level=settings.LOG_LEVEL.upper(), format="%(asctime)s %(levelname)s %(name)s %(message)s")

app = FastAPI(title=settings.APP_NAME)

# CORS
origins = settings.cors_origin_list
app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=origins != ["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

prefix = settings.API_PREFIX
app.include_router(health.router, prefix=prefix)
app.include_router(auth_router.router, prefix=prefix)
app.include_router(wardrobe.router, prefix=prefix)
app.include_router(outfits.router, prefix=prefix)
app.include_router(outfits.public_router, prefix=prefix)
app.include_router(calendar.router, prefix=prefix)
app.include_router(inspirations.router, prefix=prefix)
app.include_router(preferences.router, prefix=prefix)
app.include_router(weather.router, prefix=prefix)
app.include_router(recommendations.router, prefix=prefix)
app.include_router(ai.router, prefix=prefix)
app.include_router(challenges.router, prefix=prefix)

logger = logging.getLogger("app.requests")

@app.middleware("http")
async def log_requests(request: Request, call_next):
    start = time.time()
    response = await call_next(request)
    duration_ms = (time.time() - start) * 1000
    logger.info("%s %s %s %.1fms", request.method, request.url.path, response.status_code, duration_ms)
    return response

@app.get("/")
async def root():
    return {"name": settings.APP_NAME, "env": settings.APP_ENV}
