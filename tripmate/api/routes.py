from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import authRoutes, mapRoutes, placesRoutes, plannerRoutes

app = FastAPI(
    title="TripMate API", description="API for trip planning, place discovery and traveller accounts"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(authRoutes.router)
app.include_router(plannerRoutes.router)
app.include_router(mapRoutes.router)
app.include_router(placesRoutes.router)


@app.get("/")
async def read_root():
    return {"message": "TripMate API is running"}
