from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.events import router as events_router
from api.menu import router as menu_router
from api.session import router as session_router

app = FastAPI(title="BaristA kiosk engine")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(menu_router, prefix="/api")
app.include_router(events_router, prefix="/api")
app.include_router(session_router, prefix="/api")


@app.get("/health")
def health():
    return {"ok": True}
