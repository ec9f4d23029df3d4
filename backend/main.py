# backend/main.py
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from dotenv import load_dotenv
import logging

load_dotenv()

from config import settings
from database import init_db
from utils.error_handlers import register_error_handlers

# Routers
from routes.auth import router as auth_router
from routes.providers import router as providers_router

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

# Create tables on startup
init_db()

app = FastAPI(title="Local Services Finder API", version="1.0.0")

# CORS Configuration
origins = [
    "http://localhost:5173",
    "http://127.0.0.1:5173"
]

if settings.FRONTEND_URL:
    origins.append(settings.FRONTEND_URL)

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

# Router registration
app.include_router(auth_router)
app.include_router(providers_router)

@app.get("/")
def read_root():
    return {"message": "Local Services Finder API is running"}
