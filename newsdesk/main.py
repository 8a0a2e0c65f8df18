# newsdesk/main.py
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from newsdesk.config import CORS_ORIGINS, LOG_LEVEL
from newsdesk.routes import news_routes

logging.basicConfig(
    level=LOG_LEVEL,
    format='%(asctime)s - %(levelname)s - %(message)s',
)

app = FastAPI(title="Newsdesk Backend")

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.get("/")
def root():
    return {"message": "Welcome to Newsdesk Backend!"}


# Routers
app.include_router(news_routes.router, prefix="/news", tags=["news"])
