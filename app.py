# app.py (web backend)
# ✅ Corpus loaded once at startup; until then every message is "no match"
# ✅ /chat runs the dispatcher (calculator, coin, dice, weather, corpus, arithmetic)
# ✅ /calculator drives the calculator widget per session

from typing import Any, Dict, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

import config
from responder.corpus import CorpusStore
from responder.dispatcher import ResponseDispatcher
from responder.matcher import IntentMatcher

# -----------------------------
# SHARED STATE
# -----------------------------
CORPUS = CorpusStore()
MATCHER = IntentMatcher(CORPUS, threshold=config.MATCH_THRESHOLD)
DISPATCHER = ResponseDispatcher(MATCHER)

# -----------------------------
# API SETUP
# -----------------------------
app = FastAPI()
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.on_event("startup")
def startup_event():
    CORPUS.load(config.CHAT_DATA_FILE)


class ChatIn(BaseModel):
    message: str
    session_id: str = "default"
    latitude: Optional[float] = None
    longitude: Optional[float] = None


class SessionIn(BaseModel):
    session_id: str = "default"


class CalculatorIn(BaseModel):
    session_id: str = "default"
    button: Optional[str] = None
    key: Optional[str] = None


@app.post("/chat")
def chat(payload: ChatIn) -> Dict[str, Any]:
    return DISPATCHER.respond(
        payload.message,
        session_id=payload.session_id,
        latitude=payload.latitude,
        longitude=payload.longitude,
    )


@app.post("/new_chat")
def new_chat(payload: SessionIn) -> Dict[str, Any]:
    return DISPATCHER.new_chat(payload.session_id)


@app.post("/calculator")
def calculator(payload: CalculatorIn) -> Dict[str, Any]:
    calc = DISPATCHER.calculator(payload.session_id)
    if payload.button is not None:
        calc.press(payload.button)
    elif payload.key is not None:
        calc.key(payload.key)
    return {"display": calc.display, "open": calc.is_open}


@app.get("/health")
def health() -> Dict[str, Any]:
    return {"ok": True, "corpus_loaded": CORPUS.loaded, "entries": len(CORPUS)}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=config.APP_HOST, port=config.APP_PORT)
