from typing import List, Union

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from wordora.config import settings
from wordora.services.chatbot import ChatBot
from wordora.services.generator import GenerationError
from wordora.utils.logger import setup_logger

logger = setup_logger(__name__)

router = APIRouter(prefix="/markov", tags=["markov"])

# In-memory model cache (never persisted)
MODEL_CACHE = {}


class TrainRequest(BaseModel):
    corpus: Union[str, List[str]]
    model_name: str = "default"
    width: int = Field(default=settings.TRAIN_CHUNK_WIDTH, ge=1)


class GenerateRequest(BaseModel):
    model_name: str = "default"
    seed: str = ""
    length: int = Field(default=settings.REPLY_LENGTH, ge=0, le=settings.MAX_GENERATE_LENGTH)


class ReplyRequest(BaseModel):
    model_name: str = "default"
    message: str = ""


def register_model(name: str, bot: ChatBot):
    MODEL_CACHE[name] = bot


def _get_model(name: str) -> ChatBot:
    bot = MODEL_CACHE.get(name)
    if not bot:
        raise HTTPException(status_code=404, detail="model not found, train first")
    return bot


@router.post("/train")
async def train(req: TrainRequest):
    text = req.corpus if isinstance(req.corpus, str) else "\n".join(req.corpus)
    if not text.strip():
        raise HTTPException(status_code=400, detail="corpus is empty")

    bot = ChatBot.from_settings(settings)
    bot.train_width = req.width
    bot.train(text)
    if not bot.is_trained:
        raise HTTPException(status_code=400, detail="corpus has no tokens")

    # Replace, never mutate, a model other requests may be reading
    MODEL_CACHE[req.model_name] = bot
    logger.info(f"[Markov] Model '{req.model_name}' trained, vocab={len(bot.table)}")
    return {"ok": True, "model": req.model_name, "vocab_size": len(bot.table)}


@router.post("/generate")
async def generate(req: GenerateRequest):
    bot = _get_model(req.model_name)
    try:
        text = bot.generator.generate(req.seed, req.length)
    except GenerationError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return {"ok": True, "data": {"text": text}}


@router.post("/reply")
async def reply(req: ReplyRequest):
    bot = _get_model(req.model_name)
    seed = bot.seed_for(req.message)
    try:
        text = bot.reply(req.message)
    except GenerationError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return {"ok": True, "data": {"seed": seed, "text": text}}


@router.get("/stats/{model_name}")
async def stats(model_name: str, top_n: int = 10):
    bot = _get_model(model_name)
    s = bot.stats(top_n)
    return {
        "ok": True,
        "data": {
            "vocab_size": s.vocab_size,
            "transition_count": s.transition_count,
            "terminal_tokens": s.terminal_tokens,
            "top_tokens": [{"token": t, "count": c} for t, c in s.top_tokens],
            "fallback_ready": bot.generator.fallback_ready(),
        },
    }
