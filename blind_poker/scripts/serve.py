#!/usr/bin/env python3
"""HTTP API for hand comparison.

Endpoints:
- POST /api/compare: {"hand_a": [..5 ints..], "hand_b": [..5 ints..]}
- GET  /api/categories: hand categories and their ordinals

Invalid hands are not HTTP errors: the response carries result -1 and a
detail message. Bodies that are not lists of integers get FastAPI's 422.

Usage:
    python -m blind_poker.scripts.serve
    BLIND_POKER_HOST=127.0.0.1 BLIND_POKER_PORT=9000 python -m blind_poker.scripts.serve
"""

import logging
import os
from dataclasses import dataclass
from typing import List, Optional

import uvicorn
from fastapi import FastAPI
from pydantic import BaseModel, StrictInt

from blind_poker import __version__
from blind_poker.engine.solver import showdown
from blind_poker.rules.hands import EvaluatedHand, describe_hand_categories

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ServerConfig:
    host: str = "0.0.0.0"
    port: int = 8000

    @classmethod
    def from_env(cls) -> "ServerConfig":
        host = os.getenv("BLIND_POKER_HOST", cls.host)
        port = int(os.getenv("BLIND_POKER_PORT", str(cls.port)))
        return cls(host=host, port=port)


class CompareRequest(BaseModel):
    hand_a: List[StrictInt]
    hand_b: List[StrictInt]


class GroupModel(BaseModel):
    value: int
    count: int


class HandModel(BaseModel):
    cards: List[int]
    category: str
    rank: int
    groups: List[GroupModel]


class CompareResponse(BaseModel):
    result: int
    winner: str
    hand_a: Optional[HandModel] = None
    hand_b: Optional[HandModel] = None
    detail: Optional[str] = None


def _hand_model(hand: Optional[EvaluatedHand]) -> Optional[HandModel]:
    if hand is None:
        return None
    return HandModel(
        cards=list(hand.values),
        category=hand.category.name,
        rank=int(hand.category),
        groups=[GroupModel(value=g.value, count=g.count) for g in hand.groups],
    )


app = FastAPI(title="Blind Poker", version=__version__)


@app.post("/api/compare", response_model=CompareResponse)
def api_compare(req: CompareRequest) -> CompareResponse:
    outcome = showdown(req.hand_a, req.hand_b)
    return CompareResponse(
        result=outcome.result,
        winner=outcome.winner,
        hand_a=_hand_model(outcome.hand_a),
        hand_b=_hand_model(outcome.hand_b),
        detail=outcome.error,
    )


@app.get("/api/categories")
def api_categories():
    descriptions = describe_hand_categories()
    return {
        "categories": [
            {"name": category.name, "rank": int(category), "description": text}
            for category, text in descriptions.items()
        ]
    }


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    config = ServerConfig.from_env()
    logger.info("Starting server at http://%s:%d", config.host, config.port)
    try:
        uvicorn.run(app, host=config.host, port=config.port)
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    main()
