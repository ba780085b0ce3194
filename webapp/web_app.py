import logging
import os
import uuid
from typing import List, Optional

from fastapi import FastAPI, HTTPException # type: ignore
from fastapi.concurrency import run_in_threadpool # type: ignore
from fastapi.middleware.cors import CORSMiddleware # type: ignore
from pydantic import BaseModel

from nonogram import solve, solve_from_strings
from nonogram.postprocess.export_result import build_result


# ============================================================
# Configuration & Logging
# ============================================================
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("nonogram_web")

# カンマ区切りで複数指定できる（例: "https://a.example,https://b.example"）
ALLOW_ORIGINS = [o.strip() for o in os.getenv("NONOGRAM_ALLOW_ORIGINS", "*").split(",") if o.strip()]

# ヒント文字列の最大長（巨大なリクエストでパースに時間を使わないため）
MAX_HINT_CHARS = int(os.getenv("NONOGRAM_MAX_HINT_CHARS", "4096"))


# ============================================================
# FastAPI App
# ============================================================
app = FastAPI(title="nonogram-solver")

# NOTE:
# allow_origins=["*"] と allow_credentials=True はブラウザ仕様上NGになりやすいので、
# credentials は False にします
app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOW_ORIGINS,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

logger.info("web_app.py loaded. ALLOW_ORIGINS=%s", ALLOW_ORIGINS)


# ============================================================
# Pydantic Models
# ============================================================
class SolveRequest(BaseModel):
    # "1,2;3" のような ";" 区切りのヒント文字列
    row_hints: str
    col_hints: str
    # "<cols>x<rows>"。省略時はヒントの本数から決める
    dimensions: Optional[str] = None
    puzzle_id: Optional[str] = None


class SolveListRequest(BaseModel):
    # パース済みのヒントを直接渡す場合
    row_constraints: List[List[int]]
    col_constraints: List[List[int]]
    puzzle_id: Optional[str] = None


class HealthResponse(BaseModel):
    ok: bool


# ============================================================
# Health
# ============================================================
@app.get("/health", response_model=HealthResponse)
async def health():
    return {"ok": True}


# ============================================================
# API Endpoints
# ============================================================
def _finish(result, puzzle_id: Optional[str]) -> dict:
    raw = build_result(result)
    raw["puzzle_id"] = puzzle_id or str(uuid.uuid4())
    logger.info("Solved puzzle_id=%s status=%s passes=%d", raw["puzzle_id"], raw["status"], raw["passes"])
    return raw


@app.post("/api/solve")
async def api_solve(request: SolveRequest):
    if len(request.row_hints) > MAX_HINT_CHARS or len(request.col_hints) > MAX_HINT_CHARS:
        raise HTTPException(status_code=413, detail="Hint string is too long")

    try:
        # イベントループを塞がないよう、伝播はスレッドプールで回す
        result = await run_in_threadpool(
            solve_from_strings, request.row_hints, request.col_hints, request.dimensions
        )
        return _finish(result, request.puzzle_id)

    except HTTPException:
        raise
    except ValueError as e:
        # パースエラー・盤面サイズ超過・ヒント本数の不一致など
        logger.warning("Bad solve request: %s", e)
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error("Solve Error", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))


@app.post("/api/solve/constraints")
async def api_solve_constraints(request: SolveListRequest):
    try:
        result = await run_in_threadpool(solve, request.row_constraints, request.col_constraints)
        return _finish(result, request.puzzle_id)

    except ValueError as e:
        logger.warning("Bad solve request: %s", e)
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error("Solve Error", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))
