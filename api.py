#!/usr/bin/env python3
"""FastAPI server for the Finviz quote scraper."""
from concurrent.futures import ThreadPoolExecutor
import asyncio
import logging
import sys
import os

_here = os.path.dirname(os.path.abspath(__file__))
if _here not in sys.path:
    sys.path.insert(0, _here)

from pathlib import Path
from dotenv import load_dotenv
load_dotenv(Path(_here) / ".env")

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse

from finwiz.config import LOG_LEVEL
from finwiz.clients import Stock, stock
from finwiz.errors import ConversionError, FetchError, QueryError
from finwiz.export import jsonable

logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s | %(levelname)-8s | %(message)s")

app = FastAPI(title="Finviz Quote Scraper", version="1.0.0")
_executor = ThreadPoolExecutor(max_workers=4)

CATEGORIES = ("financials", "ratings", "news", "insider")


@app.exception_handler(FetchError)
async def fetch_error_handler(request: Request, exc: FetchError):
    return JSONResponse(status_code=404, content={"error": str(exc), "ticker": exc.ticker})


@app.exception_handler(QueryError)
async def query_error_handler(request: Request, exc: QueryError):
    return JSONResponse(status_code=422, content={"error": str(exc)})


@app.exception_handler(ConversionError)
async def conversion_error_handler(request: Request, exc: ConversionError):
    # page format changed under us
    return JSONResponse(status_code=502, content={"error": str(exc), "text": exc.text})


async def _load(ticker: str) -> Stock:
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(_executor, stock, ticker)


async def _scrape(s: Stock, category: str):
    # parsing and normalizing are blocking too
    loop = asyncio.get_running_loop()
    result = await loop.run_in_executor(_executor, getattr(s, category))
    return jsonable(result)


@app.get("/api/health")
async def health():
    return {"status": "ok"}


@app.get("/api/{ticker}")
async def get_all(ticker: str):
    """Every category for ticker; a missing table is reported instead of failing the rest."""
    s = await _load(ticker)
    out = {"ticker": s.ticker}
    errors = {}
    for category in CATEGORIES:
        try:
            out[category] = await _scrape(s, category)
        except QueryError as e:
            out[category] = None
            errors[category] = str(e)
    if errors:
        out["errors"] = errors
    return out


@app.get("/api/{ticker}/{category}")
async def get_category(ticker: str, category: str):
    """One category for ticker: financials, ratings, news or insider."""
    if category not in CATEGORIES:
        raise HTTPException(status_code=404, detail=f"Unknown category {category!r}")
    s = await _load(ticker)
    return {"ticker": s.ticker, category: await _scrape(s, category)}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
