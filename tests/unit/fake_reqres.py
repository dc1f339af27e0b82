"""
Substitute ReqRes app for offline runs.

Mirrors the status codes and body shapes of the live endpoints the scenario
suite uses, mounted under /api like the live base URL. Nothing is persisted.

    TEST_API_MODE=IN_MEMORY TEST_API_APP=tests.unit.fake_reqres:app pytest tests/api
"""

import asyncio
from datetime import datetime, timezone

from fastapi import APIRouter, FastAPI, Request
from fastapi.responses import JSONResponse, Response

TOKEN = "QpwL5tke4Pnpja7X4"
PER_PAGE = 6

USERS = [
    {"id": 1, "email": "george.bluth@reqres.in", "first_name": "George", "last_name": "Bluth"},
    {"id": 2, "email": "janet.weaver@reqres.in", "first_name": "Janet", "last_name": "Weaver"},
    {"id": 3, "email": "emma.wong@reqres.in", "first_name": "Emma", "last_name": "Wong"},
    {"id": 4, "email": "eve.holt@reqres.in", "first_name": "Eve", "last_name": "Holt"},
    {"id": 5, "email": "charles.morris@reqres.in", "first_name": "Charles", "last_name": "Morris"},
    {"id": 6, "email": "tracey.ramos@reqres.in", "first_name": "Tracey", "last_name": "Ramos"},
    {"id": 7, "email": "michael.lawson@reqres.in", "first_name": "Michael", "last_name": "Lawson"},
    {"id": 8, "email": "lindsay.ferguson@reqres.in", "first_name": "Lindsay", "last_name": "Ferguson"},
    {"id": 9, "email": "tobias.funke@reqres.in", "first_name": "Tobias", "last_name": "Funke"},
    {"id": 10, "email": "byron.fields@reqres.in", "first_name": "Byron", "last_name": "Fields"},
    {"id": 11, "email": "george.edwards@reqres.in", "first_name": "George", "last_name": "Edwards"},
    {"id": 12, "email": "rachel.howell@reqres.in", "first_name": "Rachel", "last_name": "Howell"},
]

router = APIRouter(prefix="/api")


def _now() -> str:
    return datetime.now(timezone.utc).isoformat(timespec='milliseconds').replace('+00:00', 'Z')


async def _payload(request: Request) -> dict:
    body = await request.body()
    if not body:
        return {}
    data = await request.json()
    return data if isinstance(data, dict) else {}


def _find_user(user_id: int):
    return next((user for user in USERS if user["id"] == user_id), None)


@router.get("/users")
async def list_users(page: int = 1, delay: int = 0):
    if delay > 0:
        await asyncio.sleep(delay)
    start = (page - 1) * PER_PAGE
    return {
        "page": page,
        "per_page": PER_PAGE,
        "total": len(USERS),
        "total_pages": -(-len(USERS) // PER_PAGE),
        "data": USERS[start:start + PER_PAGE],
    }


@router.get("/users/{user_id}")
async def get_user(user_id: int):
    user = _find_user(user_id)
    if user is None:
        return JSONResponse(status_code=404, content={})
    return {"data": user}


@router.post("/users", status_code=201)
async def create_user(request: Request):
    payload = await _payload(request)
    return {**payload, "id": "123", "createdAt": _now()}


@router.put("/users/{user_id}")
@router.patch("/users/{user_id}")
async def update_user(user_id: int, request: Request):
    payload = await _payload(request)
    return {**payload, "updatedAt": _now()}


@router.delete("/users/{user_id}")
async def delete_user(user_id: int):
    return Response(status_code=204)


def _credentials_error(payload: dict):
    if not payload.get("email"):
        return JSONResponse(status_code=400, content={"error": "Missing email or username"})
    if not payload.get("password"):
        return JSONResponse(status_code=400, content={"error": "Missing password"})
    return None


@router.post("/register")
async def register(request: Request):
    payload = await _payload(request)
    error = _credentials_error(payload)
    if error is not None:
        return error
    user = next((user for user in USERS if user["email"] == payload["email"]), None)
    if user is None:
        return JSONResponse(status_code=400, content={"error": "Note: Only defined users succeed registration"})
    return {"id": user["id"], "token": TOKEN}


@router.post("/login")
async def login(request: Request):
    payload = await _payload(request)
    error = _credentials_error(payload)
    if error is not None:
        return error
    if not any(user["email"] == payload["email"] for user in USERS):
        return JSONResponse(status_code=400, content={"error": "user not found"})
    return {"token": TOKEN}


app = FastAPI(title="ReqRes substitute")
app.include_router(router)
