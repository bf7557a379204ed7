import logging

from fastapi import FastAPI, Header, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import uvicorn

from config import CORS_ORIGINS, DEFAULT_SESSION_ID, IS_TEST, LOG_LEVEL, OPENAI_MODEL, PORT
from errors import BadRequest, ScenarioError
from models import DIFFICULTY_DESCRIPTIONS, LEGAL_AREA_LABELS, Difficulty, LegalArea
from modules import ScenarioGenerator, ScenarioHistory

logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")
logger = logging.getLogger(__name__)

app = FastAPI(title="Legal Scenario Generator")
app.state.generator = ScenarioGenerator()
app.state.history = ScenarioHistory()

logger.info("CORS Configured Origins: %s", CORS_ORIGINS)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(ScenarioError)
async def scenario_error_handler(request: Request, exc: ScenarioError):
    if exc.status_code >= 500:
        logger.error("Erro ao gerar cenário: %s: %s", type(exc).__name__, exc.detail)
    else:
        logger.warning("Requisição rejeitada: %s: %s", type(exc).__name__, exc.detail)
    return JSONResponse({"error": exc.public_message}, status_code=exc.status_code)


@app.get("/")
async def root():
    """Root endpoint for testing"""
    return {
        "status": "ok",
        "message": "Legal Scenario Generator API is running",
        "version": "1.0",
        "model": OPENAI_MODEL,
        "test_mode": IS_TEST,
        "endpoints": {
            "POST /api/generate-scenario": "Generate a training scenario",
            "GET /api/options": "Legal areas and difficulty levels",
            "GET /api/scenarios": "Scenarios generated in this session",
            "GET /api/scenarios/{id}": "One scenario of this session",
        },
    }


@app.get("/health")
async def health_check():
    return {"status": "healthy", "service": "scenario-generator"}


@app.get("/api/options")
async def get_options():
    return {
        "areas": [{"value": a.value, "label": LEGAL_AREA_LABELS[a]} for a in LegalArea],
        "difficulties": [
            {"value": d.value, "label": d.value, "description": DIFFICULTY_DESCRIPTIONS[d]}
            for d in Difficulty
        ],
    }


@app.post("/api/generate-scenario")
async def generate_scenario(request: Request, x_session_id: str = Header(default=DEFAULT_SESSION_ID)):
    try:
        payload = await request.json()
    except ValueError as e:
        raise BadRequest(f"request body is not valid JSON: {e}") from e

    try:
        scenario = await request.app.state.generator.execute(payload)
    except ScenarioError:
        raise
    except Exception as e:
        logger.exception("Erro inesperado ao gerar cenário")
        raise ScenarioError(f"{type(e).__name__}: {e}") from e

    request.app.state.history.add(x_session_id, scenario)
    return scenario.to_json()


@app.get("/api/scenarios")
async def list_scenarios(request: Request, x_session_id: str = Header(default=DEFAULT_SESSION_ID)):
    history = request.app.state.history
    scenarios = history.list(x_session_id)
    return {
        "total": len(scenarios),
        "byDifficulty": history.counts_by_difficulty(x_session_id),
        "scenarios": [s.to_json() for s in scenarios],
    }


@app.get("/api/scenarios/{scenario_id}")
async def get_scenario(request: Request, scenario_id: str, x_session_id: str = Header(default=DEFAULT_SESSION_ID)):
    scenario = request.app.state.history.get(x_session_id, scenario_id)
    if scenario is None:
        return JSONResponse({"error": "Cenário não encontrado"}, status_code=404)
    return scenario.to_json()


if __name__ == "__main__":
    uvicorn.run("server:app", host="0.0.0.0", port=PORT, reload=True)
