"""Shared fixtures: a recording fake provider and a well-formed model payload."""
import copy
import json

import pytest
from fastapi.testclient import TestClient

import server
from modules import ScenarioGenerator, ScenarioHistory

VALID_PAYLOAD = {
    "title": "Disputa sobre vício oculto em veículo usado",
    "description": "Consumidor busca rescisão da compra de um carro com defeito no motor.",
    "context": "João comprou um carro usado em uma revenda. Trinta dias depois o motor falhou.",
    "parties": {
        "plaintiff": "João Pereira, comprador",
        "defendant": "Auto Center Silva Ltda., revendedora",
        "lawyers": ["Dra. Marina Costa (consumerista)", "Dr. Felipe Rocha (empresarial)"],
    },
    "objectives": ["Caracterizar o vício oculto", "Calcular a restituição"],
    "challenges": ["Prazo decadencial", "Prova pericial"],
    "suggestedStrategies": ["Notificar a revendedora", "Requerer inversão do ônus da prova"],
    "estimatedTime": "45-60 minutos",
}


class FakeLLM:
    """Records every call and answers with a canned reply or raises."""

    def __init__(self, reply=None, error=None, configured=True):
        self.reply = json.dumps(VALID_PAYLOAD) if reply is None else reply
        self.error = error
        self.is_configured = configured
        self.calls = []

    async def generate(self, system_prompt, user_input, **kwargs):
        self.calls.append({"system_prompt": system_prompt, "user_input": user_input, **kwargs})
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def payload():
    return copy.deepcopy(VALID_PAYLOAD)


@pytest.fixture
def fake_llm():
    return FakeLLM()


@pytest.fixture
def generator(fake_llm):
    return ScenarioGenerator(llm=fake_llm)


@pytest.fixture
def api(fake_llm):
    server.app.state.generator = ScenarioGenerator(llm=fake_llm)
    server.app.state.history = ScenarioHistory()
    with TestClient(server.app) as client:
        yield client
