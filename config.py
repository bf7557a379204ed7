"""
Configuration and Constants for the Legal Scenario Generator
"""
import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# OpenAI settings
OPENAI_API_KEY = os.getenv("OPENAI_API_KEY", "")
OPENAI_MODEL = os.getenv("OPENAI_MODEL", "gpt-4-turbo-preview")

# A bit of creativity for the scenarios
GENERATION_TEMPERATURE = 0.8
GENERATION_MAX_TOKENS = 2000

# Test Mode Configuration
IS_TEST = os.getenv("IS_TEST", "False").lower() == "true"

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
PORT = int(os.getenv("PORT", 8000))

# CORS
CORS_ORIGINS = [
    "http://localhost:3000",
    "http://localhost:8000",
]

frontend_url = os.getenv("FRONTEND_URL", "")
if frontend_url:
    CORS_ORIGINS.append(frontend_url)

DEFAULT_SESSION_ID = "default"

# In-memory history limits
HISTORY_MAX_SCENARIOS = 100
HISTORY_MAX_SESSIONS = 1000

# Mock payload returned by the provider in test mode
MOCK_SCENARIO = {
    "title": "Rescisão de contrato de locação comercial (TEST MODE)",
    "description": "Cenário de exemplo gerado sem chamada à IA. Configure OPENAI_API_KEY para cenários reais.",
    "context": (
        "A Padaria Pão Dourado Ltda. alugou um imóvel comercial por cinco anos. "
        "No terceiro ano, o locador notificou a rescisão alegando atraso de dois aluguéis. "
        "A locatária afirma que os atrasos decorreram de obras não realizadas pelo locador."
    ),
    "parties": {
        "plaintiff": "Carlos Menezes, proprietário do imóvel",
        "defendant": "Padaria Pão Dourado Ltda., locatária",
        "lawyers": ["Dra. Ana Ribeiro (advogada do locador)", "Dr. Paulo Sousa (advogado da locatária)"],
    },
    "objectives": [
        "Identificar os requisitos da ação de despejo por falta de pagamento",
        "Avaliar a exceção de contrato não cumprido",
        "Propor uma solução negociada",
    ],
    "challenges": [
        "Prova das obras prometidas pelo locador",
        "Cálculo do débito atualizado",
        "Prazo para purga da mora",
    ],
    "suggestedStrategies": [
        "Reunir a correspondência entre as partes",
        "Requerer perícia no imóvel",
        "Propor acordo com parcelamento do débito",
    ],
    "estimatedTime": "45-60 minutos",
}
