"""
Generator Module - Legal Training Scenario Generation
"""
import json
import logging
import re
import secrets
import string
import time
from datetime import datetime, timezone
from typing import Mapping, Union

import json_repair

from config import GENERATION_MAX_TOKENS, GENERATION_TEMPERATURE, OPENAI_MODEL
from errors import ConfigurationError, EmptyResponse, MalformedPayload, ScenarioError, UpstreamError
from llm_client import llm_client
from models import Difficulty, GenerationRequest, LegalArea, Scenario
from modules.validator import validate_model_payload, validate_request

logger = logging.getLogger(__name__)

AREA_CONTEXTS = {
    LegalArea.CIVIL: "direito civil, contratos, responsabilidade civil, direitos reais, família",
    LegalArea.TRABALHISTA: "direito do trabalho, CLT, relações trabalhistas, rescisões, assédio",
    LegalArea.EMPRESARIAL: "direito empresarial, societário, fusões, aquisições, compliance",
    LegalArea.CONSUMIDOR: "CDC, direito do consumidor, relações de consumo, defeitos, vícios",
    LegalArea.TRIBUTARIO: "direito tributário, impostos, fiscalização, planejamento fiscal",
    LegalArea.PENAL: "direito penal, crimes, defesa criminal, processo penal, medidas cautelares",
}

DIFFICULTY_PROMPTS = {
    Difficulty.INICIANTE: "cenário simples e direto, com poucos elementos complicadores",
    Difficulty.INTERMEDIARIO: "cenário com complexidade moderada, incluindo algumas nuances jurídicas",
    Difficulty.AVANCADO: "cenário complexo com múltiplas questões jurídicas e partes envolvidas",
    Difficulty.EXPERT: "cenário altamente complexo com questões controvertidas e aspectos técnicos avançados",
}

_ID_ALPHABET = string.digits + string.ascii_lowercase
_LEADING_FENCE = re.compile(r"^```[\w-]*[ \t]*\n?")
_TRAILING_FENCE = re.compile(r"\n?[ \t]*```$")


def new_scenario_id() -> str:
    suffix = "".join(secrets.choice(_ID_ALPHABET) for _ in range(9))
    return f"scenario_{time.time_ns() // 1_000_000}_{suffix}"


def strip_code_fences(text: str) -> str:
    """Removes a markdown code fence wrapped around the model reply, if any."""
    cleaned = text.strip()
    cleaned = _LEADING_FENCE.sub("", cleaned)
    cleaned = _TRAILING_FENCE.sub("", cleaned)
    return cleaned.strip()


def parse_payload(text: str) -> dict:
    cleaned = strip_code_fences(text)
    try:
        data = json.loads(cleaned)
    except json.JSONDecodeError as e:
        # Repair only inside one complete object
        if not (cleaned.startswith("{") and cleaned.endswith("}")):
            raise MalformedPayload(f"provider response is not valid JSON: {e}", field="payload") from e
        logger.warning("Generator: strict JSON parse failed (%s), attempting repair", e)
        data = json_repair.loads(cleaned)
    if not isinstance(data, dict):
        raise MalformedPayload("provider response is not a JSON object", field="payload")
    return data


class ScenarioGenerator:
    SYSTEM_PROMPT = (
        "Você é um especialista em direito brasileiro e criador de cenários de treinamento jurídico. "
        "Sua tarefa é criar cenários realistas e educativos para advogados praticarem suas habilidades."
    )

    OUTPUT_FORMAT = """
O cenário deve ser retornado EXATAMENTE no seguinte formato JSON, sem texto adicional:

{
  "title": "Título conciso e atrativo do cenário",
  "description": "Breve descrição do que o cenário aborda (1-2 frases)",
  "context": "Contexto detalhado da situação jurídica, incluindo fatos relevantes, cronologia e circunstâncias (3-4 parágrafos)",
  "parties": {
    "plaintiff": "Nome e breve descrição do requerente/cliente",
    "defendant": "Nome e breve descrição do requerido/parte contrária",
    "lawyers": ["Nome do Advogado 1 (perfil)", "Nome do Advogado 2 (perfil)"]
  },
  "objectives": [
    "Objetivo específico 1 para o treinamento",
    "Objetivo específico 2 para o treinamento",
    "Objetivo específico 3 para o treinamento"
  ],
  "challenges": [
    "Desafio jurídico 1 que será encontrado",
    "Desafio jurídico 2 que será encontrado",
    "Desafio jurídico 3 que será encontrado"
  ],
  "suggestedStrategies": [
    "Estratégia recomendada 1",
    "Estratégia recomendada 2",
    "Estratégia recomendada 3"
  ],
  "estimatedTime": "Tempo estimado para completar o exercício (ex: 45-60 minutos)"
}

Certifique-se de que:
- Os nomes sejam brasileiros e realistas
- O contexto seja detalhado mas conciso
- Os desafios sejam apropriados para o nível de dificuldade
- As estratégias sejam práticas e aplicáveis
- O cenário seja educativo e relevante para a prática jurídica brasileira
"""

    def __init__(
        self,
        llm=None,
        model: str = OPENAI_MODEL,
        temperature: float = GENERATION_TEMPERATURE,
        max_tokens: int = GENERATION_MAX_TOKENS,
    ):
        self.llm = llm if llm is not None else llm_client
        self.model = model
        self.temperature = temperature
        self.max_tokens = max_tokens

    def build_prompt(self, request: GenerationRequest) -> str:
        lines = [
            "Crie um cenário jurídico realista para treinamento de advogados com as seguintes características:",
            "",
            f"**Área:** {AREA_CONTEXTS[request.area]}",
            f"**Dificuldade:** {DIFFICULTY_PROMPTS[request.difficulty]}",
        ]
        if request.custom_prompt:
            lines.append(f"**Requisitos adicionais:** {request.custom_prompt}")
        return "\n".join(lines) + "\n" + self.OUTPUT_FORMAT

    async def execute(self, request: Union[GenerationRequest, Mapping]) -> Scenario:
        if not self.llm.is_configured:
            raise ConfigurationError()

        if isinstance(request, GenerationRequest):
            request = request.model_dump(mode="json", by_alias=True)
        validated = validate_request(request)
        logger.info("Generator: area=%s difficulty=%s custom_prompt=%s",
                    validated.area.value, validated.difficulty.value, validated.custom_prompt is not None)

        prompt = self.build_prompt(validated)
        try:
            response = await self.llm.generate(
                self.SYSTEM_PROMPT,
                prompt,
                model=self.model,
                temperature=self.temperature,
                max_tokens=self.max_tokens,
            )
        except ScenarioError:
            raise
        except Exception as e:
            raise UpstreamError(f"{type(e).__name__}: {e}") from e

        if not response or not response.strip():
            raise EmptyResponse()

        try:
            content = validate_model_payload(parse_payload(response))
        except MalformedPayload as e:
            logger.error("Generator: unusable provider response (%s)", e.detail)
            logger.error("Generator: raw response: %s", response)
            raise

        scenario = Scenario(
            id=new_scenario_id(),
            difficulty=validated.difficulty,
            created_at=datetime.now(timezone.utc),
            **content.model_dump(),
        )
        logger.info("Generator: created %s (%s)", scenario.id, scenario.title)
        return scenario
