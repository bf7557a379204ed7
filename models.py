"""
Pydantic Models for the Legal Scenario Generator
"""
from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class LegalArea(str, Enum):
    CIVIL = "civil"
    TRABALHISTA = "trabalhista"
    EMPRESARIAL = "empresarial"
    CONSUMIDOR = "consumidor"
    TRIBUTARIO = "tributario"
    PENAL = "penal"


class Difficulty(str, Enum):
    """Ordered from easiest to hardest."""
    INICIANTE = "Iniciante"
    INTERMEDIARIO = "Intermediário"
    AVANCADO = "Avançado"
    EXPERT = "Expert"


# Form labels shown by the front-end
LEGAL_AREA_LABELS = {
    LegalArea.CIVIL: "Direito Civil",
    LegalArea.TRABALHISTA: "Direito Trabalhista",
    LegalArea.EMPRESARIAL: "Direito Empresarial",
    LegalArea.CONSUMIDOR: "Direito do Consumidor",
    LegalArea.TRIBUTARIO: "Direito Tributário",
    LegalArea.PENAL: "Direito Penal",
}

DIFFICULTY_DESCRIPTIONS = {
    Difficulty.INICIANTE: "Casos básicos e diretos",
    Difficulty.INTERMEDIARIO: "Situações com complexidade moderada",
    Difficulty.AVANCADO: "Casos complexos com múltiplas variáveis",
    Difficulty.EXPERT: "Cenários altamente complexos e desafiadores",
}


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


# Request Models
class GenerationRequest(CamelModel):
    area: LegalArea
    difficulty: Difficulty
    custom_prompt: Optional[str] = Field(default=None, description="Extra instructions appended to the prompt")

    @field_validator("custom_prompt")
    @classmethod
    def _blank_to_none(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        value = value.strip()
        return value or None


# Scenario Models
class Parties(CamelModel):
    plaintiff: str = Field(description="Requerente/cliente")
    defendant: str = Field(description="Requerido/parte contrária")
    lawyers: List[str] = Field(description="Advogados envolvidos")


class ScenarioContent(CamelModel):
    """Structure the model must return. Unknown keys are ignored."""
    title: str
    description: str
    context: str
    parties: Parties
    objectives: List[str]
    challenges: List[str]
    suggested_strategies: List[str]
    estimated_time: str


class Scenario(ScenarioContent):
    id: str
    difficulty: Difficulty
    created_at: datetime

    def to_json(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)
