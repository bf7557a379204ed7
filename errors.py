"""
Error taxonomy for scenario generation.

Every error carries an HTTP status and a stable user-facing message. The
``detail`` attribute holds the raw failure description and is only ever
written to the log.
"""
from typing import Optional


class ScenarioError(Exception):
    status_code = 500
    public_message = "Erro interno do servidor ao gerar cenário"

    def __init__(self, detail: str = "", field: Optional[str] = None):
        self.detail = detail or self.public_message
        self.field = field
        super().__init__(self.detail)


class ConfigurationError(ScenarioError):
    public_message = "API key do OpenAI não configurada"

    def __init__(self, detail: str = "OPENAI_API_KEY is not set"):
        super().__init__(detail)


class BadRequest(ScenarioError):
    status_code = 400
    public_message = "Requisição inválida"


class MissingField(BadRequest):
    public_message = "Área e dificuldade são obrigatórias"

    def __init__(self, field: str):
        super().__init__(f"missing required field '{field}'", field=field)


class InvalidEnum(BadRequest):
    public_message = "Área ou dificuldade inválida"

    def __init__(self, field: str, value=None):
        self.value = value
        super().__init__(f"invalid value for '{field}': {value!r}", field=field)


class UpstreamError(ScenarioError):
    pass


class EmptyResponse(ScenarioError):
    def __init__(self, detail: str = "provider returned an empty response"):
        super().__init__(detail)


class MalformedPayload(ScenarioError):
    public_message = "Erro ao processar resposta da IA"
