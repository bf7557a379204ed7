"""
Scenario Generator Modules
"""
from .validator import validate_request, validate_model_payload
from .generator import ScenarioGenerator
from .history import ScenarioHistory

__all__ = ['validate_request', 'validate_model_payload', 'ScenarioGenerator', 'ScenarioHistory']
