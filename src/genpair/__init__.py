"""genpair - C++ header/source pair scaffolding."""

from .domain.models import GenerationRequest, Style
from .domain.services.generation import FilePairGenerator
from .infrastructure.config import Config
from .main import main

__all__ = ["Config", "FilePairGenerator", "GenerationRequest", "Style", "main"]
