"""Cloud analyzer (optional).

When no API key is configured, callers should go straight to the local
engine.
"""

from .analyzer import CLOUD_PROVENANCE, ChatCloudAnalyzer, CloudAnalyzer, CloudRequest
from .config import AiConfig, load_ai_config
from .openai_client import AiClientError, OpenAIChatClient

__all__ = [
	"AiClientError",
	"AiConfig",
	"CLOUD_PROVENANCE",
	"ChatCloudAnalyzer",
	"CloudAnalyzer",
	"CloudRequest",
	"OpenAIChatClient",
	"load_ai_config",
]
