from __future__ import annotations

from .openai_client import OpenAISuggestionClient, SuggestionMetadata, extract_json_array

__all__ = ["OpenAISuggestionClient", "SuggestionMetadata", "extract_json_array"]
