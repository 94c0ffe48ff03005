"""
Pydantic schema definitions for API payloads.

Each resource (contacts, projects) defines its own read model here.
Request bodies are validated by the service layer, so schemas only
describe what the API returns.
"""
