"""System prompts shared by every kommit chat request."""

SYSTEM_PROMPT = "You are an AI that generates Conventional Git commit messages."

JSON_RESPONSE_PROMPT = "Return your response as a valid JSON object."

# Used for structured (JSON schema) requests
STRUCTURED_SYSTEM_PROMPT = f"{SYSTEM_PROMPT} {JSON_RESPONSE_PROMPT}"
