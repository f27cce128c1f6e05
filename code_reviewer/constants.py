from pathlib import Path

DEFAULT_MODEL = "gemini-2.0-flash"
DEFAULT_TEMPERATURE = 0.7
DEFAULT_MAX_OUTPUT_TOKENS = 2048

DEFAULT_SAFETY_SETTINGS = {
    "HARM_CATEGORY_HARASSMENT": "BLOCK_MEDIUM_AND_ABOVE",
    "HARM_CATEGORY_HATE_SPEECH": "BLOCK_MEDIUM_AND_ABOVE",
}

DEFAULT_SYSTEM_INSTRUCTION_PATH = Path(__file__).parent / "prompts" / "senior_reviewer.md"

DEFAULT_CORS_ORIGINS = [
    "http://localhost:5173",
    "http://127.0.0.1:5173",
    "http://localhost:3000",
    "http://127.0.0.1:3000",
]

INVALID_CODE_MESSAGE = "Code is required and must be a non-empty string."
EMPTY_REVIEW_MESSAGE = "AI service returned an invalid response."
REVIEW_FAILED_MESSAGE = "Failed to process code review. Please try again later."
