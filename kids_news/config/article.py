"""
Article generation settings for the Kids News Generator.

Uses Gemini Flash with structured JSON output for the article text.
"""

from google.genai import types

# Article generation constants
ARTICLE_CONSTANTS = {
    "text_model": "gemini-3-flash-preview",
    "min_paragraphs": 5,
    "reader_age_range": "6-10",
}

MIN_PARAGRAPHS = ARTICLE_CONSTANTS["min_paragraphs"]

ARTICLE_SYSTEM_INSTRUCTION = (
    "You are a friendly, funny, and educational AI assistant writing news articles "
    f"for children aged {ARTICLE_CONSTANTS['reader_age_range']}. Your articles should be "
    "easy to understand, and always include a humorous touch."
)


def get_article_text_model() -> str:
    """Get the text model ID."""
    return ARTICLE_CONSTANTS["text_model"]


def get_paragraph_schema() -> types.Schema:
    """Schema for the article text: an array of {"paragraph": str} objects."""
    return types.Schema(
        type=types.Type.ARRAY,
        items=types.Schema(
            type=types.Type.OBJECT,
            properties={
                "paragraph": types.Schema(
                    type=types.Type.STRING,
                    description="A single paragraph of the news article for kids, written in a funny and engaging way.",
                ),
            },
            required=["paragraph"],
        ),
    )


def get_article_text_config() -> types.GenerateContentConfig:
    """Get the config for the structured article text request."""
    return types.GenerateContentConfig(
        system_instruction=ARTICLE_SYSTEM_INSTRUCTION,
        response_mime_type="application/json",
        response_schema=get_paragraph_schema(),
    )


def build_article_prompt(topic: str) -> str:
    """Build the user prompt asking for a multi-paragraph kids' article."""
    return f"""Write a funny, educational news article about "{topic}" for children aged {ARTICLE_CONSTANTS['reader_age_range']}.
The article should be at least {MIN_PARAGRAPHS} paragraphs long. Each paragraph should be distinct, easy to understand, and include a humorous touch.
Format your response as a JSON array of objects, where each object has a 'paragraph' key containing the text for that paragraph."""
