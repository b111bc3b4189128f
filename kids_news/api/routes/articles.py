"""Article generation endpoint."""

from fastapi import APIRouter

from ..dependencies import Generator
from ..models.requests import CreateArticleRequest
from ..models.responses import ArticleResponse

router = APIRouter()


@router.post(
    "/",
    response_model=ArticleResponse,
    summary="Generate an illustrated article",
    description=(
        "Write a kid-friendly news article about a topic and illustrate every paragraph. "
        "Paragraphs whose image could not be generated carry a placeholder URL."
    ),
)
async def create_article(request: CreateArticleRequest, generator: Generator):
    """Generate a complete illustrated article."""
    result = await generator.generate(request.topic)
    return ArticleResponse.from_result(result)
