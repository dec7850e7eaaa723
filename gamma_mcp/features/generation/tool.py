# gamma_mcp/features/generation/tool.py
import asyncio
from typing import Annotated, Any, Dict, Optional

from mcp.server.fastmcp import FastMCP
from pydantic import Field

from gamma_mcp.config import Config
from gamma_mcp.logger import get_logger

from .schemas import (
    CardDimensions,
    CardSplit,
    ExportFormat,
    ExternalAccess,
    GenerationResult,
    ImageSource,
    OutputFormat,
    TextAmount,
    TextMode,
    WorkspaceAccess,
)
from .service import generate_presentation

log = get_logger(__name__)

TOOL_NAME = "generate-presentation"
TOOL_DESCRIPTION = (
    "Generate a presentation using the Gamma API (v0.2). Optionally export a file and save it locally. "
    "The response includes a link to the generated presentation; always include the link in your reply."
)


def format_result(result: GenerationResult) -> str:
    if not result.ok:
        return f"Failed to generate presentation using Gamma API. Error: {result.error or 'Unknown error.'}"

    if result.view_url:
        text = f"Presentation generated! View it here: {result.view_url}"
    else:
        text = "Presentation generated, but the API returned no view link."
    if result.file_path:
        text += f"\nSaved exported file to: {result.file_path}"
    return text


async def run_generation(arguments: Dict[str, Any], config: Config) -> str:
    """Run the blocking generation flow off the event loop and render the reply text."""
    params = {k: v for k, v in arguments.items() if v is not None}
    result = await asyncio.to_thread(generate_presentation, params, config=config)
    return format_result(result)


def register_generation_tools(server: FastMCP, config: Config) -> None:
    @server.tool(name=TOOL_NAME, description=TOOL_DESCRIPTION)
    async def generate_presentation_tool(
        inputText: Annotated[str, Field(description="Prompt/topic text. Required by Gamma v0.2.")],
        textMode: Annotated[Optional[TextMode], Field(description="How to treat the inputText.")] = None,
        format: Annotated[Optional[OutputFormat], Field(description="Output format.")] = None,
        themeName: Annotated[Optional[str], Field(description="Theme name in Gamma.")] = None,
        numCards: Annotated[
            Optional[int], Field(ge=1, le=60, description="Number of cards when cardSplit=auto.")
        ] = None,
        cardSplit: Annotated[Optional[CardSplit], Field(description="How to split content into cards.")] = None,
        additionalInstructions: Annotated[Optional[str], Field(description="Extra instructions for Gamma.")] = None,
        exportAs: Annotated[
            Optional[ExportFormat], Field(description="Also export as a file. Will be downloaded locally.")
        ] = None,
        textAmount: Annotated[
            Optional[TextAmount],
            Field(description="How much text per card (brief/medium/detailed/extensive; short/long accepted)."),
        ] = None,
        tone: Annotated[Optional[str], Field(description="Tone, e.g. 'humorous and sarcastic'.")] = None,
        audience: Annotated[Optional[str], Field(description="Intended audience, e.g. 'students'.")] = None,
        language: Annotated[Optional[str], Field(description="Output language, e.g. 'en'.")] = None,
        imageSource: Annotated[Optional[ImageSource], Field(description="Where images come from.")] = None,
        imageModel: Annotated[Optional[str], Field(description="Image model, e.g. 'dall-e-3'.")] = None,
        imageStyle: Annotated[Optional[str], Field(description="Image style, e.g. 'line drawings'.")] = None,
        cardDimensions: Annotated[Optional[CardDimensions], Field(description="Card aspect ratio.")] = None,
        workspaceAccess: Annotated[Optional[WorkspaceAccess], Field(description="Access for workspace members.")] = None,
        externalAccess: Annotated[Optional[ExternalAccess], Field(description="Access for people outside the workspace.")] = None,
    ) -> str:
        arguments = dict(
            inputText=inputText,
            textMode=textMode,
            format=format,
            themeName=themeName,
            numCards=numCards,
            cardSplit=cardSplit,
            additionalInstructions=additionalInstructions,
            exportAs=exportAs,
            textAmount=textAmount,
            tone=tone,
            audience=audience,
            language=language,
            imageSource=imageSource,
            imageModel=imageModel,
            imageStyle=imageStyle,
            cardDimensions=cardDimensions,
            workspaceAccess=workspaceAccess,
            externalAccess=externalAccess,
        )
        log.info(f"{TOOL_NAME} called ({len(inputText)} chars of input)")
        return await run_generation(arguments, config)
