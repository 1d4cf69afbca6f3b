"""
LLM content generation for slide decks.

Agents
------
- **deck agent** – turns a free-text brief into deck JSON (theme, ratio,
  ordered slides) as plain completion text.

The completion is untrusted text: :func:`parse_completion` never raises and
hands back ``{}`` for anything that is not a JSON object, which the
normalizer then turns into the default, empty deck.
"""

import json
import logging
from typing import Any

from openai import AsyncOpenAI
from pydantic_ai import Agent
from pydantic_ai.exceptions import UnexpectedModelBehavior
from pydantic_ai.models import Model
from pydantic_ai.models.openai import OpenAIChatModel
from pydantic_ai.providers.openai import OpenAIProvider
from pydantic_ai.settings import ModelSettings

from briefdeck.core.config import Settings
from briefdeck.schemas.deck import THEMES

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Prompts
# ---------------------------------------------------------------------------

_DECK_SYSTEM_PROMPT = (
    "You generate elite, factual, executive-ready slide content. Return strict JSON only."
)

_DECK_SECTIONS = (
    "Problem, Solution, Market, Product, Traction, GTM, Business Model, "
    "Roadmap, Competition, Team, Financials, Ask"
)


def build_deck_prompt(brief: str) -> str:
    """Interpolate *brief* into the user prompt describing the deck JSON shape."""
    themes = ",".join(f'"{t}"' for t in THEMES)
    return f"""
Brief:
{brief}

Return a JSON object with:
{{
  "deck": {{
    "theme": one of [{themes}],
    "ratio": "16:9" or "4:3",
    "slides": [
      {{
        "title": string,
        "subtitle": string (optional),
        "bullets": [2-6 concise bullets without emojis],
        "imageQuery": string (keyword for stock photo),
        "notes": string (speaker notes, optional)
      }}
    ]
  }}
}}

Rules:
- Facts over fluff. If unknown, use general phrasing.
- Keep titles <= 8 words.
- Enterprise-credible tone.
- Structure: {_DECK_SECTIONS}.
- 'imageQuery' should be short visual concepts (e.g., "enterprise cybersecurity dashboard", "cloud lock").
"""


# ---------------------------------------------------------------------------
# Agent
# ---------------------------------------------------------------------------

def build_deck_agent(config: Settings) -> Agent[None, str]:
    """Create the deck agent bound to the configured OpenAI key and model.

    One upstream call per brief: the SDK does not retry failed requests and
    the agent does not re-ask for output it could not use.
    """
    client = AsyncOpenAI(api_key=config.OPENAI_API_KEY, max_retries=0)
    model = OpenAIChatModel(
        config.OPENAI_MODEL,
        provider=OpenAIProvider(openai_client=client),
    )
    return make_deck_agent(model, temperature=config.OPENAI_TEMPERATURE)


def make_deck_agent(model: Model, temperature: float = 0.7) -> Agent[None, str]:
    return Agent(
        model,
        output_type=str,
        output_retries=0,
        system_prompt=_DECK_SYSTEM_PROMPT,
        model_settings=ModelSettings(temperature=temperature),
    )


def parse_completion(text: str | None) -> dict[str, Any]:
    """Parse the completion as a JSON object, falling back to ``{}``."""
    try:
        parsed = json.loads(text or "{}")
    except (json.JSONDecodeError, TypeError):
        logger.warning("Model returned non-JSON content (%d chars)", len(text or ""))
        return {}
    if not isinstance(parsed, dict):
        logger.warning("Model returned JSON %s instead of an object", type(parsed).__name__)
        return {}
    return parsed


async def generate_deck_json(agent: Agent[None, str], brief: str) -> dict[str, Any]:
    """Run the deck agent for *brief* and return the parsed completion.

    Upstream failures (``ModelHTTPError`` for a non-success status, transport
    errors) propagate to the caller. An empty completion parses as ``{}``.
    """
    try:
        result = await agent.run(build_deck_prompt(brief))
    except UnexpectedModelBehavior as exc:
        # empty completion, treated like unparsable text
        logger.warning("Model returned no usable content: %s", exc)
        return parse_completion(None)
    logger.debug("Raw deck completion: %s", result.output)
    return parse_completion(result.output)
