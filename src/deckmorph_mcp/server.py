"""DeckMorph MCP Server - slide transition synthesis tools for MCP clients."""

from mcp.server.fastmcp import FastMCP, Context
import json
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Dict, Any
import os
from pathlib import Path

from deckmorph.core.config import list_presets
from deckmorph.core.errors import DeckMorphError
from deckmorph.core.state import SessionState

# Configure logging
logging.basicConfig(level=logging.INFO,
                    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
logger = logging.getLogger("DeckMorph")

DEFAULT_PRESET = "default"


# ── Global State ────────────────────────────────────────────────────────

_session_state = SessionState()


def _new_session() -> SessionState:
    session = SessionState()
    preset_name = os.getenv("DECKMORPH_PRESET", DEFAULT_PRESET)
    try:
        session.set_preset(preset_name)
    except DeckMorphError as e:
        logger.warning(f"{str(e)}, falling back to '{DEFAULT_PRESET}'")
    return session


# ── Server Setup ────────────────────────────────────────────────────────

@asynccontextmanager
async def server_lifespan(server: FastMCP) -> AsyncIterator[Dict[str, Any]]:
    global _session_state
    try:
        logger.info("DeckMorph server starting up")
        _session_state = _new_session()
        logger.info(f"Using transition preset '{_session_state.preset_name}'")
        yield {}
    finally:
        logger.info("DeckMorph server shut down")


mcp = FastMCP("DeckMorph", lifespan=server_lifespan)


# ═══════════════════════════════════════════════════════════════════════
# DECK TOOLS
# ═══════════════════════════════════════════════════════════════════════

@mcp.tool()
def load_slides(ctx: Context, slides_json: str) -> str:
    """Load a slide deck to synthesize transitions for.

    Parameters:
    - slides_json: JSON array of slides, each with canvasElements (rect, text,
      image or video shapes in z-order), duration in seconds and optional audio
    """
    try:
        count = _session_state.load_slides_json(slides_json)
    except DeckMorphError as e:
        return f"Error: {str(e)}"
    return json.dumps({
        "status": "loaded",
        "slide_count": count,
        "version": _session_state.version,
    }, indent=2)


@mcp.tool()
def load_slides_file(ctx: Context, path: str) -> str:
    """Load a slide deck from a JSON file.

    Parameters:
    - path: Path to a JSON file holding the slide array
    """
    file_path = Path(path)
    if not file_path.exists():
        return f"Error: File not found at {path}"
    try:
        count = _session_state.load_slides_json(file_path.read_text())
    except (DeckMorphError, OSError, UnicodeDecodeError) as e:
        return f"Error loading slides: {str(e)}"
    return json.dumps({
        "status": "loaded",
        "path": str(file_path),
        "slide_count": count,
        "version": _session_state.version,
    }, indent=2)


# ═══════════════════════════════════════════════════════════════════════
# TIMELINE TOOLS
# ═══════════════════════════════════════════════════════════════════════

@mcp.tool()
def get_timeline(ctx: Context) -> str:
    """Get the synthesized animation timeline of the whole deck."""
    if not _session_state.slides:
        return "No slides loaded. Use load_slides or load_slides_file first."
    try:
        timeline = _session_state.timeline()
    except DeckMorphError as e:
        logger.error(f"Synthesis error: {str(e)}")
        return f"Error synthesizing transitions: {str(e)}"
    return json.dumps(timeline.model_dump(mode="json", by_alias=True), indent=2)


@mcp.tool()
def get_audio_cues(ctx: Context) -> str:
    """Get when each slide's audio should start playing."""
    if not _session_state.slides:
        return "No slides loaded. Use load_slides or load_slides_file first."
    try:
        timeline = _session_state.timeline()
    except DeckMorphError as e:
        logger.error(f"Synthesis error: {str(e)}")
        return f"Error synthesizing transitions: {str(e)}"
    return json.dumps({
        "audioCues": [cue.model_dump(mode="json", by_alias=True) for cue in timeline.audio_cues],
        "totalDuration": timeline.total_duration,
    }, indent=2)


@mcp.tool()
def preview_slide(ctx: Context, slide_index: int) -> str:
    """Get the animations of the shapes of one slide.

    Parameters:
    - slide_index: Zero-based index of the slide
    """
    try:
        items = _session_state.preview_slide(slide_index)
    except DeckMorphError as e:
        logger.error(f"Synthesis error: {str(e)}")
        return f"Error synthesizing transitions: {str(e)}"
    if items is None:
        return f"Error: Slide index {slide_index} out of range (deck has {len(_session_state.slides)} slides)."
    timeline = _session_state.timeline()
    return json.dumps({
        "slideIndex": slide_index,
        "startTime": timeline.slide_start_times[slide_index],
        "items": [item.model_dump(mode="json", by_alias=True) for item in items],
    }, indent=2)


# ═══════════════════════════════════════════════════════════════════════
# CONFIGURATION TOOLS
# ═══════════════════════════════════════════════════════════════════════

@mcp.tool()
def list_transition_presets(ctx: Context) -> str:
    """List the available transition presets."""
    return json.dumps(list_presets(), indent=2)


@mcp.tool()
def set_transition_preset(ctx: Context, name: str) -> str:
    """Switch the transition timing preset.

    Parameters:
    - name: Preset name (default, snappy, cinematic)
    """
    try:
        preset = _session_state.set_preset(name)
    except DeckMorphError as e:
        return f"Error: {str(e)}. Use list_transition_presets to see the options."
    return json.dumps({
        "status": "updated",
        "preset": preset.name,
        "description": preset.description,
    }, indent=2)


@mcp.tool()
def get_session_status(ctx: Context) -> str:
    """Get the loaded deck size, active preset and timeline length."""
    status = _session_state.summary()
    if _session_state.slides:
        try:
            status["total_duration"] = _session_state.timeline().total_duration
        except DeckMorphError as e:
            status["error"] = str(e)
    return json.dumps(status, indent=2)


# ═══════════════════════════════════════════════════════════════════════
# MCP PROMPT
# ═══════════════════════════════════════════════════════════════════════

@mcp.prompt()
def transition_workflow() -> str:
    """Recommended workflow for animating a slide deck"""
    return """You are helping the user animate transitions between slides. Follow this workflow:

1. **Load Slides**: Use load_slides() with a JSON slide array, or
   load_slides_file() with a path to one.

2. **Pick Timing**: Use list_transition_presets() and set_transition_preset()
   (default, snappy, cinematic) to choose how long transitions take.

3. **Inspect**: Use get_timeline() for the full animation timeline, or
   preview_slide() to check the animations of a single slide.
   - Rects that look alike on adjacent slides morph into each other
   - New shapes slide in from the closest stage edge, largest first
   - Text enters after the shape it sits on

4. **Audio**: Use get_audio_cues() to see when each slide's narration starts.

Tips:
- Changing the preset recomputes the timeline on the next get_timeline() call
- Use get_session_status() to check overall progress
"""


# ── Main ────────────────────────────────────────────────────────────────

def main():
    """Run the MCP server"""
    mcp.run()


if __name__ == "__main__":
    main()
