"""
Deterministic reveal.js markup for generated decks.

Produces:
- one ``<section>`` per slide, in deck order, tagged with ``data-index``
- the theme stylesheet URL for a deck theme (unknown themes fall back to night)
- Reveal options derived from the aspect ratio
- the interactive generator page and a standalone, printable deck document

All model- and search-sourced text is HTML-escaped before insertion.
"""

from __future__ import annotations

import html as html_mod
import json
from typing import Any

from briefdeck.schemas.deck import DEFAULT_THEME, THEMES, Deck, Slide

_DIMENSIONS = {
    "16:9": (1280, 720),
    "4:3": (1024, 768),
}


def _e(text: str | None) -> str:
    """HTML-escape helper."""
    return html_mod.escape(text or "")


def _safe_url(url: str | None) -> str | None:
    if not url:
        return None
    url = url.strip()
    if not url.lower().startswith(("https://", "http://")):
        return None
    return url


def _js(value: Any) -> str:
    # JSON literal that is safe to embed inside a <script> block
    return json.dumps(value).replace("</", "<\\/")


# ---------------------------------------------------------------------------
# Theme + Reveal configuration
# ---------------------------------------------------------------------------

def theme_name(theme: str | None) -> str:
    return theme if theme in THEMES else DEFAULT_THEME


def theme_stylesheet_href(theme: str | None, cdn_url: str) -> str:
    """URL of the reveal.js theme stylesheet for *theme*."""
    return f"{cdn_url.rstrip('/')}/dist/theme/{theme_name(theme)}.css"


def reveal_options(ratio: str | None) -> dict[str, Any]:
    width, height = _DIMENSIONS.get(ratio or "", _DIMENSIONS["16:9"])
    return {
        "hash": True,
        "slideNumber": True,
        "width": width,
        "height": height,
        "margin": 0.06,
        "transition": "fade",
    }


# ---------------------------------------------------------------------------
# Slides
# ---------------------------------------------------------------------------

def render_slide(slide: Slide, index: int) -> str:
    title = f"<h2>{_e(slide.title)}</h2>" if slide.title else ""
    subtitle = f'<p class="slide-subtitle">{_e(slide.subtitle)}</p>' if slide.subtitle else ""

    bullets = ""
    if slide.bullets:
        items = "".join(f"<li>{_e(b)}</li>" for b in slide.bullets)
        bullets = f"<ul>{items}</ul>"

    img = ""
    src = _safe_url(slide.image_url)
    if src:
        img = f'<img class="slide-image" src="{_e(src)}" alt="{_e(slide.image_query)}" />'

    notes = f'<aside class="notes">{_e(slide.notes)}</aside>' if slide.notes else ""

    return f'<section data-index="{index}">{title}{subtitle}{bullets}{img}{notes}</section>'


def render_sections(deck: Deck) -> str:
    """All slides of *deck* as reveal.js sections, joined by newlines."""
    return "\n".join(render_slide(s, i) for i, s in enumerate(deck.slides))


# ---------------------------------------------------------------------------
# Documents
# ---------------------------------------------------------------------------

_SLIDE_CSS = """
.reveal .slide-subtitle { opacity: .85; }
.reveal .slide-image { width: 100%; max-height: 45vh; object-fit: cover; border-radius: 12px; margin-top: 12px; }
"""


def render_standalone_deck(deck: Deck, title: str, cdn_url: str) -> str:
    """Self-contained reveal.js document for *deck*; printing it yields the PDF."""
    cdn = cdn_url.rstrip("/")
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="UTF-8">
<meta name="viewport" content="width=device-width, initial-scale=1.0">
<title>{_e(title)}</title>
<link rel="stylesheet" href="{cdn}/dist/reveal.css">
<link rel="stylesheet" href="{_e(theme_stylesheet_href(deck.theme, cdn))}">
<style>{_SLIDE_CSS}</style>
</head>
<body>
<div class="reveal">
  <div class="slides">
{render_sections(deck)}
  </div>
</div>
<script src="{cdn}/dist/reveal.js"></script>
<script>Reveal.initialize({_js(reveal_options(deck.ratio))});</script>
</body>
</html>"""


def render_app_page(project_name: str, api_prefix: str, cdn_url: str) -> str:
    """The generator page: brief form on the left, live reveal.js deck on the right."""
    cdn = cdn_url.rstrip("/")
    prefix = api_prefix.rstrip("/")
    placeholder = (
        "Ex: Create a 12-slide investor deck for a cybersecurity SaaS.\n"
        "Tone: serious, enterprise.\n"
        "Include: problem, market size, product demo, traction metrics, GTM, roadmap, team, ask.\n"
        "Use 1 hero image per section; factual tone; concise bullets."
    )

    return f"""<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="UTF-8">
<meta name="viewport" content="width=device-width, initial-scale=1.0">
<title>{_e(project_name)} · Presentation Generator</title>
<link rel="stylesheet" href="{cdn}/dist/reveal.css">
<link id="theme-stylesheet" rel="stylesheet" href="{_e(theme_stylesheet_href(DEFAULT_THEME, cdn))}">
<style>
*, *::before, *::after {{ box-sizing: border-box; }}
html, body {{ margin: 0; height: 100%; font-family: system-ui, sans-serif; }}
.layout {{ display: grid; grid-template-columns: 420px 1fr; min-height: 100vh; }}
.panel {{ padding: 20px; border-right: 1px solid #e5e7eb; background: linear-gradient(180deg, #f7fbfe, #fff); }}
.panel h1 {{ font-size: 1.5rem; font-weight: 600; margin: 0 0 8px; }}
.panel p {{ font-size: .875rem; opacity: .8; }}
.panel textarea {{ width: 100%; height: 12rem; padding: 12px; border-radius: 8px; border: 1px solid #d1d5db; }}
.actions {{ display: flex; gap: 8px; margin-top: 12px; }}
.actions button {{ padding: 8px 16px; border-radius: 8px; border: 1px solid #111; cursor: pointer; }}
.actions .primary {{ background: #000; color: #fff; }}
.actions button:disabled {{ opacity: .6; cursor: progress; }}
.tip {{ margin-top: 24px; font-size: .75rem; opacity: .7; }}
.stage {{ position: relative; }}
{_SLIDE_CSS}
@media print {{
  .panel {{ display: none; }}
  .layout {{ display: block; }}
}}
</style>
</head>
<body>
<div class="layout">
  <div class="panel">
    <h1>Proposal/Presentation Generator</h1>
    <p>Describe what you want. Be specific about audience, tone, visuals, and sections.</p>
    <textarea id="brief" placeholder="{_e(placeholder)}"></textarea>
    <div class="actions">
      <button id="generate" class="primary">Generate</button>
      <button id="export">Export PDF</button>
    </div>
    <div class="tip">
      <p>Tip: Add target (VCs, enterprise buyer), tone (formal), color palette, image vibe, and required sections.</p>
    </div>
  </div>
  <div class="stage">
    <div id="deck" class="reveal"><div class="slides"></div></div>
  </div>
</div>

<script src="{cdn}/dist/reveal.js"></script>
<script>
(function() {{
  const GENERATE_URL = {_js(prefix + "/generate")};
  const RENDER_URL = {_js(prefix + "/render")};
  const ALERT_TEXT = "Generation failed. Check API keys and try again.";

  const briefEl = document.getElementById('brief');
  const generateBtn = document.getElementById('generate');
  const exportBtn = document.getElementById('export');
  const themeLink = document.getElementById('theme-stylesheet');
  const deckEl = document.getElementById('deck');
  const slidesEl = deckEl.querySelector('.slides');

  const state = {{ loading: false, deck: null, reveal: null }};

  function setLoading(loading) {{
    state.loading = loading;
    generateBtn.disabled = loading;
    generateBtn.textContent = loading ? 'Generating...' : 'Generate';
  }}

  async function postJSON(url, body) {{
    const res = await fetch(url, {{
      method: 'POST',
      headers: {{ 'Content-Type': 'application/json' }},
      body: JSON.stringify(body),
    }});
    if (!res.ok) throw new Error('HTTP ' + res.status);
    return res.json();
  }}

  // Only one Reveal controller may be bound to the container at a time
  async function showDeck(deck) {{
    const view = await postJSON(RENDER_URL, deck);
    if (state.reveal) {{
      state.reveal.destroy();
      state.reveal = null;
    }}
    themeLink.href = view.themeHref;
    slidesEl.innerHTML = view.html;
    state.deck = deck;
    state.reveal = new Reveal(deckEl, view.options);
    await state.reveal.initialize();
  }}

  async function generate() {{
    const brief = briefEl.value;
    if (!brief.trim()) return;
    setLoading(true);
    try {{
      const json = await postJSON(GENERATE_URL, {{ brief: brief }});
      await showDeck(json.deck);
    }} catch (err) {{
      alert(ALERT_TEXT);
    }} finally {{
      setLoading(false);
    }}
  }}

  generateBtn.addEventListener('click', generate);
  exportBtn.addEventListener('click', function() {{ window.print(); }});
  window.addEventListener('beforeunload', function() {{
    if (state.reveal) state.reveal.destroy();
  }});
}})();
</script>
</body>
</html>"""
