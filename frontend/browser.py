"""Small browser-side scripts injected through Streamlit components."""
import json

SCROLL_DELAY_MS = 100
RESULT_ANCHOR_ID = "copycraft-result"


def _js_string(text: str) -> str:
    # keep "</script>" inside the payload from closing the tag
    return json.dumps(text).replace("</", "<\\/")


def clipboard_script(text: str) -> str:
    """
    Script that writes ``text`` verbatim to the user's clipboard.

    The async Clipboard API is tried first. When it is missing or rejects
    (permissions, insecure context) the text is copied through a hidden
    textarea in the parent document instead.
    """
    payload = _js_string(text)
    return f"""<script>
const text = {payload};
function fallbackCopy() {{
  const doc = window.parent.document;
  const area = doc.createElement("textarea");
  area.value = text;
  area.setAttribute("readonly", "");
  area.style.position = "fixed";
  area.style.opacity = "0";
  doc.body.appendChild(area);
  area.select();
  try {{
    if (!doc.execCommand("copy")) {{ console.error("CopyCraft: copy command was rejected"); }}
  }} catch (err) {{
    console.error("CopyCraft: copy failed", err);
  }} finally {{
    doc.body.removeChild(area);
  }}
}}
const clipboard = (window.parent && window.parent.navigator.clipboard) || navigator.clipboard;
if (clipboard && clipboard.writeText) {{
  clipboard.writeText(text).catch(fallbackCopy);
}} else {{
  fallbackCopy();
}}
</script>"""


def scroll_script(anchor_id: str = RESULT_ANCHOR_ID, delay_ms: int = SCROLL_DELAY_MS) -> str:
    """Script that smooth-scrolls the page to ``anchor_id`` after ``delay_ms``."""
    target = _js_string(anchor_id)
    return f"""<script>
setTimeout(function () {{
  const el = window.parent.document.getElementById({target});
  if (el) {{ el.scrollIntoView({{behavior: "smooth", block: "start"}}); }}
}}, {int(delay_ms)});
</script>"""


def anchor_html(anchor_id: str = RESULT_ANCHOR_ID) -> str:
    return f'<div id="{anchor_id}"></div>'
