from flask import Blueprint, render_template_string

health_bp = Blueprint('health', __name__)

INDEX_HTML = """<!doctype html>
<html>
  <head><meta charset="utf-8"><title>Menu Visualizer</title></head>
  <body style="font-family: system-ui, -apple-system, Segoe UI, Roboto, Arial, sans-serif; padding: 24px; max-width: 760px; margin: auto">
    <h1>Menu Visualizer</h1>
    <form method="POST" action="/api/process-menu" enctype="multipart/form-data" style="border:1px solid #eee; padding:16px; border-radius:10px">
      <div><textarea name="menuText" rows="8" style="width:100%" placeholder="Paste a menu..."></textarea></div>
      <div style="margin-top:8px"><input type="file" name="menuFile" accept="image/*,text/plain"></div>
      <div style="margin-top:8px"><button type="submit">Process menu (non-streaming)</button></div>
    </form>
    <p style="margin-top:16px;color:#666">For live progress, POST the same form to /api/process-menu-stream.</p>
  </body>
</html>"""


@health_bp.get("/")
def index():
    """Main index page"""
    return render_template_string(INDEX_HTML)


@health_bp.get("/health")
def health():
    """Health check endpoint"""
    return {"ok": True}, 200
