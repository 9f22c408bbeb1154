"""HTML page served at the root path to show the API is up."""

from html import escape

ENDPOINTS = (
    "GET /health",
    "GET {prefix}/issues",
    "GET {prefix}/issues/:id",
    "POST {prefix}/issues",
    "PATCH {prefix}/issues/:id/status",
)

_PAGE = """<!DOCTYPE html>
<html>
  <head>
    <title>API Server Running</title>
    <style>
      body {{ font-family: system-ui; display: flex; align-items: center; justify-content: center; height: 100vh; margin: 0; background: linear-gradient(135deg, #667eea 0%, #764ba2 100%); color: white; }}
      .container {{ text-align: center; }}
      h1 {{ font-size: 3rem; margin: 0; }}
      p {{ font-size: 1.2rem; opacity: 0.9; }}
      .endpoints {{ background: rgba(255,255,255,0.1); padding: 1.5rem; border-radius: 12px; margin-top: 2rem; text-align: left; }}
      .endpoints code {{ background: rgba(0,0,0,0.3); padding: 0.3rem 0.6rem; border-radius: 4px; display: block; margin: 0.5rem 0; }}
    </style>
  </head>
  <body>
    <div class="container">
      <h1>&#x2705; {app_name} API is Running</h1>
      <p>Backend server is live on port {port}</p>
      <div class="endpoints">
        <strong>Available endpoints:</strong>
{endpoints}
      </div>
    </div>
  </body>
</html>
"""


def render_status_page(app_name: str, port: int, api_prefix: str = "/api") -> str:
    endpoints = "\n".join(
        f"        <code>{escape(endpoint.format(prefix=api_prefix))}</code>" for endpoint in ENDPOINTS
    )
    return _PAGE.format(app_name=escape(app_name), port=port, endpoints=endpoints)
