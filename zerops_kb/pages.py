"""HTML landing page served at the API root."""

from string import Template

from . import __version__

_LANDING_TEMPLATE = Template(
    """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Zerops Knowledge Base API</title>
    <style>
        body {
            font-family: -apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, Arial, sans-serif;
            line-height: 1.6;
            color: #333;
            max-width: 900px;
            margin: 0 auto;
            padding: 20px;
            background: linear-gradient(135deg, #667eea 0%, #764ba2 100%);
            min-height: 100vh;
        }
        .container { background: white; border-radius: 10px; padding: 40px; }
        h1 { color: #764ba2; border-bottom: 3px solid #667eea; padding-bottom: 10px; }
        h2 { color: #667eea; margin-top: 30px; }
        .endpoint {
            background: #f8f9fa;
            border-left: 4px solid #667eea;
            padding: 15px;
            margin: 20px 0;
            border-radius: 5px;
        }
        .method {
            display: inline-block;
            padding: 3px 8px;
            border-radius: 3px;
            font-weight: bold;
            font-size: 12px;
            margin-right: 10px;
            color: white;
        }
        .get { background: #28a745; }
        .post { background: #007bff; }
        code { background: #f4f4f4; padding: 2px 6px; border-radius: 3px; }
        pre { background: #2d2d2d; color: #f8f8f2; padding: 15px; border-radius: 5px; }
        .stats { display: flex; gap: 20px; margin: 20px 0; }
        .stat {
            background: linear-gradient(135deg, #667eea 0%, #764ba2 100%);
            color: white;
            padding: 15px 20px;
            border-radius: 8px;
            flex: 1;
            text-align: center;
        }
        .stat-value { font-size: 2em; font-weight: bold; }
        .try-button {
            display: inline-block;
            background: #667eea;
            color: white;
            padding: 10px 20px;
            border-radius: 5px;
            text-decoration: none;
            margin: 10px 5px;
        }
    </style>
</head>
<body>
    <div class="container">
        <h1>Zerops Knowledge Base API</h1>
        <p>Semantic search API for the Zerops platform knowledge base. In-memory search with semantic IDs.</p>

        <div class="stats">
            <div class="stat">
                <div class="stat-value" id="item-count">$item_count</div>
                <div>Knowledge Items</div>
            </div>
            <div class="stat">
                <div class="stat-value">2</div>
                <div>API Endpoints</div>
            </div>
            <div class="stat">
                <div class="stat-value">v$version</div>
                <div>Version</div>
            </div>
        </div>

        <h2>API Endpoints</h2>

        <div class="endpoint">
            <span class="method post">POST</span>
            <code>/api/v1/search</code>
            <p>Search knowledge with simple text queries. Terms may be separated by commas or spaces.</p>
            <pre>{
  "query": "nodejs postgresql",
  "limit": 10
}</pre>
        </div>

        <div class="endpoint">
            <span class="method get">GET</span>
            <code>/api/v1/knowledge/{id}</code>
            <p>Full knowledge content by semantic ID, e.g. <code>service/nodejs</code> or <code>recipe/laravel-jetstream</code>.</p>
        </div>

        <div class="endpoint">
            <span class="method get">GET</span>
            <code>/health</code>
            <p>Health check endpoint for monitoring</p>
        </div>

        <h2>Try It Out</h2>
        <a href="/api/v1/knowledge/service/nodejs" class="try-button">Node.js Service</a>
        <a href="/api/v1/knowledge/recipe/laravel-jetstream" class="try-button">Laravel Recipe</a>
        <a href="/api/v1/knowledge/service/postgresql" class="try-button">PostgreSQL Service</a>
        <a href="/health" class="try-button">Health Check</a>

        <h2>Example Usage</h2>
        <pre>curl -X POST $base_url/api/v1/search \\
  -H "Content-Type: application/json" \\
  -d '{"query": "nodejs postgresql"}'</pre>

        <h2>Semantic ID Structure</h2>
        <p>All knowledge items use semantic IDs in the format <code>{type}/{name}</code>:</p>
        <ul>
            <li><code>service/</code> - Zerops services (nodejs, postgresql, mariadb, ...)</li>
            <li><code>recipe/</code> - Deployment recipes (laravel, django, nextjs, ...)</li>
            <li><code>patterns/</code> - Deployment patterns</li>
            <li><code>runtimes/</code> - Runtime configurations</li>
            <li><code>nginx/</code> - Nginx configurations</li>
        </ul>
    </div>
</body>
</html>"""
)


def render_landing_page(item_count: int, base_url: str) -> str:
    """Render the landing page with the live item count."""
    return _LANDING_TEMPLATE.substitute(
        item_count=item_count,
        version=__version__,
        base_url=base_url.rstrip("/"),
    )
