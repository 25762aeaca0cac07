"""
Example: serving versioned assets from a FastAPI application

Install dependencies:
    pip install -e ".[web]" uvicorn

Usage (from the examples directory):
    uvicorn app:app --port 8080
"""
import logging

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from asset_mapper.config import load_config
from asset_mapper.mapper import AssetMapper
from asset_mapper.templating import register_asset_globals

# Setup logging
logging.basicConfig(
    level=logging.INFO,
    format='%(levelname)s:\t%(name)s - %(message)s'
)
logger = logging.getLogger(__name__)

# Scan directories and load manifests listed in assets.yaml
config = load_config("assets.yaml")
mapper = AssetMapper.from_config(config)
logger.info(f"Asset mapper ready with {len(mapper.registry)} assets")

app = FastAPI(title="asset_mapper example")

# Scanned paths include the scanned directory, so mount it at the root of the public path
app.mount("/assets", StaticFiles(directory="assets"), name="assets")

templates = Jinja2Templates(directory="templates")
register_asset_globals(templates.env, mapper)


@app.get("/", response_class=HTMLResponse)
async def home(request: Request):
    """Render the home page with versioned asset tags."""
    return templates.TemplateResponse(request, "index.html", {"title": "Home"})
