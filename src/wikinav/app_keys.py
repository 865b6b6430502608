"""Application keys for type-safe app configuration access."""

from pathlib import Path

from aiohttp import web

source_dir_key = web.AppKey("source_dir", Path)
