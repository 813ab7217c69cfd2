"""
Synter MCP Server — ad campaign management tools over the Model Context Protocol

Each tool call is forwarded as one authenticated POST to the Synter API.
"""

__version__ = "1.0.6"

from .config import ApiSettings, Config
from .router import Router
from .server import SynterMCPServer
