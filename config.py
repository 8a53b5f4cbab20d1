"""
Constants and configuration for the asset dependency graph engine.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import os
from typing import List

from pydantic import field_validator
from pydantic_settings import BaseSettings


ASSETGRAPH_LOG_LEVEL = os.getenv("ASSETGRAPH_LOG_LEVEL", "INFO").upper()
ASSETGRAPH_API_HOST = os.getenv("ASSETGRAPH_API_HOST", "127.0.0.1")
ASSETGRAPH_API_PORT = int(os.getenv("ASSETGRAPH_API_PORT", "3001"))

APP_VERSION = "1.0.0"

# analysis aggregates always build their tree with this depth
ANALYSIS_TREE_DEPTH = 5
MOST_REFERENCED_LIMIT = 10

DOT_GRAPH_NAME = "AssetDependencies"
CSV_HEADER = ("Asset", "Dependency")
YAML_PLACEHOLDER = "YAML export not implemented yet"

REPORT_TITLE = "# Asset Dependency Report"


class Settings(BaseSettings):
    log_level: str = ASSETGRAPH_LOG_LEVEL
    api_host: str = ASSETGRAPH_API_HOST
    api_port: int = ASSETGRAPH_API_PORT
    cors_origins: List[str] = [
        "http://localhost:5173",
        "http://127.0.0.1:5173",
        "tauri://localhost",
    ]

    # tree construction
    analysis_tree_depth: int = ANALYSIS_TREE_DEPTH
    tree_default_depth: int = ANALYSIS_TREE_DEPTH
    # upper bound accepted from callers on the HTTP surface
    tree_max_depth_limit: int = 64

    # statistics
    most_referenced_limit: int = MOST_REFERENCED_LIMIT

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return str(v or "INFO").strip().upper()

    model_config = {
        "env_prefix": "ASSETGRAPH_",
        "extra": "ignore",
    }


settings = Settings()
