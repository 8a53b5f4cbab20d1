"""
Enumerations for export formats and diagnostic kinds

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from enum import Enum
from typing import Optional


class ExportFormat(str, Enum):
    json = "json"
    dot = "dot"
    csv = "csv"
    yaml = "yaml"

    @classmethod
    def parse(cls, name: str) -> Optional[ExportFormat]:
        key = (name or "").lower()
        return cls._value2member_map_.get(key)  # type: ignore[return-value]


class IssueKind(str, Enum):
    self_reference = "self_reference"
    circular = "circular"
    empty_entry = "empty_entry"
