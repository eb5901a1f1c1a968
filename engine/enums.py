"""
Enumerations for engine error kinds.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from enum import Enum

from config import ERROR_STATUS_CODES


class ErrorKind(str, Enum):
    invalid_input = "InvalidInput"
    degenerate_series = "DegenerateSeries"

    def status_code(self) -> int:
        return ERROR_STATUS_CODES[self.value]
