"""
Error taxonomy raised by the analysis engine.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import Any, Dict

from engine.enums import ErrorKind


class AnalysisError(Exception):
    kind: ErrorKind = ErrorKind.invalid_input

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind.value, "message": self.message}


class InvalidInput(AnalysisError):
    kind = ErrorKind.invalid_input


class DegenerateSeries(AnalysisError):
    kind = ErrorKind.degenerate_series
