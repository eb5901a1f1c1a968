"""
Trend estimation for ordered observation sequences using an ordinary least-squares slope of value against index.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from engine.trend.ols import estimate_trend

__all__ = ["estimate_trend"]
