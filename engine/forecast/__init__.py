"""
Forecasting logic for ordered observation sequences: a trailing moving average used as a naive one-step-ahead baseline predictor.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""


from engine.forecast.moving_average import forecast

__all__ = ["forecast"]
